from __future__ import annotations

from typing import Any, Callable, Iterator, List

from pydantic import BaseModel, Field

Handler = Callable[[], Any]


class HandlerRegistry(BaseModel):
    """Ordered list of zero-argument lifecycle callbacks.

    Duplicates are kept and fire once per registration.
    """

    handlers: List[Handler] = Field(default_factory=list)

    model_config = {"arbitrary_types_allowed": True}

    def add(self, handler: Handler) -> None:
        self.handlers.append(handler)

    def remove(self, handler: Handler) -> None:
        # Equality, not identity: bound methods are rebuilt on every attribute access.
        self.handlers = [h for h in self.handlers if h != handler]

    def trigger(self) -> None:
        for handler in list(self.handlers):
            handler()

    def __len__(self) -> int:
        return len(self.handlers)

    def __iter__(self) -> Iterator[Handler]:  # type: ignore[override]
        return iter(list(self.handlers))


__all__ = ["Handler", "HandlerRegistry"]
