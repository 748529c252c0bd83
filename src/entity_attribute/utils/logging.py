from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Route entity_attribute logs to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
    logging.getLogger("entity_attribute").setLevel(logging.DEBUG if verbose else logging.WARNING)


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator logging calls and results at DEBUG and failures at WARNING."""

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        logger = logging.getLogger(logger_name or func.__module__)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            logger.debug("Calling %s args=%s kwargs=%s", func.__name__, args, kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.warning("%s failed: %s", func.__name__, e)
                raise
            logger.debug("%s -> %s", func.__name__, _summarize(result))
            return result

        return _wrapper

    return _decorator


def _summarize(result: Any) -> str:
    if isinstance(result, dict):
        return f"{len(result)} item(s): {', '.join(sorted(map(str, result)))}"
    return repr(result)
