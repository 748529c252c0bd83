from __future__ import annotations

import glob
import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from entity_attribute.core.attribute import EntityAttribute
from entity_attribute.core.config import SchedulerSettings
from entity_attribute.core.exceptions import EntityAttributeError
from entity_attribute.core.scheduler import Clock
from entity_attribute.io.loaders.errors import LoaderError
from entity_attribute.io.loaders.file_spec import AttributeFileSpec
from entity_attribute.utils.logging import log_calls


def _read_yaml_file(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise LoaderError(path, "Malformed YAML", cause=exc) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise LoaderError(path, "Unreadable file", cause=exc) from exc


def definition_files(path: str) -> List[str]:
    """Return ``path`` itself if it is a file, else every ``*.yaml`` below it (sorted)."""
    if os.path.isfile(path):
        return [path]
    return sorted(glob.glob(os.path.join(path, "**", "*.yaml"), recursive=True))


@log_calls()
def load_attributes(
    path: str,
    *,
    settings: Optional[SchedulerSettings] = None,
    clock: Optional[Clock] = None,
) -> Dict[str, EntityAttribute]:
    """Load attribute definitions from a YAML file or a directory tree of them.

    Expected format:
    attributes:
      - name: health
        value: 100
        update_type: set
        update_value: 100
        update_speed: 1000

    Returns attributes keyed by name. A missing path yields an empty dict.
    """
    attributes: Dict[str, EntityAttribute] = {}
    if not os.path.exists(path):
        return attributes
    for fp in definition_files(path):
        data = _read_yaml_file(fp)
        try:
            spec = AttributeFileSpec.model_validate(data)
        except ValidationError as exc:
            raise LoaderError(fp, "Invalid attribute definition", cause=exc) from exc
        for entry in spec.attributes:
            try:
                attribute = entry.build(settings=settings, clock=clock)
            except EntityAttributeError as exc:
                raise LoaderError(fp, f"Invalid attribute '{entry.name}'", cause=exc) from exc
            if attribute.name in attributes:
                raise LoaderError(fp, f"Duplicate attribute name: {attribute.name}")
            attributes[attribute.name] = attribute
    return attributes
