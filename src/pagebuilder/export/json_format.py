"""
JSON exporter and its inverse.

This is the canonical persisted form of a page:

    {"config": {"useRouter": ..., "useRTKQuery": ...}, "components": [...]}

Element keys are written in the order ``id, type, x, y, width, height`` and
the optional ``content`` / ``styles`` keys only when present, so
``parse_json(render_json(d, c)) == (d, c)`` field for field.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Tuple

from pagebuilder.export.registry import ExportFormat, register_exporter
from pagebuilder.model.document import validate_document
from pagebuilder.model.elements import Document, Element, ElementKind, FeatureConfig, is_style_value

logger = logging.getLogger(__name__)

_REQUIRED_ELEMENT_KEYS = ("id", "type", "x", "y", "width", "height")
_OPTIONAL_ELEMENT_KEYS = ("content", "styles")


class ProjectFormatError(ValueError):
    """The text is not a valid serialized page."""


def to_dict(document: Document, config: FeatureConfig) -> Dict[str, Any]:
    return {
        "config": config.to_dict(),
        "components": [e.to_dict() for e in document],
    }


@register_exporter(ExportFormat.JSON)
def render_json(document: Document, config: FeatureConfig) -> str:
    return json.dumps(to_dict(document, config), indent=2, ensure_ascii=False)


# ---- parsing ----

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_config(data: Any) -> FeatureConfig:
    if not isinstance(data, dict):
        raise ProjectFormatError("'config' must be an object.")
    for key in ("useRouter", "useRTKQuery"):
        if key not in data:
            raise ProjectFormatError(f"'config' is missing '{key}'.")
        if not isinstance(data[key], bool):
            raise ProjectFormatError(f"'config.{key}' must be a boolean.")
    return FeatureConfig.from_dict(data)


def _parse_element(index: int, data: Any) -> Element:
    if not isinstance(data, dict):
        raise ProjectFormatError(f"Component #{index} must be an object.")

    missing = [key for key in _REQUIRED_ELEMENT_KEYS if key not in data]
    if missing:
        raise ProjectFormatError(f"Component #{index} is missing: {', '.join(missing)}")
    unknown = set(data) - set(_REQUIRED_ELEMENT_KEYS) - set(_OPTIONAL_ELEMENT_KEYS)
    if unknown:
        raise ProjectFormatError(f"Component #{index} has unknown keys: {', '.join(sorted(unknown))}")

    if not isinstance(data["id"], str):
        raise ProjectFormatError(f"Component #{index}: 'id' must be a string.")
    if data["type"] not in {k.value for k in ElementKind}:
        raise ProjectFormatError(f"Component #{index}: unknown type '{data['type']}'.")
    for key in ("x", "y", "width", "height"):
        if not _is_number(data[key]):
            raise ProjectFormatError(f"Component #{index}: '{key}' must be a number.")
    if "content" in data and not isinstance(data["content"], str):
        raise ProjectFormatError(f"Component #{index}: 'content' must be a string.")
    if "styles" in data and not isinstance(data["styles"], dict):
        raise ProjectFormatError(f"Component #{index}: 'styles' must be an object.")
    for name, value in data.get("styles", {}).items():
        if not is_style_value(value):
            raise ProjectFormatError(
                f"Component #{index}: style '{name}' must be a string or a number, got {value!r}."
            )

    try:
        return Element.from_dict(data)
    except ValueError as e:
        raise ProjectFormatError(f"Component #{index}: {e}") from e


def from_dict(data: Any) -> Tuple[Document, FeatureConfig]:
    if not isinstance(data, dict):
        raise ProjectFormatError("A page must be a JSON object.")
    missing = [key for key in ("config", "components") if key not in data]
    if missing:
        raise ProjectFormatError(f"A page is missing: {', '.join(missing)}")
    components = data["components"]
    if not isinstance(components, list):
        raise ProjectFormatError("'components' must be an array.")

    config = _parse_config(data["config"])
    document = validate_document(_parse_element(i, c) for i, c in enumerate(components))
    logger.debug(f"Parsed page with {len(document)} component(s).")
    return document, config


def parse_json(text: str) -> Tuple[Document, FeatureConfig]:
    """Inverse of the JSON export. Duplicate ids raise DuplicateElementIdError."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProjectFormatError(f"Invalid JSON: {e}") from e
    return from_dict(data)
