"""
Style helpers shared by the markup and typed-source exporters.

Custom element styles are stored the way the hosting UI hands them over
(camelCase CSS property names, numbers meaning pixels). They are merged after
the kind presentation, but never override the geometry properties.
"""
from __future__ import annotations

import html
import numbers
import re
from typing import List, Mapping, Optional

from pagebuilder.model.elements import Element, StyleValue
from pagebuilder.model.geometry_primitives import Number

GEOMETRY_PROPERTIES = frozenset({"position", "left", "top", "width", "height"})

# Numeric values of these properties are not lengths
UNITLESS_PROPERTIES = frozenset({
    "opacity", "zIndex", "fontWeight", "lineHeight", "flex", "flexGrow",
    "flexShrink", "order", "zoom",
})

_UPPER = re.compile(r"(?<!^)([A-Z])")
_DASHED = re.compile(r"-([a-z])")


def format_number(value: Number) -> str:
    """Render a number the way a JavaScript template literal would (10.0 -> 10)."""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def kebab_case(name: str) -> str:
    return _UPPER.sub(r"-\1", name).lower()


def camel_case(name: str) -> str:
    return _DASHED.sub(lambda m: m.group(1).upper(), name)


def custom_properties(styles: Optional[Mapping[str, StyleValue]]) -> List[tuple[str, StyleValue]]:
    """Custom style entries (camelCase names) minus the geometry properties."""
    if not styles:
        return []
    entries = []
    for name, value in styles.items():
        key = camel_case(name)
        if key in GEOMETRY_PROPERTIES:
            continue
        entries.append((key, value))
    return entries


# ---- markup ----

def geometry_css(element: Element) -> str:
    return (
        f"position:absolute;"
        f"left:{format_number(element.x)}px;"
        f"top:{format_number(element.y)}px;"
        f"width:{format_number(element.width)}px;"
        f"height:{format_number(element.height)}px;"
    )


def css_value(name: str, value: StyleValue) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        suffix = "" if name in UNITLESS_PROPERTIES or value == 0 else "px"
        return f"{format_number(value)}{suffix}"
    return str(value)


def element_css(element: Element) -> str:
    """Full inline CSS: geometry, kind presentation, then custom styles."""
    custom = "".join(
        f"{kebab_case(name)}:{css_value(name, value)};"
        for name, value in custom_properties(element.styles)
    )
    return geometry_css(element) + element.descriptor.markup_style + custom


def escape_markup(text: str) -> str:
    return html.escape(text, quote=False)


def escape_attribute(text: str) -> str:
    return html.escape(text, quote=True)


# ---- typed source ----

def js_literal(value: StyleValue) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def style_record(element: Element) -> str:
    """Inline style object literal, e.g. ``{ position: 'absolute', left: 10, ... }``."""
    entries = [
        ("position", "'absolute'"),
        ("left", format_number(element.x)),
        ("top", format_number(element.y)),
        ("width", format_number(element.width)),
        ("height", format_number(element.height)),
    ]
    entries.extend((name, js_literal(value)) for name, value in custom_properties(element.styles))
    body = ", ".join(f"{_js_key(name)}: {value}" for name, value in entries)
    return "{ " + body + " }"


def _js_key(name: str) -> str:
    return name if re.fullmatch(r"[A-Za-z_$][\w$]*", name) else js_literal(name)


def escape_jsx(text: str) -> str:
    return html.escape(text, quote=False).replace("{", "&#123;").replace("}", "&#125;")
