"""
Element Catalogue
=================
Defines the data structures placed on the design surface.

Why is this file needed?
------------------------
1. Single source of truth: every kind-specific behaviour (creation defaults,
   export labels, markup and source templates) lives in ONE lookup table,
   `KIND_DESCRIPTORS`, instead of being repeated as branches in each consumer.
2. Snapshots: `Element` and `FeatureConfig` are frozen, so a `Document`
   (a tuple of elements) can be handed to exporters and views without copying.

Classes:
    ElementKind: The closed set of shape kinds.
    KindDescriptor: Per-kind defaults and templates.
    Element: One placed shape.
    FeatureConfig: Project-level feature flags consumed by the exporters.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum
import numbers
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union, List, Any

from pagebuilder.model.geometry_primitives import Number, Point, Rect, as_number

StyleValue = Union[str, int, float]


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ElementKind(StrEnum):
    TEXT = "text"
    BUTTON = "button"
    INPUT = "input"
    IMAGE = "image"
    CONTAINER = "container"


# ------------------------------------------------------------------------------
# Kind descriptors
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class KindDescriptor:
    """
    Everything that varies per ElementKind.

    Templates are `str.format` patterns. Markup templates receive `style`
    (the full inline CSS string) and `label`; source templates receive
    `style` (the inline style record) and `label`.
    """
    label: str  # Palette label
    default_content: str  # Content given to a freshly created element
    default_size: Tuple[int, int]  # Used for drops without an explicit size
    markup_style: str  # Presentation appended after the geometry CSS
    markup_template: str
    source_template: str
    export_label: str = ""  # Shown when content is empty


KIND_DESCRIPTORS: Mapping[ElementKind, KindDescriptor] = MappingProxyType({
    ElementKind.TEXT: KindDescriptor(
        label="Text",
        default_content="Edit me",
        default_size=(160, 40),
        markup_style="",
        markup_template='<div style="{style}">{label}</div>',
        source_template='<div style={{{style}}}>{label}</div>',
        export_label="Text",
    ),
    ElementKind.BUTTON: KindDescriptor(
        label="Button",
        default_content="Click me",
        default_size=(120, 40),
        markup_style="background:#3B82F6;color:white;border-radius:4px;",
        markup_template='<button style="{style}">{label}</button>',
        source_template='<button style={{{style}}} className="bg-blue-500 text-white rounded">{label}</button>',
        export_label="Button",
    ),
    ElementKind.INPUT: KindDescriptor(
        label="Input",
        default_content="",
        default_size=(200, 40),
        markup_style="border:1px solid #ccc;padding:4px;",
        markup_template='<input style="{style}" placeholder="Enter text..." />',
        source_template='<input style={{{style}}} className="border px-2" placeholder="Enter text..." />',
    ),
    ElementKind.IMAGE: KindDescriptor(
        label="Image",
        default_content="",
        default_size=(200, 150),
        markup_style="background:#E5E7EB;",
        markup_template='<div style="{style}">Image Placeholder</div>',
        source_template='<div style={{{style}}} className="bg-gray-200">Image</div>',
    ),
    ElementKind.CONTAINER: KindDescriptor(
        label="Container",
        default_content="",
        default_size=(300, 200),
        markup_style="border:2px dashed #ccc;",
        markup_template='<div style="{style}"></div>',
        source_template='<div style={{{style}}} className="border-2 border-dashed border-gray-300" />',
    ),
})

_missing_kinds = set(ElementKind) - set(KIND_DESCRIPTORS)
if _missing_kinds:
    raise RuntimeError(f"No descriptor for element kinds: {sorted(_missing_kinds)}")


def is_style_value(value: Any) -> bool:
    """Style values are strings or plain (non-bool) numbers."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, numbers.Real))


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Element:
    """
    One shape placed on the surface.

    `content` and `styles` are optional: `None` means "absent", which is
    distinct from an empty string and survives a JSON round trip as absence.
    """
    id: str
    kind: ElementKind
    x: Number
    y: Number
    width: Number
    height: Number
    content: Optional[str] = None
    styles: Optional[Mapping[str, StyleValue]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ElementKind(self.kind))
        # numpy scalars from geometry math become plain ints/floats
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, as_number(getattr(self, name)))
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Element '{self.id}' has a negative size ({self.width}x{self.height}).")
        if self.styles is not None:
            styles = {}
            for key, value in self.styles.items():
                if not isinstance(key, str) or not is_style_value(value):
                    raise ValueError(f"Element '{self.id}' has an invalid style {key!r}: {value!r}")
                styles[key] = as_number(value) if not isinstance(value, str) else value
            object.__setattr__(self, "styles", MappingProxyType(styles))

    def __hash__(self) -> int:
        styles = None if self.styles is None else tuple(self.styles.items())
        return hash((self.id, self.kind, self.x, self.y, self.width, self.height, self.content, styles))

    @property
    def descriptor(self) -> KindDescriptor:
        return KIND_DESCRIPTORS[self.kind]

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Tuple[Number, Number]:
        return self.width, self.height

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the persisted key names and order."""
        data: Dict[str, Any] = {
            "id": self.id,
            "type": self.kind.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }
        if self.content is not None:
            data["content"] = self.content
        if self.styles is not None:
            data["styles"] = dict(self.styles)
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Element:
        return Element(
            id=data["id"],
            kind=ElementKind(data["type"]),
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
            content=data.get("content"),
            styles=data.get("styles"),
        )


@dataclass(frozen=True)
class FeatureConfig:
    """
    Feature flags picked before editing starts.
    They only influence the guidance annotations of the typed-source export.
    """
    use_router: bool = False
    use_rtk_query: bool = False

    @property
    def any_enabled(self) -> bool:
        return self.use_router or self.use_rtk_query

    def enabled_features(self) -> List[str]:
        """Human readable names of the enabled features, in display order."""
        names = []
        if self.use_router:
            names.append("React Router")
        if self.use_rtk_query:
            names.append("RTK Query")
        return names

    def to_dict(self) -> Dict[str, bool]:
        return {"useRouter": self.use_router, "useRTKQuery": self.use_rtk_query}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> FeatureConfig:
        return FeatureConfig(
            use_router=data["useRouter"],
            use_rtk_query=data["useRTKQuery"],
        )


# Ordered, immutable snapshot of the surface. Later entries are drawn on top.
Document = Tuple[Element, ...]
