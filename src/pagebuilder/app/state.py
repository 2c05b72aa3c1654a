from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple, Union

from PySide6.QtCore import QObject, Signal

from pagebuilder.export import ExportFormat, render
from pagebuilder.model.elements import Document, Element, ElementKind, FeatureConfig
from pagebuilder.model.geometry_primitives import Number, Point, Vector
from pagebuilder.model.ids import IdFactory
from pagebuilder.model.state import GestureMode, SurfaceModel
from pagebuilder.model.templates import Template


class Store(QObject):
    """
    Central state store with signals for view sync.

    Views never receive the model itself, only Document snapshots through
    `document_changed`; a signal is emitted only when the snapshot changes.
    """
    document_changed = Signal(object)
    armed_kind_changed = Signal(object)

    def __init__(
        self,
        config: FeatureConfig = FeatureConfig(),
        template: Optional[Template] = None,
        id_factory: Optional[IdFactory] = None,
    ) -> None:
        super().__init__()
        self._config = config
        self.surface = SurfaceModel(
            elements=template.components if template is not None else (),
            id_factory=id_factory,
        )

    @property
    def config(self) -> FeatureConfig:
        return self._config

    @property
    def document(self) -> Document:
        return self.surface.elements

    # ---- sync helpers ----

    def _publish(self, before: Document) -> Document:
        after = self.surface.elements
        if after is not before:
            self.document_changed.emit(after)
        return after

    def _publish_armed(self, before: Optional[ElementKind]) -> None:
        if self.surface.armed_kind != before:
            self.armed_kind_changed.emit(self.surface.armed_kind)

    # ---- session ----

    def load_template(self, template: Template) -> None:
        self.load(template.components)

    def load(self, elements: Iterable[Element]) -> None:
        armed = self.surface.armed_kind
        self.surface.load(elements)
        self.document_changed.emit(self.surface.elements)
        self._publish_armed(armed)

    # ---- palette ----

    def arm(self, kind: Union[ElementKind, str]) -> None:
        before = self.surface.armed_kind
        self.surface.arm(kind)
        self._publish_armed(before)

    def disarm(self) -> None:
        before = self.surface.armed_kind
        self.surface.disarm()
        self._publish_armed(before)

    # ---- gestures ----

    def begin_gesture(self, mode: Union[GestureMode, str]) -> None:
        self.surface.begin_gesture(mode)

    def end_gesture(self) -> None:
        self.surface.end_gesture()

    def create_by_drag(self, start: Point, end: Point) -> Optional[Element]:
        before, armed = self.surface.elements, self.surface.armed_kind
        element = self.surface.create_by_drag(start, end)
        self._publish(before)
        self._publish_armed(armed)
        return element

    def create_by_drop(
        self,
        kind: Union[ElementKind, str],
        point: Point,
        size: Optional[Tuple[Number, Number]] = None,
    ) -> Element:
        before = self.surface.elements
        element = self.surface.create_by_drop(kind, point, size)
        self._publish(before)
        return element

    def move_by(self, element_id: str, delta: Union[Vector, Tuple[Number, Number]]) -> Document:
        before = self.surface.elements
        self.surface.move_by(element_id, delta)
        return self._publish(before)

    def patch(self, element_id: str, **changes: Any) -> Document:
        before = self.surface.elements
        self.surface.patch(element_id, **changes)
        return self._publish(before)

    # ---- export ----

    def export(self, fmt: Union[ExportFormat, str]) -> str:
        return render(self.surface.elements, self._config, fmt)
