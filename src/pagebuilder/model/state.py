"""
Surface State (Data Model)
==========================
This module defines the central data structure for one editing session.

Why is this file needed?
------------------------
1. State Management: It holds the current Document snapshot, the armed
   palette kind and the gesture in flight in one place.
2. Exclusivity: A pointer gesture either moves an existing element or draws
   a new one, never both. The model refuses overlapping gestures.
3. Decoupling: Views read snapshots from this object; input handlers call
   its operations with already surface-relative geometry.

Classes:
    GestureMode: The two geometry-producing gestures.
    SurfaceModel: The main container class.
"""
from __future__ import annotations

from contextlib import contextmanager
from enum import StrEnum
import logging
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

from pagebuilder.model import document as ops
from pagebuilder.model.elements import Document, Element, ElementKind
from pagebuilder.model.geometry_primitives import Number, Point, Vector
from pagebuilder.model.ids import IdFactory, SequentialIdFactory

logger = logging.getLogger(__name__)


class GestureMode(StrEnum):
    MOVE = "move"
    CREATE = "create"


class GestureConflictError(RuntimeError):
    """A second geometry gesture was started while one is still in flight."""


class SurfaceModel:
    """
    Holds the Document of the open page.
    Pass this instance to the input layer and to the views.
    """

    def __init__(
        self,
        elements: Iterable[Element] = (),
        id_factory: Optional[IdFactory] = None,
    ) -> None:
        self._id_factory: IdFactory = id_factory or SequentialIdFactory()
        self._elements: Document = ops.validate_document(elements)
        self._armed_kind: Optional[ElementKind] = None
        self._gesture: Optional[GestureMode] = None

    # ---- snapshot access ----

    @property
    def elements(self) -> Document:
        return self._elements

    @property
    def armed_kind(self) -> Optional[ElementKind]:
        return self._armed_kind

    @property
    def active_gesture(self) -> Optional[GestureMode]:
        return self._gesture

    def get(self, element_id: str) -> Optional[Element]:
        return ops.get_element(self._elements, element_id)

    def element_at(self, point: Point) -> Optional[Element]:
        return ops.element_at(self._elements, point)

    # ---- session ----

    def load(self, elements: Iterable[Element]) -> Document:
        """Start from a template (or a re-loaded project)."""
        self._elements = ops.validate_document(elements)
        self._armed_kind = None
        self._gesture = None
        logger.info(f"Loaded document with {len(self._elements)} element(s).")
        return self._elements

    def reset(self) -> None:
        """Clear all data for a blank page"""
        self._elements = ()
        self._armed_kind = None
        self._gesture = None
        logger.info("Surface state has been reset.")

    # ---- palette ----

    def arm(self, kind: Union[ElementKind, str]) -> None:
        if self._gesture is GestureMode.MOVE:
            raise GestureConflictError("Cannot arm a palette kind while an element is being moved.")
        self._armed_kind = ElementKind(kind)
        logger.debug(f"Armed kind: {self._armed_kind}")

    def disarm(self) -> None:
        self._armed_kind = None

    # ---- gestures ----

    def begin_gesture(self, mode: Union[GestureMode, str]) -> None:
        mode = GestureMode(mode)
        if self._gesture is not None:
            raise GestureConflictError(f"Cannot start a {mode} gesture: a {self._gesture} gesture is in flight.")
        if mode is GestureMode.MOVE and self._armed_kind is not None:
            raise GestureConflictError(f"Cannot move elements while '{self._armed_kind}' is armed.")
        self._gesture = mode

    def end_gesture(self) -> None:
        self._gesture = None

    @contextmanager
    def gesture(self, mode: Union[GestureMode, str]) -> Iterator[SurfaceModel]:
        self.begin_gesture(mode)
        try:
            yield self
        finally:
            self.end_gesture()

    def _check_gesture(self, mode: GestureMode) -> None:
        if self._gesture is not None and self._gesture is not mode:
            raise GestureConflictError(f"{mode} requested during a {self._gesture} gesture.")

    # ---- operations ----

    def create_by_drag(
        self,
        start: Point,
        end: Point,
        kind: Optional[Union[ElementKind, str]] = None,
    ) -> Optional[Element]:
        """
        Turn a rubber-band selection into an element of the armed kind
        (or of `kind`, when given). Clears the armed kind on success.
        """
        self._check_gesture(GestureMode.CREATE)
        kind = self._armed_kind if kind is None else ElementKind(kind)
        self._elements, element = ops.create_by_drag(self._elements, kind, start, end, self._id_factory)
        if element is not None:
            self._armed_kind = None
        return element

    def create_by_drop(
        self,
        kind: Union[ElementKind, str],
        point: Point,
        size: Optional[Tuple[Number, Number]] = None,
    ) -> Element:
        self._check_gesture(GestureMode.CREATE)
        self._elements, element = ops.create_by_drop(self._elements, ElementKind(kind), point, self._id_factory, size)
        return element

    def move_by(self, element_id: str, delta: Union[Vector, Tuple[Number, Number]]) -> Document:
        self._check_gesture(GestureMode.MOVE)
        self._elements = ops.move_by(self._elements, element_id, delta)
        return self._elements

    def patch(self, element_id: str, **changes: Any) -> Document:
        self._elements = ops.patch(self._elements, element_id, **changes)
        return self._elements
