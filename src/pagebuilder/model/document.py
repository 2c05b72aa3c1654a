"""
Document Operations
===================
Pure functions over `Document` snapshots (tuples of Elements).

Every operation returns a NEW tuple and never mutates its input, so callers
detect changes by replacing their reference to the whole Document. Operations
that target a missing id, or a rubber-band selection below the threshold,
are ignorable no-ops: they return the input document unchanged.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Iterable, Optional, Tuple, Union

import numpy as np

from pagebuilder.config import SELECTION_THRESHOLD
from pagebuilder.model.elements import Document, Element, ElementKind, KIND_DESCRIPTORS
from pagebuilder.model.geometry_primitives import Number, Point, Rect, Vector
from pagebuilder.model.ids import IdFactory

logger = logging.getLogger(__name__)


class DuplicateElementIdError(ValueError):
    """An element id is already used in the document."""


# Fields that identify an element and must never be rewritten by `patch`
_IMMUTABLE_FIELDS = frozenset({"id"})


# ------------------------------------------------------------------------------
# Queries
# ------------------------------------------------------------------------------
def index_of(document: Document, element_id: str) -> Optional[int]:
    for i, element in enumerate(document):
        if element.id == element_id:
            return i
    return None


def get_element(document: Document, element_id: str) -> Optional[Element]:
    i = index_of(document, element_id)
    return None if i is None else document[i]


def element_ids(document: Document) -> frozenset[str]:
    return frozenset(e.id for e in document)


def validate_document(document: Iterable[Element]) -> Document:
    """Return the elements as a Document, refusing duplicate ids."""
    elements = tuple(document)
    seen: set[str] = set()
    for element in elements:
        if element.id in seen:
            raise DuplicateElementIdError(f"Duplicate element id '{element.id}' in document.")
        seen.add(element.id)
    return elements


def element_at(document: Document, point: Point) -> Optional[Element]:
    """
    Hit test: the topmost element whose rectangle contains `point`.
    Later elements are drawn on top, so they win ties.
    """
    if not document:
        return None
    boxes = np.array([[e.x, e.y, e.x + e.width, e.y + e.height] for e in document], dtype=float)
    hits = np.flatnonzero(
        (boxes[:, 0] <= point.x) & (point.x <= boxes[:, 2])
        & (boxes[:, 1] <= point.y) & (point.y <= boxes[:, 3])
    )
    if hits.size == 0:
        return None
    return document[int(hits[-1])]


# ------------------------------------------------------------------------------
# Creation
# ------------------------------------------------------------------------------
def normalize_selection(start: Point, end: Point) -> Rect:
    return Rect.from_corners(start, end)


def append(document: Document, element: Element) -> Document:
    if index_of(document, element.id) is not None:
        raise DuplicateElementIdError(f"Element id '{element.id}' is already used.")
    return document + (element,)


def _new_id(document: Document, kind: ElementKind, id_factory: IdFactory) -> str:
    new_id = id_factory(kind, element_ids(document))
    if index_of(document, new_id) is not None:
        raise DuplicateElementIdError(f"Id factory produced an id already in use: '{new_id}'.")
    return new_id


def create_by_drag(
    document: Document,
    kind: Optional[ElementKind],
    start: Point,
    end: Point,
    id_factory: IdFactory,
) -> Tuple[Document, Optional[Element]]:
    """
    Materialize a rubber-band selection as a new element.

    Returns the (possibly unchanged) document and the created element, or
    `None` when no kind is armed or the selection is not larger than
    SELECTION_THRESHOLD on both axes.
    """
    if kind is None:
        logger.debug("Drag ignored: no element kind armed.")
        return document, None

    rect = normalize_selection(start, end)
    if not rect.exceeds(SELECTION_THRESHOLD):
        logger.debug(f"Drag ignored: selection {rect.width}x{rect.height} is below the threshold.")
        return document, None

    kind = ElementKind(kind)
    element = Element(
        id=_new_id(document, kind, id_factory),
        kind=kind,
        x=rect.x,
        y=rect.y,
        width=rect.width,
        height=rect.height,
        content=KIND_DESCRIPTORS[kind].default_content,
    )
    logger.info(f"Created {kind} '{element.id}' at ({rect.x}, {rect.y}) size {rect.width}x{rect.height}.")
    return append(document, element), element


def create_by_drop(
    document: Document,
    kind: ElementKind,
    point: Point,
    id_factory: IdFactory,
    size: Optional[Tuple[Number, Number]] = None,
) -> Tuple[Document, Element]:
    """Place a palette item at a surface-relative point."""
    kind = ElementKind(kind)
    descriptor = KIND_DESCRIPTORS[kind]
    width, height = size if size is not None else descriptor.default_size
    element = Element(
        id=_new_id(document, kind, id_factory),
        kind=kind,
        x=point.x,
        y=point.y,
        width=width,
        height=height,
        content=descriptor.default_content,
    )
    logger.info(f"Dropped {kind} '{element.id}' at ({point.x}, {point.y}).")
    return append(document, element), element


# ------------------------------------------------------------------------------
# Mutation (by replacement)
# ------------------------------------------------------------------------------
def _replace_at(document: Document, i: int, element: Element) -> Document:
    return document[:i] + (element,) + document[i + 1:]


def move_by(document: Document, element_id: str, delta: Union[Vector, Tuple[Number, Number]]) -> Document:
    """Translate one element by `delta`. Unknown ids are ignored."""
    i = index_of(document, element_id)
    if i is None:
        logger.debug(f"Move ignored: no element with id '{element_id}'.")
        return document

    if not isinstance(delta, Vector):
        delta = Vector(*delta)
    element = document[i]
    moved = dataclasses.replace(element, x=element.x + delta.x, y=element.y + delta.y)
    return _replace_at(document, i, moved)


def patch(document: Document, element_id: str, **changes: Any) -> Document:
    """
    Merge `changes` into the element with `element_id`.
    Unknown ids are ignored; unknown field names and id changes are rejected.
    """
    unknown = set(changes) - set(Element.field_names())
    if unknown:
        raise ValueError(f"Unknown element fields: {', '.join(sorted(unknown))}")
    forbidden = _IMMUTABLE_FIELDS & set(changes)
    if forbidden:
        raise ValueError(f"Element fields cannot be patched: {', '.join(sorted(forbidden))}")

    i = index_of(document, element_id)
    if i is None:
        logger.debug(f"Patch ignored: no element with id '{element_id}'.")
        return document

    return _replace_at(document, i, dataclasses.replace(document[i], **changes))
