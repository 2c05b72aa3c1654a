"""
Element id sources.

An id factory is any callable `(kind, taken) -> str`. The surface model
passes the ids already used by the document as `taken`; a factory that
returns one of them is a defect and is reported as DuplicateElementIdError.
"""
from __future__ import annotations

import itertools
from typing import AbstractSet, Callable

from pagebuilder.model.elements import ElementKind

IdFactory = Callable[[ElementKind, AbstractSet[str]], str]


class SequentialIdFactory:
    """
    Monotonic counter producing ids like ``button-3``.

    The counter is shared by all kinds and never goes backwards, so ids are
    never reused within a session even if the same number would be free for
    another kind. Candidates already present in the document (e.g. loaded
    from a template) are skipped.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def __call__(self, kind: ElementKind, taken: AbstractSet[str]) -> str:
        while True:
            candidate = f"{ElementKind(kind).value}-{next(self._counter)}"
            if candidate not in taken:
                return candidate
