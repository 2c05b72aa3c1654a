from __future__ import annotations

from enum import StrEnum
from typing import Callable, Union

from pagebuilder.model.elements import Document, FeatureConfig

Exporter = Callable[[Document, FeatureConfig], str]


class ExportFormat(StrEnum):
    MARKUP = "markup"
    TYPED_SOURCE = "typed-source"
    JSON = "json"


class UnknownExportFormatError(ValueError):
    """The requested format is not one of ExportFormat."""


_REGISTRY: dict[ExportFormat, Exporter] = {}


def register_exporter(fmt: ExportFormat) -> Callable[[Exporter], Exporter]:
    """Function decorator to register an exporter for a format."""
    def decorator(func: Exporter) -> Exporter:
        if fmt in _REGISTRY:
            raise ValueError(f"An exporter for '{fmt}' is already registered")
        _REGISTRY[fmt] = func
        return func
    return decorator


def resolve_format(fmt: Union[ExportFormat, str]) -> ExportFormat:
    try:
        return ExportFormat(fmt)
    except ValueError:
        raise UnknownExportFormatError(f"Unknown export format '{fmt}'") from None


def render(document: Document, config: FeatureConfig, fmt: Union[ExportFormat, str]) -> str:
    """Render `document` in the requested format. Pure and deterministic."""
    fmt = resolve_format(fmt)
    exporter = _REGISTRY.get(fmt)
    if exporter is None:
        raise UnknownExportFormatError(f"No exporter registered for format '{fmt}'")
    return exporter(tuple(document), config)


def list_formats() -> list[ExportFormat]:
    return list(_REGISTRY.keys())
