"""
The EXPORT layer turns a Document snapshot into text.
Importing this package registers every exporter.
"""
from pagebuilder.export.registry import (
    ExportFormat,
    UnknownExportFormatError,
    list_formats,
    register_exporter,
    render,
)
from pagebuilder.export import markup, typed_source, json_format  # noqa: F401  (registration)
from pagebuilder.export.json_format import ProjectFormatError, parse_json

__all__ = [
    "ExportFormat",
    "ProjectFormatError",
    "UnknownExportFormatError",
    "list_formats",
    "parse_json",
    "register_exporter",
    "render",
]
