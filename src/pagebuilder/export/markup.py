"""
Markup exporter: a standalone HTML page with absolutely positioned elements.
"""
from __future__ import annotations

from pagebuilder.config import PAGE_BODY_STYLE, PAGE_TITLE
from pagebuilder.export.registry import ExportFormat, register_exporter
from pagebuilder.export.styles import element_css, escape_attribute, escape_markup
from pagebuilder.model.elements import Document, Element, FeatureConfig

_SHELL = """<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8" />
  <title>{title}</title>
  <style>{body_style}</style>
</head>
<body>
    {body}
</body>
</html>"""


def render_element(element: Element) -> str:
    descriptor = element.descriptor
    label = element.content or descriptor.export_label
    return descriptor.markup_template.format(
        style=escape_attribute(element_css(element)),
        label=escape_markup(label),
    )


@register_exporter(ExportFormat.MARKUP)
def render_markup(document: Document, config: FeatureConfig) -> str:
    """The feature configuration does not affect static markup."""
    body = "\n    ".join(render_element(e) for e in document)
    return _SHELL.format(title=PAGE_TITLE, body_style=PAGE_BODY_STYLE, body=body)
