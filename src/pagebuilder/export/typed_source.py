"""
Typed-source exporter: a React function component (.tsx).

When router or data-fetching support is enabled the component is annotated
with a header naming the pre-wired features, commented hook hints, and a
trailing block of manual setup instructions. None of the annotations are
executable.
"""
from __future__ import annotations

from typing import List

from pagebuilder.config import COMPONENT_NAME
from pagebuilder.export.registry import ExportFormat, register_exporter
from pagebuilder.export.styles import escape_jsx, style_record
from pagebuilder.model.elements import Document, Element, FeatureConfig

ROUTER_HOOK_HINT = "// const navigate = useNavigate(); // add from react-router-dom"
RTK_QUERY_HOOK_HINT = "// const { data, error, isLoading } = myApi.useGetSomethingQuery();"

ROUTER_SETUP = "Install react-router-dom and wrap <{name} /> with <BrowserRouter> in your root."
RTK_QUERY_SETUP = "Configure Redux store and inject endpoints via createApi()."


def render_element(element: Element) -> str:
    descriptor = element.descriptor
    label = element.content or descriptor.export_label
    return descriptor.source_template.format(style=style_record(element), label=escape_jsx(label))


def _feature_header(config: FeatureConfig) -> List[str]:
    lines = ["/*", " * This file is pre-wired for optional features."]
    lines += [f" *  - {name}" for name in config.enabled_features()]
    lines += [" */", ""]
    return lines


def _setup_instructions(config: FeatureConfig) -> List[str]:
    steps = []
    if config.use_router:
        steps.append(ROUTER_SETUP.format(name=COMPONENT_NAME))
    if config.use_rtk_query:
        steps.append(RTK_QUERY_SETUP)
    lines = ["", "/*", "SETUP INSTRUCTIONS"]
    lines += [f"{i}. {step}" for i, step in enumerate(steps, start=1)]
    lines.append("*/")
    return lines


@register_exporter(ExportFormat.TYPED_SOURCE)
def render_typed_source(document: Document, config: FeatureConfig) -> str:
    lines = ["import React from 'react';", ""]

    if config.any_enabled:
        lines += _feature_header(config)

    lines.append(f"export default function {COMPONENT_NAME}() {{")
    if config.use_router:
        lines.append(f"  {ROUTER_HOOK_HINT}")
    if config.use_rtk_query:
        lines.append(f"  {RTK_QUERY_HOOK_HINT}")
    if config.any_enabled:
        lines.append("")

    lines.append("  return (")
    lines.append('    <div className="relative min-h-screen">')
    lines += [f"      {render_element(e)}" for e in document]
    lines.append("    </div>")
    lines.append("  );")
    lines.append("}")

    if config.any_enabled:
        lines += _setup_instructions(config)

    return "\n".join(lines) + "\n"
