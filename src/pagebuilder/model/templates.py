"""Starter Templates (Catalog)."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, List

from pagebuilder.model.elements import Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Template:
    """A named starting page. `components` is loaded verbatim into the surface."""
    id: str
    name: str
    thumbnail: str
    components: Document = field(default_factory=tuple)


BLANK = Template(id="blank", name="Blank Canvas", thumbnail="")

ALL_TEMPLATES: Dict[str, Template] = {
    t.id: t for t in (
        Template(id="1", name="Landing Page", thumbnail="🏠"),
        Template(id="2", name="Blog Post", thumbnail="📝"),
        Template(id="3", name="Portfolio", thumbnail="💼"),
    )
}


def get_template(template_id: str) -> Template:
    if template_id == BLANK.id:
        return BLANK
    template = ALL_TEMPLATES.get(template_id)
    if template is None:
        raise KeyError(f"No template registered with id '{template_id}'")
    return template


def list_templates() -> List[Template]:
    return list(ALL_TEMPLATES.values())
