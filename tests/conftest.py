import pytest

from pagebuilder.model.elements import Element, ElementKind, FeatureConfig
from pagebuilder.model.ids import SequentialIdFactory


# Common test fixtures
@pytest.fixture
def button():
    """The single button used by the export scenarios."""
    return Element(id="b1", kind=ElementKind.BUTTON, x=10, y=20, width=80, height=30, content="Click me")


@pytest.fixture
def mixed_document(button):
    """One element of every kind, with and without optional fields."""
    return (
        button,
        Element(id="t1", kind=ElementKind.TEXT, x=0, y=0, width=200, height=40, content="Hello"),
        Element(id="i1", kind=ElementKind.INPUT, x=5, y=60, width=150, height=32, content=""),
        Element(id="img1", kind=ElementKind.IMAGE, x=300, y=10, width=120, height=90),
        Element(id="c1", kind=ElementKind.CONTAINER, x=0, y=200, width=400, height=300,
                styles={"borderRadius": 8, "backgroundColor": "#fafafa"}),
    )


@pytest.fixture
def no_features():
    return FeatureConfig(use_router=False, use_rtk_query=False)


@pytest.fixture
def id_factory():
    return SequentialIdFactory()
