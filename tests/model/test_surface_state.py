"""
Unit Tests for the SurfaceModel session state.
"""
import pytest

from pagebuilder.model.document import DuplicateElementIdError
from pagebuilder.model.elements import ElementKind
from pagebuilder.model.geometry_primitives import Point, Vector
from pagebuilder.model.state import GestureConflictError, GestureMode, SurfaceModel
from pagebuilder.model.templates import ALL_TEMPLATES, BLANK, get_template, list_templates


class TestArmedKind:

    def test_drag_when_kind_armed_then_element_created_and_kind_cleared(self):
        surface = SurfaceModel()
        surface.arm("text")
        element = surface.create_by_drag(Point(10, 10), Point(110, 60))
        assert element.kind is ElementKind.TEXT
        assert surface.elements == (element,)
        assert surface.armed_kind is None

    def test_drag_when_below_threshold_then_kind_stays_armed(self):
        surface = SurfaceModel()
        surface.arm(ElementKind.BUTTON)
        assert surface.create_by_drag(Point(10, 10), Point(15, 15)) is None
        assert surface.elements == ()
        assert surface.armed_kind is ElementKind.BUTTON

    def test_drag_when_nothing_armed_then_no_element(self):
        surface = SurfaceModel()
        assert surface.create_by_drag(Point(0, 0), Point(100, 100)) is None

    def test_arm_when_unknown_kind_then_value_error(self):
        with pytest.raises(ValueError):
            SurfaceModel().arm("slider")


class TestGestures:

    def test_begin_when_gesture_in_flight_then_conflict(self):
        surface = SurfaceModel()
        surface.begin_gesture(GestureMode.CREATE)
        with pytest.raises(GestureConflictError):
            surface.begin_gesture(GestureMode.MOVE)

    def test_move_during_create_gesture_then_conflict(self, button):
        surface = SurfaceModel([button])
        with surface.gesture(GestureMode.CREATE):
            with pytest.raises(GestureConflictError):
                surface.move_by("b1", Vector(1, 1))

    def test_create_during_move_gesture_then_conflict(self, button):
        surface = SurfaceModel([button])
        with surface.gesture("move"):
            with pytest.raises(GestureConflictError):
                surface.create_by_drop(ElementKind.TEXT, Point(0, 0))

    def test_arm_during_move_gesture_then_conflict(self):
        surface = SurfaceModel()
        with surface.gesture(GestureMode.MOVE):
            with pytest.raises(GestureConflictError):
                surface.arm(ElementKind.TEXT)

    def test_move_gesture_when_kind_armed_then_conflict(self):
        surface = SurfaceModel()
        surface.arm(ElementKind.TEXT)
        with pytest.raises(GestureConflictError):
            surface.begin_gesture(GestureMode.MOVE)

    def test_gesture_context_then_released_after_block(self, button):
        surface = SurfaceModel([button])
        with surface.gesture(GestureMode.MOVE):
            surface.move_by("b1", Vector(5, 0))
        assert surface.active_gesture is None
        assert surface.get("b1").x == 15

    def test_gesture_context_when_error_raised_then_released(self):
        surface = SurfaceModel()
        with pytest.raises(RuntimeError):
            with surface.gesture(GestureMode.CREATE):
                raise RuntimeError("boom")
        assert surface.active_gesture is None


class TestSnapshots:

    def test_move_then_new_snapshot_and_old_one_kept(self, button):
        surface = SurfaceModel([button])
        before = surface.elements
        after = surface.move_by("b1", (1, 2))
        assert after is surface.elements
        assert before == (button,)
        assert after[0].position == Point(11, 22)

    def test_move_when_id_absent_then_snapshot_equal(self, mixed_document):
        surface = SurfaceModel(mixed_document)
        assert surface.move_by("nope", (3, 3)) == mixed_document

    def test_patch_then_only_given_fields_change(self, button):
        surface = SurfaceModel([button])
        surface.patch("b1", content="Go")
        assert surface.get("b1").content == "Go"
        assert surface.get("b1").rect == button.rect

    def test_init_when_duplicate_ids_then_raises(self, button):
        with pytest.raises(DuplicateElementIdError):
            SurfaceModel([button, button])


class TestSession:

    def test_load_template_then_components_verbatim(self, mixed_document):
        surface = SurfaceModel()
        surface.arm(ElementKind.TEXT)
        surface.load(mixed_document)
        assert surface.elements == mixed_document
        assert surface.armed_kind is None

    def test_reset_then_blank(self, mixed_document):
        surface = SurfaceModel(mixed_document)
        surface.reset()
        assert surface.elements == ()

    def test_catalog_then_three_empty_templates(self):
        names = [t.name for t in list_templates()]
        assert names == ["Landing Page", "Blog Post", "Portfolio"]
        assert all(t.components == () for t in ALL_TEMPLATES.values())

    def test_get_template_when_blank_then_blank(self):
        assert get_template("blank") is BLANK

    def test_get_template_when_unknown_then_key_error(self):
        with pytest.raises(KeyError):
            get_template("42")
