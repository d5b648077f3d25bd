"""Tests for the property inspector binding."""

import pytest

from canvas import apply_edit, fields_for
from canvas.inspector import coerce_input
from canvas.model import CanvasNode, find_node
from core.errors import NodeNotFound, UnknownField


@pytest.mark.unit
class TestFields:
    """Schema-driven field lists."""

    def test_no_selection(self, catalog):
        assert fields_for(catalog, None) == []

    def test_unknown_kind(self, catalog):
        assert fields_for(catalog, CanvasNode(id="x", kind="carousel")) == []

    def test_values_follow_node(self, catalog):
        node = CanvasNode(id="b", kind="button", properties={"text": "Simpan"})
        bound = {f.key: f.value for f in fields_for(catalog, node)}
        assert bound["text"] == "Simpan"
        # Missing keys show the schema default
        assert bound["variant"] == "solid"

    def test_null_shows_default(self, catalog):
        node = CanvasNode(id="b", kind="button", properties={"text": None, "fontSize": 0})
        bound = {f.key: f.value for f in fields_for(catalog, node)}
        assert bound["text"] == "Button"
        # Falsy values are real values
        assert bound["fontSize"] == 0

    def test_schema_order(self, catalog):
        node = CanvasNode(id="b", kind="button")
        assert [f.key for f in fields_for(catalog, node)] == [f.key for f in catalog.schema_for("button")]


@pytest.mark.unit
class TestEdits:
    """Edits routed through the engine."""

    def test_edit_text(self, engine):
        node = engine.insert("button").unwrap()
        updated = apply_edit(engine, node.id, "text", "Simpan").unwrap()
        assert updated.properties["text"] == "Simpan"
        assert find_node(engine.document, node.id).properties["text"] == "Simpan"

    def test_numeric_text_becomes_number(self, engine):
        node = engine.insert("text").unwrap()
        apply_edit(engine, node.id, "fontSize", "20")
        assert find_node(engine.document, node.id).properties["fontSize"] == 20

    def test_partial_number_kept_as_typed(self, engine):
        node = engine.insert("text").unwrap()
        apply_edit(engine, node.id, "fontSize", "")
        assert find_node(engine.document, node.id).properties["fontSize"] == ""

    def test_unknown_field_refused(self, engine):
        node = engine.insert("button").unwrap()
        result = apply_edit(engine, node.id, "onPress", "x")
        assert isinstance(result.failure(), UnknownField)
        assert "onPress" not in find_node(engine.document, node.id).properties

    def test_missing_node(self, engine):
        assert isinstance(apply_edit(engine, "ghost", "text", "x").failure(), NodeNotFound)

    def test_edit_is_undoable(self, engine):
        node = engine.insert("button").unwrap()
        apply_edit(engine, node.id, "text", "Simpan")
        engine.undo()
        assert find_node(engine.document, node.id).properties["text"] == "Button"


@pytest.mark.unit
class TestCoercion:
    """Control input conversion."""

    @pytest.mark.parametrize("raw,expected", [("12", 12), ("1.5", 1.5), (" 8 ", 8), ("1.", "1."), ("abc", "abc"), (7, 7)])
    def test_numeric(self, catalog, raw, expected):
        descriptor = catalog.require("text").field("fontSize")
        assert coerce_input(descriptor, raw) == expected

    def test_boolean(self, catalog):
        descriptor = catalog.require("button").field("disabled")
        assert coerce_input(descriptor, "true") is True
        assert coerce_input(descriptor, "False") is False
        assert coerce_input(descriptor, True) is True

    def test_text_untouched(self, catalog):
        descriptor = catalog.require("button").field("text")
        assert coerce_input(descriptor, "12") == "12"
