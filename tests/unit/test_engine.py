"""Tests for the mutation engine (editing session)."""

import pytest
from returns.pipeline import is_successful

from canvas import CanvasTarget, MutationEngine, NodeTarget
from canvas.drag import DraggingExistingNode, DraggingFromPalette, Idle
from canvas.model import CanvasNode, Document, find_node, node_ids
from core.errors import DepthExceeded, InvalidDocument, NodeNotFound, UnknownKind


@pytest.mark.unit
class TestScenarios:
    """End-to-end editing flows."""

    def test_edit_button_and_export(self, engine, generator):
        """Insert a button, rename it, and see it in the generated screen."""
        button = engine.insert("button").unwrap()
        engine.patch_properties(button.id, {"text": "Simpan"})

        code = generator.generate(engine.document)
        screen = code.files[0].content
        styles = code.file("src/styles/GeneratedStyles.ts").content

        assert ">Simpan</Text>" in screen
        block = styles.split(f"button_{button.id}: {{")[1].split("},")[0]
        assert "backgroundColor: '#2563eb'" in block

    def test_reorder_by_drag(self, catalog, two_texts):
        engine = MutationEngine(catalog, two_texts)
        engine.begin_drag_node("t2")
        result = engine.drop(NodeTarget("t1"))

        assert result.unwrap().id == "t2"
        assert [n.id for n in engine.document.nodes] == ["t2", "t1"]
        assert isinstance(engine.drag_state, Idle)

    def test_delete_container_cascades(self, engine):
        container = engine.insert("container").unwrap()
        child = engine.insert("button", parent_id=container.id).unwrap()

        engine.delete(container.id)

        assert find_node(engine.document, container.id) is None
        assert find_node(engine.document, child.id) is None
        assert engine.document.count() == 0


@pytest.mark.unit
class TestOperations:
    """Engine operations and their failure handling."""

    def test_insert_stacks_vertically(self, engine):
        first = engine.insert("text").unwrap()
        second = engine.insert("text").unwrap()
        assert first.position.y == 0
        assert second.position.y == 80

    def test_unknown_kind_leaves_document(self, engine):
        engine.insert("text")
        before = engine.snapshot()
        result = engine.insert("carousel")
        assert isinstance(result.failure(), UnknownKind)
        assert engine.document == before
        assert not engine.history.can_redo

    def test_stale_ids_never_raise(self, engine):
        for result in (
            engine.move("a", "b"),
            engine.move_into("a"),
            engine.duplicate("a"),
            engine.delete("a"),
            engine.patch_properties("a", {"text": "x"}),
            engine.select("a"),
        ):
            assert isinstance(result.failure(), NodeNotFound)

    def test_duplicate(self, engine):
        node = engine.insert("button").unwrap()
        clone = engine.duplicate(node.id).unwrap()
        assert node_ids(engine.document) == [node.id, clone.id]
        assert clone.properties == node.properties

    def test_move_into_container(self, engine):
        container = engine.insert("card").unwrap()
        text = engine.insert("text").unwrap()
        engine.move_into(text.id, container.id)
        assert [c.id for c in find_node(engine.document, container.id).children] == [text.id]

    def test_snapshot_detached(self, engine):
        node = engine.insert("text").unwrap()
        snapshot = engine.snapshot()
        engine.patch_properties(node.id, {"content": "Changed"})
        assert find_node(snapshot, node.id).properties["content"] == "Sample Text"

    def test_load_validates(self, engine):
        bad = Document(nodes=[CanvasNode(id="x", kind="text"), CanvasNode(id="x", kind="button")])
        with pytest.raises(InvalidDocument):
            engine.load(bad)

    def test_load_resets_session(self, engine, two_texts):
        node = engine.insert("text").unwrap()
        engine.select(node.id)
        engine.load(two_texts)
        assert engine.selected is None
        assert not engine.history.can_undo
        assert node_ids(engine.document) == ["t1", "t2"]
        # Engine keeps its own copy
        two_texts.nodes.clear()
        assert engine.document.count() == 2

    def test_nesting_stops_at_depth_limit(self, catalog, settings, generator):
        """Everything the engine builds can be exported and reloaded."""
        engine = MutationEngine(catalog, settings=settings)
        parent = None
        for _ in range(settings.max_tree_depth):
            parent = engine.insert("container", parent_id=parent).unwrap().id

        result = engine.insert("container", parent_id=parent)
        assert isinstance(result.failure(), DepthExceeded)
        assert engine.document.count() == settings.max_tree_depth

        code = generator.generate(engine.document)
        assert not code.degraded
        reloaded = MutationEngine(catalog, engine.snapshot(), settings=settings)
        assert reloaded.document.count() == settings.max_tree_depth

    def test_move_into_respects_depth_limit(self, catalog, settings):
        shallow = settings.model_copy(update={"max_tree_depth": 2})
        engine = MutationEngine(catalog, settings=shallow)
        outer = engine.insert("container").unwrap()
        engine.insert("text", parent_id=outer.id)
        target = engine.insert("card").unwrap()

        result = engine.move_into(outer.id, target.id)
        assert isinstance(result.failure(), DepthExceeded)
        assert [n.id for n in engine.document.nodes] == [outer.id, target.id]


@pytest.mark.unit
class TestSelection:
    """Selected node tracking."""

    def test_select_and_clear(self, engine):
        node = engine.insert("text").unwrap()
        assert engine.select(node.id).unwrap() == node
        assert engine.selected.id == node.id
        assert engine.select(None).unwrap() is None
        assert engine.selected is None

    def test_delete_clears_selection_inside_subtree(self, engine):
        container = engine.insert("container").unwrap()
        child = engine.insert("text", parent_id=container.id).unwrap()
        engine.select(child.id)
        engine.delete(container.id)
        assert engine.selected_id is None

    def test_delete_keeps_unrelated_selection(self, engine):
        keep = engine.insert("text").unwrap()
        gone = engine.insert("text").unwrap()
        engine.select(keep.id)
        engine.delete(gone.id)
        assert engine.selected_id == keep.id


@pytest.mark.unit
class TestHistory:
    """Undo / redo."""

    def test_undo_redo(self, engine):
        node = engine.insert("text").unwrap()
        engine.patch_properties(node.id, {"content": "Edited"})

        assert engine.undo()
        assert find_node(engine.document, node.id).properties["content"] == "Sample Text"
        assert engine.undo()
        assert engine.document.count() == 0
        assert not engine.undo()

        assert engine.redo()
        assert engine.redo()
        assert find_node(engine.document, node.id).properties["content"] == "Edited"
        assert not engine.redo()

    def test_new_mutation_drops_redo(self, engine):
        engine.insert("text")
        engine.undo()
        engine.insert("button")
        assert not engine.history.can_redo

    def test_failed_mutation_not_recorded(self, engine):
        engine.insert("nope")
        assert not engine.history.can_undo

    def test_noop_move_not_recorded(self, engine):
        node = engine.insert("text").unwrap()
        engine.history.clear()
        assert is_successful(engine.move(node.id, node.id))
        assert not engine.history.can_undo

    def test_history_limit(self, catalog, settings):
        engine = MutationEngine(catalog, settings=settings.model_copy(update={"history_limit": 3}))
        for _ in range(5):
            engine.insert("text")
        undone = 0
        while engine.undo():
            undone += 1
        assert undone == 3
        assert engine.document.count() == 2


@pytest.mark.unit
class TestDrop:
    """Drag gestures routed through the engine."""

    def test_palette_onto_canvas(self, engine):
        engine.begin_drag_from_palette("button")
        assert isinstance(engine.drag_state, DraggingFromPalette)
        node = engine.drop(CanvasTarget()).unwrap()
        assert node.kind == "button"
        assert isinstance(engine.drag_state, Idle)

    def test_palette_into_container(self, engine):
        container = engine.insert("container").unwrap()
        engine.begin_drag_from_palette("text")
        node = engine.drop(NodeTarget(container.id, inside=True)).unwrap()
        assert find_node(engine.document, container.id).children[0].id == node.id

    def test_palette_unknown_kind_fails(self, engine):
        engine.begin_drag_from_palette("carousel")
        assert isinstance(engine.drop(CanvasTarget()).failure(), UnknownKind)
        assert isinstance(engine.drag_state, Idle)

    def test_drop_outside_cancels(self, engine):
        engine.begin_drag_from_palette("text")
        assert engine.drop(None).unwrap() is None
        assert engine.document.count() == 0
        assert isinstance(engine.drag_state, Idle)

    def test_drop_onto_itself(self, engine):
        node = engine.insert("text").unwrap()
        engine.begin_drag_node(node.id)
        assert isinstance(engine.drag_state, DraggingExistingNode)
        assert engine.drop(NodeTarget(node.id)).unwrap() is None

    def test_node_onto_canvas_moves_to_end(self, engine):
        first = engine.insert("text").unwrap()
        second = engine.insert("text").unwrap()
        engine.begin_drag_node(first.id)
        engine.drop(CanvasTarget())
        assert node_ids(engine.document) == [second.id, first.id]

    def test_cancel(self, engine):
        engine.begin_drag_from_palette("text")
        engine.cancel_drag()
        assert isinstance(engine.drag_state, Idle)
        assert engine.drop(CanvasTarget()).unwrap() is None
        assert engine.document.count() == 0
