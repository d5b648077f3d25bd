"""Tests for document interchange and the template store."""

import json

import pytest

from blueprint import DocumentParser, InMemoryTemplateStore, dumps, parse_document, serialize
from canvas.model import find_node, locate, node_ids
from core.errors import InvalidDocument, TemplateNotFound


@pytest.mark.unit
class TestParser:
    """Native and legacy formats."""

    def test_legacy_format(self, legacy_template):
        document = parse_document(legacy_template)
        assert document.title == "Login"
        assert node_ids(document) == ["element_1", "element_2", "element_3", "element_4"]
        assert find_node(document, "element_1").kind == "header"
        assert find_node(document, "element_1").properties["showBackButton"] is True
        assert locate(document, "element_4").parent_id == "element_2"
        assert find_node(document, "element_1").size.height == 60

    def test_native_round_trip(self, nested_document):
        assert parse_document(dumps(nested_document)) == nested_document

    def test_dict_input(self, two_texts):
        assert parse_document(serialize(two_texts)) == two_texts

    def test_legacy_serialize(self, nested_document):
        data = serialize(nested_document, legacy=True)
        assert data["name"] == "Nested"
        assert data["elements"][0]["type"] == "container"
        assert data["elements"][0]["children"][0]["props"] == {"text": "Go"}
        assert parse_document(data) == nested_document

    def test_missing_ids_assigned(self):
        document = parse_document({"elements": [{"type": "text", "props": {}}]})
        assert document.nodes[0].id.startswith("el_")

    def test_markdown_wrapped_json(self, two_texts):
        text = f"Here you go:\n```json\n{dumps(two_texts, pretty=True)}\n```"
        assert parse_document(text) == two_texts

    def test_repairs_trailing_comma(self):
        document = parse_document('{"title": "T", "nodes": [{"id": "a", "kind": "text", "properties": {},}]}')
        assert node_ids(document) == ["a"]

    @pytest.mark.parametrize(
        "payload",
        [
            "no json here",
            {"title": "x"},
            {"nodes": "not a list"},
            {"nodes": [{"id": "a"}]},
            {"nodes": [{"id": "a", "kind": "text"}, {"id": "a", "kind": "text"}]},
            {"nodes": [{"id": "a", "kind": "text", "properties": None}]},
            {"nodes": [{"id": "a", "kind": "text", "position": {"x": "left"}}]},
            {"nodes": ["text"]},
        ],
    )
    def test_invalid(self, payload):
        with pytest.raises(InvalidDocument):
            parse_document(payload)

    def test_size_limit(self, two_texts):
        with pytest.raises(InvalidDocument):
            DocumentParser(max_bytes=10).parse(dumps(two_texts))

    def test_depth_limit(self):
        deep = {"id": "n0", "kind": "container", "children": []}
        current = deep
        for i in range(1, 5):
            child = {"id": f"n{i}", "kind": "container", "children": []}
            current["children"].append(child)
            current = child
        with pytest.raises(InvalidDocument):
            DocumentParser(max_depth=3).parse({"nodes": [deep]})

    def test_pretty_dump(self, two_texts):
        assert json.loads(dumps(two_texts, pretty=True)) == serialize(two_texts)


@pytest.mark.unit
class TestTemplateStore:
    """Saving and loading templates."""

    def test_save_and_load(self, nested_document):
        store = InMemoryTemplateStore()
        template_id = store.save("Nested", nested_document, category="layout")
        assert template_id.startswith("tpl_")
        assert store.load(template_id) == nested_document
        assert template_id in store
        assert len(store) == 1

    def test_saved_copy_is_isolated(self, two_texts):
        store = InMemoryTemplateStore()
        template_id = store.save("Texts", two_texts)
        two_texts.nodes.clear()
        loaded = store.load(template_id)
        assert node_ids(loaded) == ["t1", "t2"]
        loaded.nodes.clear()
        assert store.load(template_id).count() == 2

    def test_info(self, nested_document):
        store = InMemoryTemplateStore()
        template_id = store.save("Nested", nested_document, description="Demo", tags=("demo",))
        info = store.info(template_id)
        assert (info.name, info.description, info.tags, info.nodes) == ("Nested", "Demo", ("demo",), 3)
        assert len(info.checksum) == 16

    def test_checksum_tracks_content(self, two_texts, nested_document):
        store = InMemoryTemplateStore()
        first = store.save("A", two_texts)
        second = store.save("B", two_texts)
        assert store.info(first).checksum == store.info(second).checksum
        store.save("B", nested_document, template_id=second)
        assert store.info(first).checksum != store.info(second).checksum

    def test_overwrite_keeps_created_at(self, two_texts, nested_document):
        store = InMemoryTemplateStore()
        template_id = store.save("Draft", two_texts)
        created = store.info(template_id).created_at
        assert store.save("Final", nested_document, template_id=template_id) == template_id
        assert store.info(template_id).name == "Final"
        assert store.info(template_id).created_at == created
        assert store.load(template_id) == nested_document

    def test_overwrite_unknown(self, two_texts):
        with pytest.raises(TemplateNotFound):
            InMemoryTemplateStore().save("x", two_texts, template_id="tpl_missing")

    def test_templates_by_category(self, two_texts):
        store = InMemoryTemplateStore()
        store.save("A", two_texts, category="auth")
        store.save("B", two_texts, category="home")
        assert [t.name for t in store.templates("auth")] == ["A"]
        assert len(store.templates()) == 2

    def test_missing(self):
        store = InMemoryTemplateStore()
        with pytest.raises(TemplateNotFound):
            store.load("tpl_missing")
        with pytest.raises(TemplateNotFound):
            store.info("tpl_missing")

    def test_delete(self, two_texts):
        store = InMemoryTemplateStore()
        template_id = store.save("A", two_texts)
        assert store.delete(template_id)
        assert not store.delete(template_id)
        assert template_id not in store
