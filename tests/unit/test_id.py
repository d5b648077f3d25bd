"""Tests for ID generation system."""

import pytest
from ulid import ULID

from core.id import Prefix, new_generation_id, new_node_id, new_template_id


def ulid_part(id_str: str) -> str:
    prefix, _, rest = id_str.partition("_")
    return rest


@pytest.mark.unit
class TestGeneration:
    """Test basic ID generation."""

    def test_unique(self):
        ids = {new_node_id() for _ in range(1000)}
        assert len(ids) == 1000

    def test_prefixes(self):
        assert new_node_id().startswith("el_")
        assert new_template_id().startswith("tpl_")
        assert new_generation_id().startswith("gen_")

    def test_ulid_suffix(self):
        node_id = new_node_id()
        assert len(node_id) == len(Prefix.NODE) + 1 + 26
        assert str(ULID.from_str(ulid_part(node_id))) == ulid_part(node_id)

    def test_usable_in_style_identifier(self):
        """Node ids never break a ``<kind>_<id>`` JS identifier."""
        node_id = new_node_id()
        assert f"button_{node_id}".replace("_", "").isalnum()
