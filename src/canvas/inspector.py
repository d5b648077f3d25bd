"""Property Inspector Binding - schema-driven field list and edit routing."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Failure

from catalog import Catalog, FieldDescriptor, FieldType
from core.errors import BuilderError, NodeNotFound, UnknownField
from .engine import MutationEngine
from .model import CanvasNode, find_node
from .values import to_number


@dataclass(frozen=True)
class BoundField:
    """A schema field paired with the node's current value."""

    descriptor: FieldDescriptor
    value: Any

    @property
    def key(self) -> str:
        return self.descriptor.key


def fields_for(catalog: Catalog, node: CanvasNode | None) -> list[BoundField]:
    """
    Editable fields of the selected node.

    No selection or an unregistered kind yields an empty list.
    """
    if node is None:
        return []
    return [BoundField(descriptor, _current(node, descriptor)) for descriptor in catalog.schema_for(node.kind)]


def _current(node: CanvasNode, descriptor: FieldDescriptor) -> Any:
    """Stored value, or the schema default when the key is absent or null."""
    value = node.properties.get(descriptor.key)
    return value if value is not None else descriptor.default_value


def coerce_input(descriptor: FieldDescriptor, raw: Any) -> Any:
    """
    Convert control input to the stored value.

    Numeric text becomes a number; anything that does not parse yet (``""``,
    ``"1."``) is stored as typed so an edit in progress is never rejected.
    """
    if descriptor.type.is_numeric and isinstance(raw, str):
        number = to_number(raw)
        return number if number is not None and not raw.strip().endswith(".") else raw
    if descriptor.type == FieldType.BOOLEAN and isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    return raw


def apply_edit(engine: MutationEngine, node_id: str, key: str, raw: Any) -> Result[CanvasNode, BuilderError]:
    """
    Route one inspector edit through ``patch_properties``.

    Keys outside the node's schema are refused without touching the node.
    """
    node = find_node(engine.document, node_id)
    if node is None:
        return Failure(NodeNotFound(node_id))

    kind = engine.catalog.get(node.kind)
    descriptor = kind.field(key) if kind else None
    if descriptor is None:
        return Failure(UnknownField(node.kind, key))

    return engine.patch_properties(node_id, {key: coerce_input(descriptor, raw)})
