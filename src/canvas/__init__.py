"""Canvas document model, mutation engine and inspector binding."""

from .model import (
    CanvasNode,
    Document,
    Location,
    Position,
    Size,
    create_node,
    find_node,
    index_of,
    locate,
    node_ids,
    sibling_count,
    walk,
)
from .values import PropertyBag, PropertyValue
from .engine import MutationEngine
from .inspector import BoundField, apply_edit, fields_for
from .drag import CanvasTarget, NodeTarget

__all__ = [
    "CanvasNode",
    "Document",
    "Location",
    "Position",
    "Size",
    "create_node",
    "find_node",
    "index_of",
    "locate",
    "node_ids",
    "sibling_count",
    "walk",
    "PropertyBag",
    "PropertyValue",
    "MutationEngine",
    "BoundField",
    "apply_edit",
    "fields_for",
    "CanvasTarget",
    "NodeTarget",
]
