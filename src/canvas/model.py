"""Canvas Document Model."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any
from pydantic import BaseModel, Field

from catalog import Catalog
from core.id import new_node_id

Length = int | float | str


class Position(BaseModel):
    """Free-form placement bookkeeping (not a rendering contract)."""

    x: float = 0
    y: float = 0


class Size(BaseModel):
    """Node box size; each side is a length or a string such as ``"100%"``."""

    width: Length = "100%"
    height: Length = "auto"


class CanvasNode(BaseModel):
    """A placed instance of a component kind."""

    id: str = Field(..., min_length=1)
    kind: str = Field(..., min_length=1)
    properties: dict[str, Any] = Field(default_factory=dict)
    children: list["CanvasNode"] = Field(default_factory=list)
    position: Position = Field(default_factory=Position)
    size: Size = Field(default_factory=Size)

    @property
    def style_id(self) -> str:
        """
        Deterministic style identifier ``<kind>_<id>``.

        Unique per node because catalog kind ids never contain ``_``.
        """
        return f"{self.kind}_{self.id}"


class Document(BaseModel):
    """One screen: an ordered sequence of root nodes."""

    title: str = Field(default="Untitled")
    nodes: list[CanvasNode] = Field(default_factory=list)

    def snapshot(self) -> "Document":
        """Deep copy that shares nothing with this document."""
        return self.model_copy(deep=True)

    def count(self) -> int:
        """Number of nodes in the whole tree."""
        return sum(1 for _ in walk(self.nodes))


CanvasNode.model_rebuild()


@dataclass(frozen=True)
class Location:
    """Where a node sits: its parent (None for root) and sibling index."""

    parent_id: str | None
    index: int


def create_node(catalog: Catalog, kind_id: str, position: Position | None = None) -> CanvasNode:
    """
    Create a node of a registered kind with a fresh id.

    Raises:
        UnknownKind: If the kind is not in the catalog
    """
    kind = catalog.require(kind_id)
    return CanvasNode(
        id=new_node_id(),
        kind=kind.id,
        properties=kind.defaults(),
        position=position or Position(),
    )


def walk(nodes: list[CanvasNode]) -> Iterator[CanvasNode]:
    """Pre-order traversal (the generation order)."""
    for node in nodes:
        yield node
        yield from walk(node.children)


def find_node(document: Document, node_id: str) -> CanvasNode | None:
    for node in walk(document.nodes):
        if node.id == node_id:
            return node
    return None


def _locate(nodes: list[CanvasNode], node_id: str, parent_id: str | None) -> Location | None:
    for index, node in enumerate(nodes):
        if node.id == node_id:
            return Location(parent_id, index)
        found = _locate(node.children, node_id, node.id)
        if found:
            return found
    return None


def locate(document: Document, node_id: str) -> Location | None:
    return _locate(document.nodes, node_id, None)


def siblings(document: Document, parent_id: str | None) -> list[CanvasNode] | None:
    """
    The live child list of ``parent_id`` (root list for None).

    Returns None if the parent does not exist.
    """
    if parent_id is None:
        return document.nodes
    parent = find_node(document, parent_id)
    return parent.children if parent else None


def sibling_count(document: Document, parent_id: str | None = None) -> int:
    children = siblings(document, parent_id)
    return len(children) if children is not None else 0


def index_of(document: Document, node_id: str) -> int | None:
    location = locate(document, node_id)
    return location.index if location else None


def node_ids(document: Document) -> list[str]:
    return [node.id for node in walk(document.nodes)]


def _depth(nodes: list[CanvasNode], node_id: str, depth: int) -> int | None:
    for node in nodes:
        if node.id == node_id:
            return depth
        found = _depth(node.children, node_id, depth + 1)
        if found is not None:
            return found
    return None


def depth_of(document: Document, node_id: str | None) -> int | None:
    """Nesting level of a node (root nodes are 1; None, the root list, is 0)."""
    if node_id is None:
        return 0
    return _depth(document.nodes, node_id, 1)


def height(node: CanvasNode) -> int:
    """Levels in a subtree (a leaf is 1)."""
    return 1 + max((height(child) for child in node.children), default=0)


def subtree_ids(node: CanvasNode) -> list[str]:
    """Ids of node and all its descendants."""
    return [n.id for n in walk([node])]


def contains(node: CanvasNode, node_id: str) -> bool:
    """True if node_id is node itself or one of its descendants."""
    return node_id in subtree_ids(node)


def duplicate_ids(document: Document) -> set[str]:
    seen: set[str] = set()
    dupes: set[str] = set()
    for node_id in node_ids(document):
        if node_id in seen:
            dupes.add(node_id)
        seen.add(node_id)
    return dupes
