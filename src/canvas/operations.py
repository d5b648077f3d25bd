"""
Document Mutations
Pure tree transforms: each takes a document and returns a new one inside a
``Result``. The input document is never modified, so a failed operation
(stale id, unknown kind) leaves nothing half-applied.
"""

import copy
from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from catalog import Catalog
from core.errors import BuilderError, DepthExceeded, IllegalMove, NodeNotFound, NotAContainer, UnknownKind
from core.id import new_node_id
from .model import (
    CanvasNode,
    Document,
    Position,
    contains,
    create_node,
    depth_of,
    find_node,
    height,
    locate,
    siblings,
)


@dataclass(frozen=True)
class Change:
    """Outcome of a mutation: the new document and the node it concerned."""

    document: Document
    node: CanvasNode


def _within_depth(
    document: Document, parent_id: str | None, subject: str, levels: int, max_depth: int | None
) -> BuilderError | None:
    """Error if ``levels`` more levels under ``parent_id`` would exceed ``max_depth``."""
    if max_depth is None:
        return None
    depth = (depth_of(document, parent_id) or 0) + levels
    return DepthExceeded(subject, depth, max_depth) if depth > max_depth else None


def _container_children(
    document: Document,
    catalog: Catalog,
    parent_id: str | None,
    subject: str,
    levels: int = 1,
    max_depth: int | None = None,
) -> Result[list[CanvasNode], BuilderError]:
    """Child list that may receive a subtree of ``levels`` levels (root list for None)."""
    if parent_id is None:
        children = document.nodes
    else:
        parent = find_node(document, parent_id)
        if parent is None:
            return Failure(NodeNotFound(parent_id))
        kind = catalog.get(parent.kind)
        if kind is None or not kind.accepts_children:
            return Failure(NotAContainer(parent_id, parent.kind))
        children = parent.children

    error = _within_depth(document, parent_id, subject, levels, max_depth)
    return Failure(error) if error is not None else Success(children)


def insert(
    document: Document,
    catalog: Catalog,
    kind_id: str,
    parent_id: str | None = None,
    spacing: int = 80,
    max_depth: int | None = None,
) -> Result[Change, BuilderError]:
    """
    Append a new node of ``kind_id`` to the root or to a container.

    The node is stacked below its siblings: ``y = sibling_count * spacing``.
    Nesting it deeper than ``max_depth`` is refused with ``DepthExceeded``.
    """
    if kind_id not in catalog:
        return Failure(UnknownKind(kind_id))

    doc = document.snapshot()

    def append(children: list[CanvasNode]) -> Change:
        node = create_node(catalog, kind_id, Position(x=0, y=len(children) * spacing))
        children.append(node)
        return Change(doc, node)

    return _container_children(doc, catalog, parent_id, kind_id, max_depth=max_depth).map(append)


def move(
    document: Document, source_id: str, target_id: str, max_depth: int | None = None
) -> Result[Change, BuilderError]:
    """
    List-move ``source_id`` onto ``target_id``'s position.

    The source ends up at the target's former index within the target's
    sibling list; all other nodes keep their relative order. Moving a node
    onto itself is a no-op, moving it into its own subtree is refused.
    """
    source = find_node(document, source_id)
    if source is None:
        return Failure(NodeNotFound(source_id))
    if source_id == target_id:
        return Success(Change(document, source))

    doc = document.snapshot()
    source_at = locate(doc, source_id)
    target_at = locate(doc, target_id)
    if source_at is None:
        return Failure(NodeNotFound(source_id))
    if target_at is None:
        return Failure(NodeNotFound(target_id))

    node = find_node(doc, source_id)
    if contains(node, target_id):
        return Failure(IllegalMove(source_id, target_id))
    error = _within_depth(doc, target_at.parent_id, source_id, height(node), max_depth)
    if error is not None:
        return Failure(error)

    # Captured before removal: the node must land at the target's former index.
    destination_index = target_at.index
    siblings(doc, source_at.parent_id).pop(source_at.index)
    siblings(doc, target_at.parent_id).insert(destination_index, node)
    return Success(Change(doc, node))


def move_into(
    document: Document,
    catalog: Catalog,
    source_id: str,
    parent_id: str | None = None,
    max_depth: int | None = None,
) -> Result[Change, BuilderError]:
    """Move a node to the end of the root list or of a container."""
    source = find_node(document, source_id)
    if source is None:
        return Failure(NodeNotFound(source_id))
    if parent_id is not None and contains(source, parent_id):
        return Failure(IllegalMove(source_id, parent_id))

    doc = document.snapshot()

    def append(children: list[CanvasNode]) -> Change:
        source_at = locate(doc, source_id)
        node = siblings(doc, source_at.parent_id).pop(source_at.index)
        children.append(node)
        return Change(doc, node)

    levels = height(source)
    return _container_children(doc, catalog, parent_id, source_id, levels, max_depth).map(append)


def _fresh_copy(node: CanvasNode) -> CanvasNode:
    """Deep clone with new ids for the whole subtree."""
    clone = node.model_copy(deep=True)
    clone.id = new_node_id()
    clone.children = [_fresh_copy(child) for child in node.children]
    return clone


def duplicate(document: Document, node_id: str, offset: int = 80) -> Result[Change, BuilderError]:
    """Clone a node (fresh ids, copied properties) right after its source."""
    doc = document.snapshot()
    location = locate(doc, node_id)
    if location is None:
        return Failure(NodeNotFound(node_id))

    row = siblings(doc, location.parent_id)
    clone = _fresh_copy(row[location.index])
    clone.position = Position(x=clone.position.x, y=clone.position.y + offset)
    row.insert(location.index + 1, clone)
    return Success(Change(doc, clone))


def remove(document: Document, node_id: str) -> Result[Change, BuilderError]:
    """Remove a node together with its subtree. ``Change.node`` is the removed node."""
    doc = document.snapshot()
    location = locate(doc, node_id)
    if location is None:
        return Failure(NodeNotFound(node_id))

    removed = siblings(doc, location.parent_id).pop(location.index)
    return Success(Change(doc, removed))


def patch(document: Document, node_id: str, partial: dict[str, Any]) -> Result[Change, BuilderError]:
    """Shallow-merge ``partial`` into a node's properties; unknown keys are kept."""
    doc = document.snapshot()
    node = find_node(doc, node_id)
    if node is None:
        return Failure(NodeNotFound(node_id))

    node.properties = {**node.properties, **copy.deepcopy(partial)}
    return Success(Change(doc, node))
