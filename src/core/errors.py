"""Builder error taxonomy.

Engine-level errors (UnknownKind, NodeNotFound, UnknownField, NotAContainer,
IllegalMove, DepthExceeded) are returned as ``Failure`` values by mutation
operations.
InvalidDocument, TemplateNotFound and GenerationDegraded are raised.
"""

from dataclasses import dataclass


class BuilderError(Exception):
    """Base class for all builder errors."""


class UnknownKind(BuilderError):
    """Kind id is not registered in the catalog."""

    def __init__(self, kind_id: str) -> None:
        super().__init__(f"Unknown component kind: {kind_id}")
        self.kind_id = kind_id


class NodeNotFound(BuilderError):
    """Node id does not exist in the document."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node not found: {node_id}")
        self.node_id = node_id


class UnknownField(BuilderError):
    """Property key is not declared by the node's kind schema."""

    def __init__(self, kind_id: str, key: str) -> None:
        super().__init__(f"Kind '{kind_id}' has no editable field '{key}'")
        self.kind_id = kind_id
        self.key = key


class NotAContainer(BuilderError):
    """Target node cannot hold children."""

    def __init__(self, node_id: str, kind_id: str) -> None:
        super().__init__(f"Node {node_id} ({kind_id}) does not accept children")
        self.node_id = node_id
        self.kind_id = kind_id


class IllegalMove(BuilderError):
    """Move would place a node inside its own subtree."""

    def __init__(self, source_id: str, target_id: str) -> None:
        super().__init__(f"Cannot move {source_id} into its own subtree at {target_id}")
        self.source_id = source_id
        self.target_id = target_id


class DepthExceeded(BuilderError):
    """Placing a node would nest the tree deeper than allowed."""

    def __init__(self, subject: str, depth: int, max_depth: int) -> None:
        super().__init__(f"Placing {subject} would reach depth {depth}, maximum is {max_depth}")
        self.subject = subject
        self.depth = depth
        self.max_depth = max_depth


class InvalidDocument(BuilderError):
    """Document violates structural invariants."""

    def __init__(self, message: str, node_id: str | None = None) -> None:
        super().__init__(message)
        self.node_id = node_id


class TemplateNotFound(BuilderError):
    """Template id is not in the store."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Template not found: {template_id}")
        self.template_id = template_id


@dataclass(frozen=True)
class DegradedNode:
    """A node emitted as an unknown-kind placeholder."""

    node_id: str
    kind: str
    style_id: str

    def __str__(self) -> str:
        return f"{self.node_id} ({self.kind})"


class GenerationDegraded(BuilderError):
    """One or more nodes fell back to placeholders during export."""

    def __init__(self, nodes: list[DegradedNode]) -> None:
        listed = ", ".join(str(n) for n in nodes)
        super().__init__(f"{len(nodes)} node(s) degraded to placeholders: {listed}")
        self.nodes = nodes


__all__ = [
    "BuilderError",
    "UnknownKind",
    "NodeNotFound",
    "UnknownField",
    "NotAContainer",
    "IllegalMove",
    "DepthExceeded",
    "InvalidDocument",
    "TemplateNotFound",
    "DegradedNode",
    "GenerationDegraded",
]
