"""Structural validation for serialized documents."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from .errors import InvalidDocument


MAX_DOCUMENT_BYTES = 1024 * 1024  # 1MB
MAX_TREE_DEPTH = 20


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    node_id: str | None = None


def validate_json_size(data: str, max_size: int = MAX_DOCUMENT_BYTES, name: str = "Document") -> None:
    """
    Reject oversized payloads before parsing.

    Raises:
        InvalidDocument: If the encoded size exceeds ``max_size``
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise InvalidDocument(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


class DocumentValidator:
    """Checks the native dict form of a document (``Document.model_dump()``)."""

    def __init__(self, max_depth: int = MAX_TREE_DEPTH) -> None:
        self.max_depth = max_depth

    def validate(self, document: dict[str, Any]) -> None:
        """
        Validate structure: node lists, id/kind fields, id uniqueness, depth.

        Raises:
            InvalidDocument: On the first violation found
        """
        nodes = document.get("nodes")
        if not isinstance(nodes, list):
            raise InvalidDocument("Document 'nodes' must be a list")

        seen: set[str] = set()
        self._check_nodes(nodes, seen, depth=1)

    def _check_nodes(self, nodes: list[Any], seen: set[str], depth: int) -> None:
        if nodes and depth > self.max_depth:
            raise InvalidDocument(f"Node nesting depth {depth} exceeds maximum {self.max_depth}")

        for node in nodes:
            if not isinstance(node, dict):
                raise InvalidDocument(f"Node must be an object, got {type(node).__name__}")

            node_id = node.get("id")
            if not isinstance(node_id, str) or not node_id:
                raise InvalidDocument("Node is missing a non-empty string 'id'")
            if node_id in seen:
                raise InvalidDocument(f"Duplicate node id: {node_id}", node_id=node_id)
            seen.add(node_id)

            kind = node.get("kind")
            if not isinstance(kind, str) or not kind:
                raise InvalidDocument(f"Node {node_id} has no kind reference", node_id=node_id)

            if not isinstance(node.get("properties", {}), dict):
                raise InvalidDocument(f"Node {node_id} properties must be an object", node_id=node_id)

            children = node.get("children", [])
            if not isinstance(children, list):
                raise InvalidDocument(f"Node {node_id} children must be a list", node_id=node_id)
            self._check_nodes(children, seen, depth + 1)


def validate_document(document: dict[str, Any], max_depth: int = MAX_TREE_DEPTH) -> Result[None, ValidationResult]:
    """
    Validate a serialized document (Result pattern version).

    Returns:
        Success(None) or Failure(ValidationResult)
    """
    try:
        DocumentValidator(max_depth).validate(document)
        return Success(None)
    except InvalidDocument as e:
        return Failure(ValidationResult(str(e), e.node_id))
