"""Document Parser - JSON to Document with validation."""

from typing import Any
from pydantic import ValidationError

from canvas.model import Document
from core import get_logger, get_settings
from core.errors import InvalidDocument
from core.id import new_node_id
from core.json import JSONParseError, dumps_compact, dumps_pretty, extract_json
from core.validate import DocumentValidator, validate_json_size

logger = get_logger(__name__)


class DocumentParser:
    """
    Parses serialized screens into ``Document``.

    Two shapes are accepted:

    - native: ``{"title", "nodes": [{"id", "kind", "properties", "children", ...}]}``
    - legacy element format: ``{"name", "elements": [{"id", "type", "props", ...}]}``,
      as stored by older template files

    Elements without an id get a fresh one. Anything else structurally wrong
    raises ``InvalidDocument``.
    """

    def __init__(self, max_bytes: int | None = None, max_depth: int | None = None) -> None:
        settings = get_settings()
        self.max_bytes = max_bytes or settings.max_document_bytes
        self.validator = DocumentValidator(max_depth or settings.max_tree_depth)

    def parse(self, content: str | dict[str, Any]) -> Document:
        """
        Parse document JSON (text or already-decoded dict).

        Raises:
            InvalidDocument: If the payload is not a valid document
        """
        if isinstance(content, str):
            validate_json_size(content, self.max_bytes)
            try:
                data = extract_json(content, repair=True)
            except JSONParseError as e:
                logger.error("json_parse_failed", error=str(e))
                raise InvalidDocument(f"Invalid JSON: {e}") from e
        elif isinstance(content, dict):
            data = content
        else:
            logger.error("invalid_format", type=type(content).__name__)
            raise InvalidDocument("Invalid document format: expected JSON object")

        native = self._normalize(data)
        self.validator.validate(native)
        try:
            document = Document.model_validate(native)
        except ValidationError as e:
            logger.error("document_validation_failed", errors=e.error_count())
            raise InvalidDocument(f"Invalid document: {e.errors()[0]['msg']}") from e

        logger.info("document_parsed", title=document.title, nodes=document.count())
        return document

    def _normalize(self, data: dict[str, Any]) -> dict[str, Any]:
        if "nodes" in data:
            raw_nodes = data["nodes"]
        elif "elements" in data:
            raw_nodes = data["elements"]
        else:
            logger.error("missing_nodes_section")
            raise InvalidDocument("Invalid document: missing 'nodes' or 'elements' section")

        if not isinstance(raw_nodes, list):
            raise InvalidDocument("Document 'nodes' must be a list")

        title = data.get("title") or data.get("name") or "Untitled"
        return {"title": str(title), "nodes": [self._expand_node(node) for node in raw_nodes]}

    def _expand_node(self, node: Any) -> Any:
        """Map one element onto the native node shape (recursively)."""
        if not isinstance(node, dict):
            # Left for the validator to report.
            return node

        node_id = node.get("id")
        if node_id is None or node_id == "":
            node_id = new_node_id()
            logger.debug("node_id_assigned", node_id=node_id)

        children = node.get("children") or []
        expanded: dict[str, Any] = {
            "id": node_id,
            "kind": node.get("kind", node.get("type")),
            "properties": node.get("properties", node.get("props", {})),
            "children": [self._expand_node(child) for child in children] if isinstance(children, list) else children,
        }
        for key in ("position", "size"):
            if isinstance(node.get(key), dict):
                expanded[key] = node[key]
        return expanded


def serialize(document: Document, legacy: bool = False) -> dict[str, Any]:
    """
    Document to plain JSON-ready dict.

    ``legacy=True`` writes the element format (``name``/``elements`` with
    ``type``/``props``) older template files use.
    """
    data = document.model_dump(mode="json")
    if not legacy:
        return data
    return {"name": data["title"], "elements": [_to_element(node) for node in data["nodes"]]}


def _to_element(node: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": node["id"],
        "type": node["kind"],
        "props": node["properties"],
        "children": [_to_element(child) for child in node["children"]],
        "position": node["position"],
        "size": node["size"],
    }


def dumps(document: Document, pretty: bool = False, legacy: bool = False) -> str:
    data = serialize(document, legacy=legacy)
    return dumps_pretty(data) if pretty else dumps_compact(data)


def parse_document(content: str | dict[str, Any]) -> Document:
    """
    Convenience function to parse a document.

    Raises:
        InvalidDocument: If the payload is not a valid document
    """
    return DocumentParser().parse(content)
