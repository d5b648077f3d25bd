"""
Mutation & Drag-Drop Engine
The single writer of a document: every canvas action funnels through here.
"""

from typing import Any
from returns.result import Result, Success, Failure
from returns.pipeline import is_successful

from catalog import Catalog
from core import Settings, get_logger, get_settings
from core.errors import BuilderError, NodeNotFound
from core.validate import DocumentValidator
from . import drag, operations
from .history import History
from .model import CanvasNode, Document, find_node, subtree_ids

logger = get_logger(__name__)


class MutationEngine:
    """
    Interactive editing session over one document.

    Operations are total: a stale id or unknown kind yields a ``Failure``
    and leaves the document, the selection and the history untouched.
    """

    def __init__(
        self,
        catalog: Catalog,
        document: Document | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.catalog = catalog
        self.stack_spacing = settings.stack_spacing
        self.duplicate_offset = settings.duplicate_offset
        self.max_depth = settings.max_tree_depth
        self.history = History(limit=settings.history_limit)
        self.drag_state: drag.DragState = drag.IDLE
        self.selected_id: str | None = None
        self._document = Document()
        if document is not None:
            self.load(document)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def document(self) -> Document:
        """Current document. Treat as read-only; use ``snapshot()`` to keep a copy."""
        return self._document

    def snapshot(self) -> Document:
        return self._document.snapshot()

    @property
    def selected(self) -> CanvasNode | None:
        return find_node(self._document, self.selected_id) if self.selected_id else None

    def load(self, document: Document) -> None:
        """
        Replace the document (e.g. after an external load).

        Raises:
            InvalidDocument: If the document violates structural invariants
        """
        DocumentValidator(self.max_depth).validate(document.model_dump())
        self._document = document.snapshot()
        self.selected_id = None
        self.drag_state = drag.IDLE
        self.history.clear()
        logger.info("document_loaded", title=document.title, nodes=self._document.count())

    def _commit(self, result: Result[operations.Change, BuilderError], event: str) -> Result[CanvasNode, BuilderError]:
        if not is_successful(result):
            error = result.failure()
            logger.warning("mutation_rejected", operation=event, error=str(error))
            return Failure(error)

        change = result.unwrap()
        if change.document is not self._document:
            self.history.record(self._document)
            self._document = change.document
        logger.debug(event, node_id=change.node.id, kind=change.node.kind)
        return Success(change.node)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def insert(self, kind_id: str, parent_id: str | None = None) -> Result[CanvasNode, BuilderError]:
        """Insert a new node of ``kind_id`` at the end of the root or a container."""
        result = operations.insert(
            self._document, self.catalog, kind_id, parent_id, spacing=self.stack_spacing, max_depth=self.max_depth
        )
        return self._commit(result, "node_inserted")

    def move(self, source_id: str, target_id: str) -> Result[CanvasNode, BuilderError]:
        """Reorder: put ``source_id`` at ``target_id``'s index."""
        result = operations.move(self._document, source_id, target_id, max_depth=self.max_depth)
        return self._commit(result, "node_moved")

    def move_into(self, source_id: str, parent_id: str | None = None) -> Result[CanvasNode, BuilderError]:
        result = operations.move_into(self._document, self.catalog, source_id, parent_id, max_depth=self.max_depth)
        return self._commit(result, "node_reparented")

    def duplicate(self, node_id: str) -> Result[CanvasNode, BuilderError]:
        result = operations.duplicate(self._document, node_id, offset=self.duplicate_offset)
        return self._commit(result, "node_duplicated")

    def delete(self, node_id: str) -> Result[CanvasNode, BuilderError]:
        """Delete a node and its subtree; clears the selection if it was inside."""
        result = self._commit(operations.remove(self._document, node_id), "node_deleted")
        if is_successful(result) and self.selected_id in subtree_ids(result.unwrap()):
            self.selected_id = None
        return result

    def patch_properties(self, node_id: str, partial: dict[str, Any]) -> Result[CanvasNode, BuilderError]:
        """Shallow-merge property values into a node."""
        return self._commit(operations.patch(self._document, node_id, partial), "node_patched")

    def select(self, node_id: str | None) -> Result[CanvasNode | None, BuilderError]:
        if node_id is None:
            self.selected_id = None
            return Success(None)
        node = find_node(self._document, node_id)
        if node is None:
            return Failure(NodeNotFound(node_id))
        self.selected_id = node_id
        return Success(node)

    def undo(self) -> bool:
        previous = self.history.undo(self._document)
        if previous is None:
            return False
        self._document = previous
        self.selected_id = None
        logger.debug("undo", nodes=self._document.count())
        return True

    def redo(self) -> bool:
        following = self.history.redo(self._document)
        if following is None:
            return False
        self._document = following
        self.selected_id = None
        logger.debug("redo", nodes=self._document.count())
        return True

    # ------------------------------------------------------------------
    # Drag and drop
    # ------------------------------------------------------------------

    def begin_drag_from_palette(self, kind_id: str) -> None:
        self.drag_state = drag.begin_from_palette(self.drag_state, kind_id)

    def begin_drag_node(self, node_id: str) -> None:
        self.drag_state = drag.begin_node(self.drag_state, node_id)

    def cancel_drag(self) -> None:
        self.drag_state = drag.cancel(self.drag_state)

    def drop(self, target: drag.DropTarget | None) -> Result[CanvasNode | None, BuilderError]:
        """
        Finish the current gesture.

        Returns ``Success(None)`` when nothing changed (cancelled drop, drop
        onto itself), ``Success(node)`` for the inserted or moved node, or the
        operation's ``Failure``. The engine is back in Idle afterwards.
        """
        state = drag.drop(self.drag_state, target)
        self.drag_state = drag.IDLE
        if not isinstance(state, drag.Dropped):
            logger.debug("drag_cancelled")
            return Success(None)

        match drag.plan_drop(state):
            case drag.InsertPlan(kind_id, parent_id):
                return self.insert(kind_id, parent_id)
            case drag.MovePlan(source_id, target_id):
                return self.move(source_id, target_id)
            case drag.MoveIntoPlan(source_id, parent_id):
                return self.move_into(source_id, parent_id)
        return Success(None)
