"""Undo/redo history of document snapshots."""

from .model import Document


class History:
    """
    Linear snapshot history.

    ``record`` stores the state *before* a mutation; a record after an undo
    discards the redo branch. The oldest snapshot is dropped beyond ``limit``.
    """

    def __init__(self, limit: int = 50) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self.limit = limit
        self._past: list[Document] = []
        self._future: list[Document] = []

    def record(self, before: Document) -> None:
        self._past.append(before.snapshot())
        if len(self._past) > self.limit:
            self._past.pop(0)
        self._future.clear()

    def undo(self, current: Document) -> Document | None:
        """Previous snapshot, or None when there is nothing to undo."""
        if not self._past:
            return None
        self._future.append(current.snapshot())
        return self._past.pop()

    def redo(self, current: Document) -> Document | None:
        if not self._future:
            return None
        self._past.append(current.snapshot())
        return self._future.pop()

    def clear(self) -> None:
        self._past.clear()
        self._future.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)
