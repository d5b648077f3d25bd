"""
Component Catalog
Read-only registry of component kinds, constructed once and injected.
"""

from collections.abc import Iterable

from core import get_logger
from core.errors import UnknownKind
from .types import Category, ComponentKind, FieldDescriptor
from .kinds import BUILTIN_KINDS

logger = get_logger(__name__)


class Catalog:
    """
    Immutable set of component kinds.

    Adding a kind means constructing a catalog with one more entry; nothing
    else in the builder changes.
    """

    def __init__(self, kinds: Iterable[ComponentKind]):
        index: dict[str, ComponentKind] = {}
        for kind in kinds:
            if kind.id in index:
                raise ValueError(f"Duplicate component kind: {kind.id}")
            index[kind.id] = kind
        self._index = index
        logger.debug("catalog_built", kinds=len(index))

    def get(self, kind_id: str) -> ComponentKind | None:
        return self._index.get(kind_id)

    def require(self, kind_id: str) -> ComponentKind:
        """
        Get kind by id.

        Raises:
            UnknownKind: If the kind is not registered
        """
        kind = self._index.get(kind_id)
        if kind is None:
            raise UnknownKind(kind_id)
        return kind

    def schema_for(self, kind_id: str) -> tuple[FieldDescriptor, ...]:
        """Editable fields of a kind (empty for unknown kinds)."""
        kind = self._index.get(kind_id)
        return kind.config_schema if kind else ()

    def categories(self) -> list[Category]:
        """Categories that have at least one kind, in first-seen order."""
        seen: list[Category] = []
        for kind in self._index.values():
            if kind.category not in seen:
                seen.append(kind.category)
        return seen

    def by_category(self, category: Category | str) -> list[ComponentKind]:
        category = Category(category)
        return [kind for kind in self._index.values() if kind.category == category]

    def search(self, term: str, category: Category | str | None = None) -> list[ComponentKind]:
        """
        Palette filter: case-insensitive match on name or description.

        Args:
            term: Search text (empty matches everything)
            category: Optional category restriction
        """
        needle = term.strip().lower()
        kinds = self.by_category(category) if category else self.list()
        return [k for k in kinds if needle in k.name.lower() or needle in k.description.lower()]

    def __contains__(self, kind_id: object) -> bool:
        return kind_id in self._index

    def __len__(self) -> int:
        return len(self._index)

    # Kept last: once bound, the name shadows the builtin in later annotations.
    def list(self) -> list[ComponentKind]:
        """All kinds in registration order."""
        return list(self._index.values())


def default_catalog() -> Catalog:
    """Catalog of the built-in kinds."""
    return Catalog(BUILTIN_KINDS)
