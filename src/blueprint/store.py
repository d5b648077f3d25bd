"""Template Store - named document snapshots kept as opaque JSON blobs."""

from datetime import datetime, timezone
from typing import Protocol
from pydantic import BaseModel, ConfigDict, Field

from canvas.model import Document
from core import checksum, get_logger
from core.errors import TemplateNotFound
from core.id import TemplateID, new_template_id
from .parser import DocumentParser, dumps

logger = get_logger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TemplateInfo(BaseModel):
    """Template metadata (everything except the document itself)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., min_length=1)
    description: str = ""
    category: str = "custom"
    tags: tuple[str, ...] = ()
    version: str = "1.0.0"
    nodes: int = 0
    checksum: str = ""
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class TemplateStore(Protocol):
    """Persistence seam for templates."""

    def save(self, name: str, document: Document, **metadata) -> TemplateID: ...

    def load(self, template_id: str) -> Document: ...

    def info(self, template_id: str) -> TemplateInfo: ...

    def templates(self, category: str | None = None) -> list[TemplateInfo]: ...

    def delete(self, template_id: str) -> bool: ...


class InMemoryTemplateStore:
    """
    Process-local template store.

    Documents are stored serialized, so later edits to a saved document never
    leak into the store and every load returns an independent copy.
    """

    def __init__(self, parser: DocumentParser | None = None) -> None:
        self.parser = parser or DocumentParser()
        self._blobs: dict[str, str] = {}
        self._info: dict[str, TemplateInfo] = {}

    def save(
        self,
        name: str,
        document: Document,
        description: str = "",
        category: str = "custom",
        tags: tuple[str, ...] = (),
        template_id: str | None = None,
    ) -> TemplateID:
        """Save a new template, or overwrite ``template_id`` if given."""
        if template_id is not None and template_id not in self._info:
            raise TemplateNotFound(template_id)

        tid = TemplateID(template_id) if template_id else new_template_id()
        previous = self._info.get(tid)
        blob = dumps(document)
        self._blobs[tid] = blob
        self._info[tid] = TemplateInfo(
            id=tid,
            name=name,
            description=description,
            category=category,
            tags=tuple(tags),
            nodes=document.count(),
            checksum=checksum(blob),
            created_at=previous.created_at if previous else _now(),
        )
        logger.info(
            "template_saved", template_id=tid, name=name, nodes=document.count(), updated=previous is not None
        )
        return tid

    def load(self, template_id: str) -> Document:
        """
        Raises:
            TemplateNotFound: If the id is unknown
        """
        blob = self._blobs.get(template_id)
        if blob is None:
            raise TemplateNotFound(template_id)
        return self.parser.parse(blob)

    def info(self, template_id: str) -> TemplateInfo:
        found = self._info.get(template_id)
        if found is None:
            raise TemplateNotFound(template_id)
        return found

    def templates(self, category: str | None = None) -> list[TemplateInfo]:
        """Templates, most recently updated first."""
        infos = [i for i in self._info.values() if category is None or i.category == category]
        return sorted(infos, key=lambda i: i.updated_at, reverse=True)

    def delete(self, template_id: str) -> bool:
        removed = self._blobs.pop(template_id, None) is not None
        self._info.pop(template_id, None)
        if removed:
            logger.info("template_deleted", template_id=template_id)
        return removed

    def __len__(self) -> int:
        return len(self._blobs)

    def __contains__(self, template_id: str) -> bool:
        return template_id in self._blobs
