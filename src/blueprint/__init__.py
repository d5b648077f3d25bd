"""Document interchange and template storage."""

from .parser import DocumentParser, dumps, parse_document, serialize
from .store import InMemoryTemplateStore, TemplateInfo, TemplateStore

__all__ = [
    "DocumentParser",
    "dumps",
    "parse_document",
    "serialize",
    "InMemoryTemplateStore",
    "TemplateInfo",
    "TemplateStore",
]
