"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    BuilderError,
    UnknownKind,
    NodeNotFound,
    UnknownField,
    NotAContainer,
    IllegalMove,
    DepthExceeded,
    InvalidDocument,
    TemplateNotFound,
    DegradedNode,
    GenerationDegraded,
)
from .validate import DocumentValidator, ValidationResult, validate_document, validate_json_size
from .logging_config import configure_logging, get_logger, LogContext
from .json import extract_json, dumps_compact, dumps_pretty, js_string, JSONParseError
from .hash import Algorithm, checksum, hash_string, hash_fields
from .cache import LRUCache, Stats


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
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
    # Validation
    "DocumentValidator",
    "ValidationResult",
    "validate_document",
    "validate_json_size",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "dumps_compact",
    "dumps_pretty",
    "js_string",
    "JSONParseError",
    # Hashing
    "Algorithm",
    "checksum",
    "hash_string",
    "hash_fields",
    # Caching
    "LRUCache",
    "Stats",
    # DI
    "create_container",
]
