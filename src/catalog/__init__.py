"""Component catalog: kinds, schemas and shared appearance rules."""

from .types import Category, ComponentKind, FieldDescriptor, FieldType, Option
from .registry import Catalog, default_catalog
from .kinds import BUILTIN_KINDS
from .appearance import ButtonColors, button_colors

__all__ = [
    "Category",
    "ComponentKind",
    "FieldDescriptor",
    "FieldType",
    "Option",
    "Catalog",
    "default_catalog",
    "BUILTIN_KINDS",
    "ButtonColors",
    "button_colors",
]
