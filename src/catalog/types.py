"""Catalog Data Models."""

import copy
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator

# No underscores: style keys are ``<kind>_<node id>`` and must split unambiguously.
KIND_ID_PATTERN = r"^[a-z][a-z0-9-]*$"


class Category(str, Enum):
    """Palette grouping. Has no effect on behavior."""

    LAYOUT = "layout"
    INPUT = "input"
    DISPLAY = "display"
    NAVIGATION = "navigation"
    MEDIA = "media"


class FieldType(str, Enum):
    """Inspector control types."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    COLOR = "color"
    BOOLEAN = "boolean"
    SELECT = "select"
    SLIDER = "slider"

    @property
    def is_numeric(self) -> bool:
        return self in (FieldType.NUMBER, FieldType.SLIDER)


class Option(BaseModel):
    """Select field choice."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: Any


class FieldDescriptor(BaseModel):
    """Editable field declared by a kind's config schema."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    label: str
    type: FieldType
    default_value: Any = None
    min: float | None = None
    max: float | None = None
    step: float | None = None
    options: tuple[Option, ...] = ()
    placeholder: str | None = None
    description: str | None = None

    @model_validator(mode="after")
    def check_constraints(self) -> "FieldDescriptor":
        if self.type == FieldType.SELECT and not self.options:
            raise ValueError(f"select field '{self.key}' needs options")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"field '{self.key}' has min > max")
        return self

    @property
    def option_values(self) -> tuple[Any, ...]:
        return tuple(option.value for option in self.options)


class ComponentKind(BaseModel):
    """Catalog entry: a placeable component type."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., pattern=KIND_ID_PATTERN)
    name: str
    category: Category
    description: str = ""
    icon: str = "Square"
    default_properties: dict[str, Any] = Field(default_factory=dict)
    config_schema: tuple[FieldDescriptor, ...] = ()
    accepts_children: bool = False

    @model_validator(mode="after")
    def check_schema_keys(self) -> "ComponentKind":
        keys = [descriptor.key for descriptor in self.config_schema]
        if len(keys) != len(set(keys)):
            raise ValueError(f"kind '{self.id}' declares a field twice")
        return self

    def field(self, key: str) -> FieldDescriptor | None:
        """Schema descriptor for key, if declared."""
        for descriptor in self.config_schema:
            if descriptor.key == key:
                return descriptor
        return None

    def defaults(self) -> dict[str, Any]:
        """Fresh deep copy of the default properties."""
        return copy.deepcopy(self.default_properties)

    def default_for(self, key: str) -> Any:
        """Default for key: kind defaults first, then the schema default."""
        if key in self.default_properties:
            return self.default_properties[key]
        descriptor = self.field(key)
        return descriptor.default_value if descriptor else None
