"""Typed property values.

Node properties are stored as an open map so in-progress edits (a number
field holding ``""`` mid-typing) never fail. Readers that need types go through
``PropertyBag``: schema-declared keys are coerced into a tagged union, other
keys pass through untouched as extras, and anything missing or invalid falls
back to the kind's defaults.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, ClassVar

from catalog import ComponentKind, FieldDescriptor, FieldType

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_COLOR = re.compile(r"^(?:rgb|rgba|hsl|hsla)\([^)]*\)$")
_NAMED_COLOR = re.compile(r"^[a-zA-Z]+$")


@dataclass(frozen=True)
class TextValue:
    value: str
    tag: ClassVar[str] = "text"


@dataclass(frozen=True)
class NumberValue:
    value: int | float
    tag: ClassVar[str] = "number"


@dataclass(frozen=True)
class BoolValue:
    value: bool
    tag: ClassVar[str] = "boolean"


@dataclass(frozen=True)
class ColorValue:
    value: str
    tag: ClassVar[str] = "color"


@dataclass(frozen=True)
class EnumValue:
    value: Any
    tag: ClassVar[str] = "enum"


PropertyValue = TextValue | NumberValue | BoolValue | ColorValue | EnumValue


def to_number(raw: Any) -> int | float | None:
    """Parse a finite number from a number or numeric string (bools rejected)."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return raw if math.isfinite(raw) else None
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            parsed = float(text)
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None
    return None


def is_color(raw: Any) -> bool:
    if not isinstance(raw, str):
        return False
    text = raw.strip()
    return bool(_HEX_COLOR.match(text) or _FUNC_COLOR.match(text) or _NAMED_COLOR.match(text))


def coerce(descriptor: FieldDescriptor, raw: Any) -> PropertyValue | None:
    """Typed value for a schema field, or None if raw does not fit the field."""
    match descriptor.type:
        case FieldType.TEXT | FieldType.TEXTAREA:
            if isinstance(raw, str):
                return TextValue(raw)
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                return TextValue(str(raw))
            return None
        case FieldType.NUMBER | FieldType.SLIDER:
            number = to_number(raw)
            return NumberValue(number) if number is not None else None
        case FieldType.BOOLEAN:
            return BoolValue(raw) if isinstance(raw, bool) else None
        case FieldType.COLOR:
            return ColorValue(raw.strip()) if is_color(raw) else None
        case FieldType.SELECT:
            return EnumValue(raw) if raw in descriptor.option_values else None
    return None


class PropertyBag:
    """Typed read access to a node's properties."""

    def __init__(self, kind: ComponentKind, properties: dict[str, Any]):
        self.kind = kind
        self.known: dict[str, PropertyValue] = {}
        self.extras: dict[str, Any] = {}
        self.rejected: set[str] = set()

        for key, raw in properties.items():
            descriptor = kind.field(key)
            if descriptor is None:
                self.extras[key] = raw
                continue
            value = coerce(descriptor, raw)
            if value is None:
                self.rejected.add(key)
            else:
                self.known[key] = value

    def _candidates(self, key: str) -> list[Any]:
        """Raw values to try in order: stored extra, then the kind default."""
        values = []
        if key in self.extras:
            values.append(self.extras[key])
        default = self.kind.default_for(key)
        if default is not None:
            values.append(default)
        return values

    def _typed(self, key: str, tag: str) -> Any:
        value = self.known.get(key)
        if value is not None and value.tag == tag:
            return value.value
        return None

    def text(self, key: str, fallback: str = "") -> str:
        found = self._typed(key, TextValue.tag)
        if found is not None:
            return found
        for raw in self._candidates(key):
            if isinstance(raw, str):
                return raw
        return fallback

    def number(self, key: str, fallback: int | float = 0) -> int | float:
        found = self._typed(key, NumberValue.tag)
        if found is not None:
            return found
        for raw in self._candidates(key):
            number = to_number(raw)
            if number is not None:
                return number
        return fallback

    def boolean(self, key: str, fallback: bool = False) -> bool:
        found = self._typed(key, BoolValue.tag)
        if found is not None:
            return found
        for raw in self._candidates(key):
            if isinstance(raw, bool):
                return raw
        return fallback

    def color(self, key: str, fallback: str) -> str:
        found = self._typed(key, ColorValue.tag)
        if found is not None:
            return found
        for raw in self._candidates(key):
            if is_color(raw):
                return raw.strip()
        return fallback

    def choice(self, key: str, fallback: str) -> Any:
        found = self._typed(key, EnumValue.tag)
        if found is not None:
            return found
        descriptor = self.kind.field(key)
        allowed = descriptor.option_values if descriptor else None
        for raw in self._candidates(key):
            if allowed is None or raw in allowed:
                return raw
        return fallback

    def length(self, key: str, fallback: int | float | str) -> int | float | str:
        """Number or proportional string such as ``"100%"``."""
        for raw in ([self.known[key].value] if key in self.known else []) + self._candidates(key):
            if isinstance(raw, str) and raw.strip().endswith("%"):
                return raw.strip()
            number = to_number(raw)
            if number is not None:
                return number
        return fallback

    def items(self, key: str) -> list[dict[str, Any]]:
        """List-of-records extra (list rows, tab items)."""
        for raw in self._candidates(key):
            if isinstance(raw, list):
                return [item for item in raw if isinstance(item, dict)]
        return []
