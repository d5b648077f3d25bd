"""JavaScript / JSX text rendering helpers."""

import re
from dataclasses import dataclass, field
from typing import Any

from core.json import js_string

INDENT = "  "
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_JSX_UNSAFE = re.compile(r"[{}<>\n\r]")


def format_number(value: int | float) -> str:
    """Numbers as a human would write them: ``24`` not ``24.0``, ``1.5``."""
    if isinstance(value, float):
        value = round(value, 4)
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def object_key(name: str) -> str:
    return name if _IDENTIFIER.match(name) else js_string(name)


def js_value(value: Any) -> str:
    """Render a Python value as a JavaScript literal on one line."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return js_string(value)
    if isinstance(value, dict):
        if not value:
            return "{}"
        body = ", ".join(f"{object_key(str(k))}: {js_value(v)}" for k, v in value.items())
        return "{ " + body + " }"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(js_value(v) for v in value) + "]"
    return js_string(str(value))


def style_ref(name: str) -> str:
    """Expression referencing a style: ``styles.x`` or ``styles['a-b']``."""
    return f"styles.{name}" if _IDENTIFIER.match(name) else f"styles[{js_string(name)}]"


def jsx_text(text: str) -> str:
    """Text child of a JSX element, wrapped in an expression when needed."""
    if not text or _JSX_UNSAFE.search(text) or text != text.strip():
        return "{" + js_string(text) + "}"
    return text


def jsx_attr(value: str) -> str:
    """String attribute value: ``"..."`` when safe, ``{'...'}`` otherwise."""
    if '"' in value or "\\" in value or "\n" in value or "\r" in value:
        return "{" + js_string(value) + "}"
    return f'"{value}"'


def indent(lines: list[str], levels: int = 1) -> list[str]:
    pad = INDENT * levels
    return [pad + line if line else line for line in lines]


@dataclass
class StyleBlock:
    """One named entry of a ``StyleSheet.create`` call."""

    name: str
    entries: list[tuple[str, Any]] = field(default_factory=list)

    def add(self, key: str, value: Any) -> "StyleBlock":
        self.entries.append((key, value))
        return self

    def get(self, key: str) -> Any:
        return next((v for k, v in self.entries if k == key), None)

    def render(self, level: int = 1) -> list[str]:
        pad = INDENT * level
        lines = [f"{pad}{object_key(self.name)}: {{"]
        lines += [f"{pad}{INDENT}{object_key(k)}: {js_value(v)}," for k, v in self.entries]
        lines.append(f"{pad}}},")
        return lines


def render_styles(blocks: list[StyleBlock], level: int = 1) -> list[str]:
    lines: list[str] = []
    for block in blocks:
        lines += block.render(level)
    return lines


def minify_code(source: str) -> str:
    """Drop indentation and blank lines (JSX text never spans lines here)."""
    return "\n".join(line.strip() for line in source.splitlines() if line.strip())
