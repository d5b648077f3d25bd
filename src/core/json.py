"""Fast, type-safe JSON encoding and decoding."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def _object_slice(text: str) -> str | None:
    """Cut the outermost JSON object out of text (markdown fences allowed)."""
    working = text
    if "```" in working:
        start = working.find("```json") + 7 if "```json" in working else working.find("```") + 3
        end = working.find("```", start)
        if end != -1:
            working = working[start:end].strip()

    start = working.find("{")
    end = working.rfind("}")
    if start == -1 or end == -1:
        return None
    return working[start : end + 1]


def extract_json(text: str, repair: bool = True) -> dict[str, Any]:
    """
    Extract and parse a JSON object from text.

    Args:
        text: Text containing a JSON object
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If no object is found or parsing fails
    """
    json_str = _object_slice(text.strip())
    if json_str is None:
        raise JSONParseError("No JSON object found in text")

    try:
        result = msgspec.json.decode(json_str.encode("utf-8"))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e
        try:
            result = json.loads(repair_json(json_str))
        except (ValueError, TypeError) as repair_error:
            raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected dict, got {type(result).__name__}")
    return result


def dumps_compact(obj: Any, sort_keys: bool = False) -> str:
    """Encode to compact JSON with orjson (sorted keys for fingerprints)."""
    option = orjson.OPT_SORT_KEYS if sort_keys else 0
    return orjson.dumps(obj, option=option).decode("utf-8")


def dumps_pretty(obj: Any, indent: int = 2) -> str:
    """Encode to indented JSON, preserving key order."""
    return json.dumps(obj, indent=indent, ensure_ascii=False)


def js_string(value: str) -> str:
    """Single-quoted JavaScript string literal."""
    encoded = orjson.dumps(value).decode("utf-8")[1:-1]
    return "'" + encoded.replace('\\"', '"').replace("'", "\\'") + "'"
