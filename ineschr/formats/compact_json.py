"""
Compact JSON writer for CHR dumps.

Lists whose items are all numbers (pixel rows, RGB triples) are written on
a single line so an 8x8 tile reads as 8 short lines. Everything else is
indented normally.
"""

import json
from typing import Any, TextIO


def _is_flat_numeric(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(
        isinstance(item, (int, float)) and not isinstance(item, bool) for item in value
    )


def _encode(value: Any, indent: int, level: int) -> str:
    if isinstance(value, (list, tuple)):
        if not value or _is_flat_numeric(value):
            return json.dumps(list(value))
        child_pad = " " * (indent * (level + 1))
        items = [child_pad + _encode(item, indent, level + 1) for item in value]
        return "[\n" + ",\n".join(items) + "\n" + " " * (indent * level) + "]"

    if isinstance(value, dict):
        if not value:
            return "{}"
        child_pad = " " * (indent * (level + 1))
        items = [
            f"{child_pad}{json.dumps(str(key))}: {_encode(item, indent, level + 1)}"
            for key, item in value.items()
        ]
        return "{\n" + ",\n".join(items) + "\n" + " " * (indent * level) + "}"

    return json.dumps(value)


def dumps(obj: Any, indent: int = 2) -> str:
    """Serialize obj to a JSON string, keeping numeric arrays on one line."""
    return _encode(obj, indent, 0)


def dump(obj: Any, fp: TextIO, indent: int = 2) -> None:
    """Serialize obj to a text stream, keeping numeric arrays on one line."""
    fp.write(dumps(obj, indent))
    fp.write("\n")
