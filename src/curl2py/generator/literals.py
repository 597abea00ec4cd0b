"""Render Python source literals for strings and JSON-like values."""

import json
import math

INDENT = "    "
INLINE_MAX_ITEMS = 2
INLINE_MAX_WIDTH = 50


def py_str(value: str | None) -> str:
    """Quote a string as a Python literal.

    Single quotes are preferred. A value holding a single quote but no
    double quote is wrapped in double quotes; otherwise single quotes
    inside the value are backslash-escaped.
    """
    if value is None:
        return "''"
    text = str(value)
    if "'" in text and '"' not in text:
        return f'"{text}"'
    return "'" + text.replace("'", "\\'") + "'"


def py_literal(value, indent: int = 0) -> str:
    """Render a decoded JSON value as Python source."""
    if isinstance(value, dict):
        return py_dict(value, indent)
    if isinstance(value, list):
        return py_list(value, indent)
    if isinstance(value, float):
        return py_number(value)
    if value is None or isinstance(value, (bool, int)):
        return repr(value)
    return py_str(value)


def py_number(value: float) -> str:
    """Render a float; infinities become ``float('inf')`` expressions."""
    if math.isinf(value):
        return "float('inf')" if value > 0 else "float('-inf')"
    return repr(value)


def py_dict(mapping: dict, indent: int = 0) -> str:
    """Render a mapping, on one line when it is small, else one entry per line.

    ``indent`` is the nesting level of the line the literal starts on.
    """
    if not mapping:
        return "{}"
    if _fits_inline(mapping):
        entries = (f"{py_str(k)}: {py_literal(v, indent)}" for k, v in mapping.items())
        return "{" + ", ".join(entries) + "}"
    entries = [f"{py_str(k)}: {py_literal(v, indent + 1)}" for k, v in mapping.items()]
    return _multiline("{", "}", entries, indent)


def py_list(items: list, indent: int = 0) -> str:
    """Render a list with the same layout rule as py_dict."""
    if not items:
        return "[]"
    if _fits_inline(items):
        return "[" + ", ".join(py_literal(v, indent) for v in items) + "]"
    return _multiline("[", "]", [py_literal(v, indent + 1) for v in items], indent)


def _fits_inline(value: dict | list) -> bool:
    preview = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return len(value) <= INLINE_MAX_ITEMS and len(preview) < INLINE_MAX_WIDTH


def _multiline(opener: str, closer: str, entries: list[str], indent: int) -> str:
    pad = INDENT * (indent + 1)
    body = ",\n".join(pad + entry for entry in entries)
    return f"{opener}\n{body}\n{INDENT * indent}{closer}"
