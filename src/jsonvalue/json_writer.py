from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

from .value import JSONType, JSONValue

_NAMED_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def format_number(number: float) -> str:
    if not math.isfinite(number):
        return "null"
    if number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return repr(number)


def write_string(dest: list[str], text: str) -> None:
    dest.append('"')
    for ch in text:
        escaped = _NAMED_ESCAPES.get(ch)
        if escaped is not None:
            dest.append(escaped)
        elif ch < " " or "\ud800" <= ch <= "\udfff":
            # Lone surrogates are escaped so the output stays encodable.
            dest.append(f"\\u{ord(ch):04x}")
        else:
            dest.append(ch)
    dest.append('"')


def write_indent(dest: list[str], indent: int) -> None:
    dest.append(" " * indent)


class _Frame:
    __slots__ = ("entries", "indent", "close", "count")

    def __init__(self, entries: Iterator[tuple[str | None, JSONValue]], indent: int, close: str) -> None:
        self.entries = entries
        self.indent = indent
        self.close = close
        self.count = 0


def _write_start(dest: list[str], value: JSONValue, indent: int, stack: list[_Frame]) -> None:
    value_type = value.type
    if value_type == JSONType.NULL:
        dest.append("null")
    elif value_type == JSONType.BOOL:
        dest.append("true" if value.get_bool() else "false")
    elif value_type == JSONType.NUMBER:
        dest.append(format_number(value.get_number()))
    elif value_type == JSONType.STRING:
        write_string(dest, value.get_string())
    elif value_type == JSONType.ARRAY:
        items = value.get_array()
        if not items:
            dest.append("[]")
            return
        dest.append("[")
        stack.append(_Frame(((None, item) for item in items), indent, "]"))
    else:
        members = value.get_object()
        if not members:
            dest.append("{}")
            return
        dest.append("{")
        stack.append(_Frame(iter(members.items()), indent, "}"))


def write_value(dest: list[str], value: JSONValue, spacing: int = 2, indent: int = 0) -> None:
    # Open containers live on an explicit stack, so nesting depth is unbounded.
    stack: list[_Frame] = []
    separator = ": " if spacing else ":"
    _write_start(dest, value, indent, stack)
    while stack:
        frame = stack[-1]
        entry = next(frame.entries, None)
        if entry is None:
            stack.pop()
            if spacing:
                dest.append("\n")
                write_indent(dest, frame.indent)
            dest.append(frame.close)
            continue
        key, item = entry
        if frame.count:
            dest.append(",")
        frame.count += 1
        inner = frame.indent + spacing
        if spacing:
            dest.append("\n")
            write_indent(dest, inner)
        if key is not None:
            write_string(dest, key)
            dest.append(separator)
        _write_start(dest, item, inner, stack)


def serialize(value: JSONValue, indent: int = 0) -> str:
    """Render ``value`` as JSON text.

    ``indent == 0`` gives compact output; a positive ``indent`` puts every
    array element and object member on its own line, nested by that many
    spaces. Never fails: non-finite numbers are written as ``null``.
    """
    if indent < 0:
        raise ValueError("indent cannot be negative")
    dest: list[str] = []
    write_value(dest, value, indent)
    return "".join(dest)


def dumps(value: Any, indent: int = 0) -> str:
    if not isinstance(value, JSONValue):
        value = JSONValue(value)
    return serialize(value, indent)
