from __future__ import annotations

from .app_constants import DEFAULT_MAX_DEPTH
from .exceptions import JSONParseError
from .value import JSONType, JSONValue

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"


class _Reader:
    def __init__(self, text: str, max_depth: int) -> None:
        self.text = text
        self.pos = 0
        self.end = len(text)
        self.depth = 0
        self.max_depth = max_depth

    def fail(self, msg: str, pos: int | None = None) -> JSONParseError:
        return JSONParseError(msg, self.text, self.pos if pos is None else pos)

    def next_char(self, skip_whitespace: bool = True) -> str:
        while self.pos < self.end:
            ch = self.text[self.pos]
            self.pos += 1
            if not skip_whitespace or ch > " ":
                return ch
        raise self.fail("Unexpected end of input")

    def match(self, literal: str) -> None:
        # The first character has already been consumed by the dispatcher.
        start = self.pos - 1
        rest = literal[1:]
        if self.text.startswith(rest, self.pos):
            self.pos += len(rest)
            return
        if self.end - self.pos < len(rest) and literal.startswith(self.text[start:]):
            raise self.fail(f"Unexpected end of input in `{literal}`")
        raise self.fail(f"Invalid literal, expected `{literal}`", start)

    def parse_value(self, target: JSONValue) -> None:
        ch = self.next_char()
        if ch == "n":
            self.match("null")
            target.set_null()
        elif ch == "t":
            self.match("true")
            target.set(True)
        elif ch == "f":
            self.match("false")
            target.set(False)
        elif ch == '"':
            target.set(self.read_string())
        elif ch == "[":
            self.parse_array(target)
        elif ch == "{":
            self.parse_object(target)
        elif ch == "-" or ch in _DIGITS:
            target.set(self.read_number())
        else:
            raise self.fail(f"Unexpected character `{ch}`", self.pos - 1)

    def enter(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise self.fail(f"Maximum nesting depth of {self.max_depth} exceeded", self.pos - 1)

    def parse_array(self, target: JSONValue) -> None:
        self.enter()
        items: list[JSONValue] = []
        target._reset(JSONType.ARRAY, items)
        if self.next_char() == "]":
            self.depth -= 1
            return
        self.pos -= 1
        while True:
            item = JSONValue()
            items.append(item)
            self.parse_value(item)
            ch = self.next_char()
            if ch == "]":
                break
            if ch != ",":
                raise self.fail("Expected `,` or `]` in array", self.pos - 1)
        self.depth -= 1

    def parse_object(self, target: JSONValue) -> None:
        self.enter()
        members: dict[str, JSONValue] = {}
        target._reset(JSONType.OBJECT, members)
        ch = self.next_char()
        if ch == "}":
            self.depth -= 1
            return
        while True:
            if ch != '"':
                raise self.fail("Expected `\"` to start an object key", self.pos - 1)
            key = self.read_string()
            if self.next_char() != ":":
                raise self.fail("Expected `:` after object key", self.pos - 1)
            item = JSONValue()
            members[key] = item
            self.parse_value(item)
            ch = self.next_char()
            if ch == "}":
                break
            if ch != ",":
                raise self.fail("Expected `,` or `}` in object", self.pos - 1)
            ch = self.next_char()
        self.depth -= 1

    def read_hex4(self) -> int:
        digits = self.text[self.pos : self.pos + 4]
        if len(digits) < 4:
            raise self.fail("Unexpected end of input in \\u escape")
        if any(ch not in _HEX_DIGITS for ch in digits):
            raise self.fail(f"Invalid \\u escape `\\u{digits}`", self.pos - 2)
        self.pos += 4
        return int(digits, 16)

    def read_string(self) -> str:
        start = self.pos - 1
        out: list[str] = []
        while True:
            if self.pos >= self.end:
                raise self.fail("Unterminated string", start)
            ch = self.next_char(skip_whitespace=False)
            if ch == '"':
                return "".join(out)
            if ch != "\\":
                out.append(ch)
                continue
            if self.pos >= self.end:
                raise self.fail("Unterminated string", start)
            esc = self.next_char(skip_whitespace=False)
            if esc in _ESCAPES:
                out.append(_ESCAPES[esc])
            elif esc == "u":
                out.append(self.read_code_point())
            else:
                raise self.fail(f"Invalid escape `\\{esc}`", self.pos - 2)

    def read_code_point(self) -> str:
        code = self.read_hex4()
        if 0xD800 <= code <= 0xDBFF and self.text.startswith("\\u", self.pos):
            saved = self.pos
            self.pos += 2
            low = self.read_hex4()
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
            self.pos = saved
        return chr(code)

    def read_digits(self) -> int:
        start = self.pos
        while self.pos < self.end and self.text[self.pos] in _DIGITS:
            self.pos += 1
        return self.pos - start

    def read_number(self) -> float:
        start = self.pos - 1
        if self.text[start] != "-":
            self.pos = start
        if not self.read_digits():
            raise self.fail("Expected digits in number")
        if self.pos < self.end and self.text[self.pos] == ".":
            self.pos += 1
            if not self.read_digits():
                raise self.fail("Expected digits after decimal point")
        if self.pos < self.end and self.text[self.pos] in "eE":
            self.pos += 1
            if self.pos < self.end and self.text[self.pos] in "+-":
                self.pos += 1
            if not self.read_digits():
                raise self.fail("Expected digits in exponent")
        return float(self.text[start : self.pos])


def _decode(text: str | bytes | bytearray) -> str:
    if isinstance(text, (bytes, bytearray)):
        try:
            return bytes(text).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise JSONParseError(f"Invalid UTF-8 ({exc.reason})", "", 0) from exc
    return text


def read_into(target: JSONValue, text: str | bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
    """Parse one JSON value from ``text`` into ``target``.

    Text after the first complete value is ignored. Raises
    ``JSONParseError`` on malformed input or when arrays and objects nest
    deeper than ``max_depth``.
    """
    if max_depth < 1:
        raise ValueError("max_depth must be at least 1")
    reader = _Reader(_decode(text), max_depth)
    try:
        reader.parse_value(target)
    except RecursionError as exc:
        raise reader.fail("Nesting too deep for the interpreter stack") from exc


def parse_into(target: JSONValue, text: str | bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
    try:
        read_into(target, text, max_depth=max_depth)
    except JSONParseError:
        return False
    return True


def loads(text: str | bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> JSONValue:
    value = JSONValue()
    read_into(value, text, max_depth=max_depth)
    return value


def parse(text: str | bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> tuple[JSONValue, bool]:
    value = JSONValue()
    return value, parse_into(value, text, max_depth=max_depth)
