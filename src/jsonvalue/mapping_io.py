from __future__ import annotations

import sys
from pathlib import Path

import yaml

from .app_constants import DEFAULT_INDENT, DEFAULT_MAX_DEPTH, FILE_EXT_TO_FORMAT, STDIO_PATH
from .exceptions import JSONParseError
from .json_reader import loads
from .json_writer import serialize
from .value import JSONValue


def file_format(path: Path) -> str:
    if str(path) == STDIO_PATH:
        return "json"
    ext = path.suffix.lower()
    if ext not in FILE_EXT_TO_FORMAT:
        raise SystemExit(f"Unsupported file extension: {ext or path.name}")
    return FILE_EXT_TO_FORMAT[ext]


def read_text(path: Path) -> str:
    if str(path) == STDIO_PATH:
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise SystemExit(f"File not found: {path}") from exc
    except (OSError, UnicodeError) as exc:
        raise SystemExit(f"Could not read {path}: {exc}") from exc


def write_text(path: Path, text: str) -> None:
    if str(path) == STDIO_PATH:
        sys.stdout.write(text)
        return
    path.write_text(text, encoding="utf-8")


def value_from_yaml_text(text: str) -> JSONValue:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML: {exc}") from exc
    try:
        return JSONValue(data)
    except (TypeError, ValueError) as exc:
        raise SystemExit(f"YAML document is not representable as JSON: {exc}") from exc


def dump_yaml_text(value: JSONValue) -> str:
    return yaml.safe_dump(value.to_python(), sort_keys=False, allow_unicode=True)


def dump_json_text(value: JSONValue, indent: int = DEFAULT_INDENT, trailing_newline: bool = True) -> str:
    text = serialize(value, indent)
    return text + "\n" if trailing_newline else text


def load_value(path: Path, max_depth: int = DEFAULT_MAX_DEPTH) -> JSONValue:
    fmt = file_format(path)
    text = read_text(path)
    if fmt == "yaml":
        return value_from_yaml_text(text)
    try:
        return loads(text, max_depth=max_depth)
    except JSONParseError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def save_value(
    path: Path,
    value: JSONValue,
    indent: int = DEFAULT_INDENT,
    trailing_newline: bool = True,
) -> None:
    if file_format(path) == "yaml":
        write_text(path, dump_yaml_text(value))
        return
    write_text(path, dump_json_text(value, indent, trailing_newline))
