from __future__ import annotations

import argparse
from pathlib import Path

from ..core import (
    JSONParseError,
    JSONValue,
    assign,
    load_formatter_config,
    load_value,
    loads,
    lookup,
    path_exists,
    remove,
    resolve_root,
    save_value,
    serialize,
)
from .documents import resolve_indent


def command_get(args: argparse.Namespace) -> int:
    cfg = load_formatter_config(resolve_root(args.root))
    root = load_value(Path(args.file), max_depth=cfg.max_depth)
    if args.strict and not path_exists(root, args.path):
        raise SystemExit(f"Path `{args.path}` not found in {args.file}")
    node = lookup(root, args.path)
    if args.raw and node.is_string():
        print(node.get_string())
        return 0
    print(serialize(node, resolve_indent(args, cfg)))
    return 0


def parse_value_arg(raw: str, as_string: bool, max_depth: int) -> JSONValue:
    if as_string:
        return JSONValue(raw)
    try:
        return loads(raw, max_depth=max_depth)
    except JSONParseError as exc:
        raise SystemExit(
            f"Value `{raw}` is not valid JSON ({exc.msg}). Use --string to store it as text."
        ) from exc


def command_set(args: argparse.Namespace) -> int:
    cfg = load_formatter_config(resolve_root(args.root))
    path = Path(args.file)
    if path.exists() or not args.create:
        root = load_value(path, max_depth=cfg.max_depth)
    else:
        root = JSONValue()
    value = parse_value_arg(args.value, args.string, cfg.max_depth)
    assign(root, args.path, value)
    save_value(path, root, cfg.indent, cfg.trailing_newline)
    print(f"Set `{args.path}` in {path}")
    return 0


def command_delete(args: argparse.Namespace) -> int:
    cfg = load_formatter_config(resolve_root(args.root))
    path = Path(args.file)
    root = load_value(path, max_depth=cfg.max_depth)
    if not remove(root, args.path):
        raise SystemExit(f"Path `{args.path}` not found in {path}")
    save_value(path, root, cfg.indent, cfg.trailing_newline)
    print(f"Deleted `{args.path}` from {path}")
    return 0
