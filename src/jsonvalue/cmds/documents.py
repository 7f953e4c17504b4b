from __future__ import annotations

import argparse
from pathlib import Path

from ..core import (
    FormatterConfig,
    JSONParseError,
    JSONValue,
    dump_json_text,
    file_format,
    load_formatter_config,
    load_value,
    read_text,
    read_into,
    resolve_root,
    save_value,
    value_from_yaml_text,
    write_text,
)


def resolve_indent(args: argparse.Namespace, cfg: FormatterConfig) -> int:
    if getattr(args, "compact", False):
        return 0
    indent = getattr(args, "indent", None)
    if indent is None:
        return cfg.indent
    if indent < 0:
        raise SystemExit("--indent cannot be negative")
    return indent


def command_format(args: argparse.Namespace) -> int:
    cfg = load_formatter_config(resolve_root(args.root))
    source = Path(args.file)
    if args.in_place and args.output:
        raise SystemExit("Use either --output or --in-place, not both")
    if file_format(source) != "json":
        raise SystemExit(f"Only JSON files can be formatted: {source}")
    value = load_value(source, max_depth=cfg.max_depth)
    text = dump_json_text(value, resolve_indent(args, cfg), cfg.trailing_newline)
    if args.in_place:
        write_text(source, text)
        print(f"Formatted {source}")
    elif args.output:
        write_text(Path(args.output), text)
        print(f"Wrote {args.output}")
    else:
        print(text, end="")
    return 0


def command_validate(args: argparse.Namespace) -> int:
    cfg = load_formatter_config(resolve_root(args.root))
    failures = 0
    for name in args.files:
        path = Path(name)
        try:
            fmt = file_format(path)
            text = read_text(path)
            if fmt == "yaml":
                value_from_yaml_text(text)
            else:
                read_into(JSONValue(), text, max_depth=cfg.max_depth)
        except (JSONParseError, SystemExit) as exc:
            failures += 1
            print(f"{name}: {exc}")
            continue
        print(f"{name}: ok")
    return 1 if failures else 0


def command_convert(args: argparse.Namespace) -> int:
    cfg = load_formatter_config(resolve_root(args.root))
    source = Path(args.source)
    target = Path(args.target)
    if target.exists() and not args.force:
        raise SystemExit(f"{target} already exists. Use --force to overwrite.")
    value = load_value(source, max_depth=cfg.max_depth)
    save_value(target, value, resolve_indent(args, cfg), cfg.trailing_newline)
    print(f"Converted {source} ({file_format(source)}) to {target} ({file_format(target)})")
    return 0
