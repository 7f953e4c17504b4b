from __future__ import annotations

import argparse

from ..core import (
    CONFIG_KEYS,
    DEFAULT_CONFIG,
    JSONParseError,
    JSONValue,
    config_dir,
    config_file,
    ensure_initialized,
    load_config,
    loads,
    resolve_root,
    save_config,
    serialize,
)


def command_init(args: argparse.Namespace) -> int:
    root = resolve_root(args.root)
    cdir = config_dir(root)
    if config_file(root).exists() and not args.force:
        raise SystemExit(f"{config_file(root)} already exists. Use --force to overwrite it.")
    cdir.mkdir(parents=True, exist_ok=True)
    save_config(root, JSONValue(DEFAULT_CONFIG))
    print(f"Initialized jsonvalue in {cdir}")
    return 0


def command_config_show(args: argparse.Namespace) -> int:
    root = resolve_root(args.root)
    print(serialize(load_config(root), 2))
    return 0


def command_config_set(args: argparse.Namespace) -> int:
    root = resolve_root(args.root)
    ensure_initialized(root)
    if args.key not in CONFIG_KEYS:
        raise SystemExit(f"Unknown config key `{args.key}`. Expected one of: {', '.join(CONFIG_KEYS)}")
    try:
        value = loads(args.value)
    except JSONParseError as exc:
        raise SystemExit(f"Config value `{args.value}` is not valid JSON") from exc
    cfg = load_config(root)
    cfg[args.key] = value
    save_config(root, cfg)
    print(f"Config `{args.key}` set to {serialize(cfg.get(args.key))}")
    return 0
