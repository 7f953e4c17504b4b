from __future__ import annotations

from pathlib import Path

from .app_constants import CONFIG_KEYS, DEFAULT_CONFIG, FormatterConfig
from .app_paths import config_file
from .mapping_io import load_value, save_value
from .value import JSONValue


def _int_field(raw: JSONValue, name: str, minimum: int) -> int:
    value = raw.get(name)
    if value.is_null():
        return int(DEFAULT_CONFIG[name])
    number = value.get_number()
    if not value.is_number() or not number.is_integer():
        raise SystemExit(f"Config `{name}` must be an integer")
    if number < minimum:
        raise SystemExit(f"Config `{name}` must be at least {minimum}")
    return int(number)


def parse_formatter_config(raw: JSONValue) -> FormatterConfig:
    if not raw.is_object():
        raise SystemExit("Config must be an object")
    unknown = sorted(key for key in raw.get_object() if key not in CONFIG_KEYS)
    if unknown:
        raise SystemExit(f"Unknown config key(s): {', '.join(unknown)}")
    trailing_newline = raw.get("trailing_newline")
    if trailing_newline.is_null():
        trailing = bool(DEFAULT_CONFIG["trailing_newline"])
    elif trailing_newline.is_bool():
        trailing = trailing_newline.get_bool()
    else:
        raise SystemExit("Config `trailing_newline` must be true or false")
    return FormatterConfig(
        indent=_int_field(raw, "indent", 0),
        max_depth=_int_field(raw, "max_depth", 1),
        trailing_newline=trailing,
    )


def normalized_config(raw: JSONValue) -> JSONValue:
    cfg = parse_formatter_config(raw)
    return JSONValue(
        {
            "indent": cfg.indent,
            "max_depth": cfg.max_depth,
            "trailing_newline": cfg.trailing_newline,
        }
    )


def load_config(root: Path) -> JSONValue:
    path = config_file(root)
    if not path.exists():
        return JSONValue(DEFAULT_CONFIG)
    return normalized_config(load_value(path))


def save_config(root: Path, cfg: JSONValue) -> None:
    save_value(config_file(root), normalized_config(cfg))


def load_formatter_config(root: Path) -> FormatterConfig:
    return parse_formatter_config(load_config(root))
