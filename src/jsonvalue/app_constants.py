from __future__ import annotations

from dataclasses import dataclass
from typing import Any

CONFIG_DIR_NAME = ".jsonvalue"
CONFIG_FILE_NAME = "config.json"

FILE_EXT_TO_FORMAT = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}

STDIO_PATH = "-"

DEFAULT_INDENT = 2
DEFAULT_MAX_DEPTH = 256
DEFAULT_TRAILING_NEWLINE = True

CONFIG_OPTION = "--config"


@dataclass
class FormatterConfig:
    indent: int
    max_depth: int
    trailing_newline: bool


DEFAULT_CONFIG: dict[str, Any] = {
    "indent": DEFAULT_INDENT,
    "max_depth": DEFAULT_MAX_DEPTH,
    "trailing_newline": DEFAULT_TRAILING_NEWLINE,
}

CONFIG_KEYS = ["indent", "max_depth", "trailing_newline"]
