from __future__ import annotations

from .app_constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    CONFIG_KEYS,
    CONFIG_OPTION,
    DEFAULT_CONFIG,
    DEFAULT_INDENT,
    DEFAULT_MAX_DEPTH,
    FILE_EXT_TO_FORMAT,
    STDIO_PATH,
    FormatterConfig,
)
from .app_paths import config_dir, config_file, ensure_initialized, resolve_root
from .config_ops import (
    load_config,
    load_formatter_config,
    normalized_config,
    parse_formatter_config,
    save_config,
)
from .exceptions import JSONParseError, JSONValueError
from .json_reader import loads, parse, parse_into, read_into
from .json_writer import dumps, format_number, serialize
from .mapping_io import (
    dump_json_text,
    dump_yaml_text,
    file_format,
    load_value,
    read_text,
    save_value,
    value_from_yaml_text,
    write_text,
)
from .startup_options import StartupOptions
from .value import EMPTY_ARRAY, EMPTY_OBJECT, JSONType, JSONValue
from .value_paths import assign, lookup, path_exists, remove, split_path
