from __future__ import annotations

import sys
from pathlib import Path

import yaml

from .app_constants import CONFIG_OPTION, FILE_EXT_TO_FORMAT
from .value import JSONValue


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _is_config_option(option: str) -> bool:
    return option.lower() == CONFIG_OPTION


def _parse_document(text: str, fmt: str) -> JSONValue | None:
    if fmt == "yaml":
        try:
            return JSONValue(yaml.safe_load(text))
        except (yaml.YAMLError, TypeError, ValueError):
            return None
    root = JSONValue()
    return root if root.from_string(text) else None


class StartupOptions:
    """Option/value pairs gathered from config files and command lines.

    Options are looked up case-insensitively; the spelling seen first is
    kept for display. Every occurrence of an option appends one value,
    with ``""`` standing for a bare flag. ``--config`` is never stored as
    an option: it loads another file and is answered from
    ``config_files``.
    """

    def __init__(self) -> None:
        self._options: dict[str, tuple[str, list[str]]] = {}
        self._loading: list[Path] = []
        self.config_files: list[Path] = []

    def add(self, option: str, value: str = "") -> None:
        key = option.lower()
        if key not in self._options:
            self._options[key] = (option, [])
        self._options[key][1].append(value)

    def has(self, option: str) -> bool:
        if _is_config_option(option):
            return bool(self.config_files)
        return option.lower() in self._options

    def values(self, option: str) -> list[str]:
        if _is_config_option(option):
            return [str(path) for path in self.config_files]
        entry = self._options.get(option.lower())
        return list(entry[1]) if entry else []

    def items(self) -> list[tuple[str, list[str]]]:
        return [(name, list(values)) for name, values in self._options.values()]

    def format_lines(self) -> list[str]:
        lines = ["Startup options"]
        for name, values in self.items():
            lines.append(f"  {name}")
            lines.extend(f"    '{value}'" for value in values if value)
        return lines

    def load_file(self, path: str | Path, base_dir: Path | None = None) -> bool:
        path = Path(path)
        if not path.is_absolute() and base_dir is not None:
            path = base_dir / path
        fmt = FILE_EXT_TO_FORMAT.get(path.suffix.lower())
        if fmt is None:
            _report(f"Invalid config file format. Only .json and .yaml are supported: {path}")
            return False
        resolved = path.resolve()
        if resolved in self._loading:
            _report(f"Config file \"{path}\" is already being loaded, skipping")
            return False
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeError):
            _report(f"Failed to open config file \"{path}\"!")
            return False
        root = _parse_document(text, fmt)
        if root is None:
            _report(f"Failed to parse config file \"{path}\"!")
            return False

        self._loading.append(resolved)
        try:
            if root.is_array():
                self._load_array(root, resolved.parent)
            elif root.is_object():
                self._load_map(root, resolved.parent)
            elif root.is_string():
                self.add(root.get_string())
            else:
                _report(f"Config file {path} was not an object, array or string")
        finally:
            self._loading.pop()
        self.config_files.append(path)
        return True

    def _load_array(self, value: JSONValue, base_dir: Path) -> None:
        for item in value.get_array():
            if item.is_array():
                self._load_array(item, base_dir)
            elif item.is_object():
                self._load_map(item, base_dir)
            elif item.is_string():
                self.add(item.get_string())

    def _load_map(self, value: JSONValue, base_dir: Path) -> None:
        for option, item in value.get_object().items():
            if item.is_string():
                texts = [item.get_string()]
            elif item.is_array():
                texts = [entry.get_string() for entry in item.get_array() if entry.is_string()]
            else:
                continue
            for text in texts:
                if _is_config_option(option):
                    self.load_file(text, base_dir)
                else:
                    self.add(option, text)

    def parse_command_line(self, argv: list[str], default_config: Path | None = None) -> None:
        i = 0
        while i < len(argv):
            option = argv[i]
            peek = argv[i + 1] if i + 1 < len(argv) else ""
            has_value = bool(peek) and not peek.startswith("--")
            if not option.startswith("--"):
                _report(f"Orphaned startup option parameter value specified: {option}")
                i += 1
                continue
            if _is_config_option(option):
                if has_value:
                    self.load_file(peek)
                else:
                    _report(f"Startup option {option} requires a file name")
            elif has_value:
                self.add(option, peek)
            else:
                self.add(option)
            i += 2 if has_value else 1

        if default_config is not None and not self.config_files and default_config.exists():
            self.load_file(default_config)
