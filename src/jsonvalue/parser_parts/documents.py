from __future__ import annotations

from argparse import _SubParsersAction

from ..commands import (
    command_convert,
    command_delete,
    command_format,
    command_get,
    command_set,
    command_validate,
)


def register_document_commands(subparsers: _SubParsersAction) -> None:
    p_format = subparsers.add_parser("format", help="Pretty-print or compact a JSON document.")
    p_format.add_argument("file", help="JSON file, or - for stdin.")
    p_format.add_argument("--indent", type=int, help="Spaces per nesting level (defaults to config indent).")
    p_format.add_argument("--compact", action="store_true", help="Emit compact output with no whitespace.")
    p_format.add_argument("--output", help="Write the result to this file instead of stdout.")
    p_format.add_argument("--in-place", action="store_true", help="Rewrite the input file.")
    p_format.set_defaults(func=command_format)

    p_validate = subparsers.add_parser("validate", help="Check that documents parse.")
    p_validate.add_argument("files", nargs="+", help="JSON or YAML files to check.")
    p_validate.set_defaults(func=command_validate)

    p_convert = subparsers.add_parser("convert", help="Convert between JSON and YAML by file extension.")
    p_convert.add_argument("source", help="Source file (.json, .yaml or .yml).")
    p_convert.add_argument("target", help="Target file (.json, .yaml or .yml).")
    p_convert.add_argument("--indent", type=int, help="Spaces per nesting level for JSON output.")
    p_convert.add_argument("--compact", action="store_true", help="Compact JSON output.")
    p_convert.add_argument("--force", action="store_true", help="Overwrite an existing target.")
    p_convert.set_defaults(func=command_convert)

    p_get = subparsers.add_parser("get", help="Print the value at a dotted path.")
    p_get.add_argument("file", help="JSON or YAML file, or - for stdin.")
    p_get.add_argument("path", help="Dotted path such as servers.0.host; empty or . for the root.")
    p_get.add_argument("--indent", type=int, help="Spaces per nesting level (defaults to config indent).")
    p_get.add_argument("--compact", action="store_true", help="Compact output.")
    p_get.add_argument("--raw", action="store_true", help="Print strings without quotes or escapes.")
    p_get.add_argument("--strict", action="store_true", help="Fail instead of printing null when the path is missing.")
    p_get.set_defaults(func=command_get)

    p_set = subparsers.add_parser("set", help="Assign a value at a dotted path, creating containers as needed.")
    p_set.add_argument("file", help="JSON or YAML file to update.")
    p_set.add_argument("path", help="Dotted path; numeric parts index arrays.")
    p_set.add_argument("value", help="JSON text for the new value.")
    p_set.add_argument("--string", action="store_true", help="Store VALUE as a plain string.")
    p_set.add_argument("--create", action="store_true", help="Create the file if it does not exist.")
    p_set.set_defaults(func=command_set)

    p_delete = subparsers.add_parser("delete", help="Remove the key or element at a dotted path.")
    p_delete.add_argument("file", help="JSON or YAML file to update.")
    p_delete.add_argument("path", help="Dotted path of the element to remove.")
    p_delete.set_defaults(func=command_delete)
