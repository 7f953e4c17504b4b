from __future__ import annotations

import argparse

from .parser_parts.documents import register_document_commands
from .parser_parts.settings import register_settings_commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonvalue",
        description="Parse, format, query and edit JSON documents.",
    )
    parser.add_argument(
        "--root",
        help="Project root where .jsonvalue lives (defaults to current directory).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    register_document_commands(subparsers)
    register_settings_commands(subparsers)
    return parser
