from __future__ import annotations

from argparse import _SubParsersAction

from ..commands import (
    command_config_set,
    command_config_show,
    command_init,
    command_options,
)
from ..core import CONFIG_KEYS


def register_settings_commands(subparsers: _SubParsersAction) -> None:
    p_init = subparsers.add_parser("init", help="Create .jsonvalue/config.json with default settings.")
    p_init.add_argument("--force", action="store_true", help="Overwrite an existing config.")
    p_init.set_defaults(func=command_init)

    p_config = subparsers.add_parser("config", help="Inspect or change formatter settings.")
    config_sub = p_config.add_subparsers(dest="config_command", required=True)

    p_config_show = config_sub.add_parser("show", help="Print the effective config.")
    p_config_show.set_defaults(func=command_config_show)

    p_config_set = config_sub.add_parser("set", help="Set one config key.")
    p_config_set.add_argument("key", choices=CONFIG_KEYS, help="Config key.")
    p_config_set.add_argument("value", help="JSON value, e.g. 4 or false.")
    p_config_set.set_defaults(func=command_config_set)

    p_options = subparsers.add_parser("options", help="Load startup option files and list the collected options.")
    p_options.add_argument("files", nargs="*", help="Startup option files (.json, .yaml or .yml).")
    p_options.add_argument(
        "--arg",
        action="append",
        default=[],
        metavar="TOKEN",
        help="Command-line style token, repeat in order. Example: --arg=--headless --arg=--config --arg=extra.json",
    )
    p_options.set_defaults(func=command_options)
