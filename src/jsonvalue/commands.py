from __future__ import annotations

from .cmds.documents import command_convert, command_format, command_validate
from .cmds.options import command_options
from .cmds.query import command_delete, command_get, command_set
from .cmds.settings import command_config_set, command_config_show, command_init

__all__ = [
    "command_config_set",
    "command_config_show",
    "command_convert",
    "command_delete",
    "command_format",
    "command_get",
    "command_init",
    "command_options",
    "command_set",
    "command_validate",
]
