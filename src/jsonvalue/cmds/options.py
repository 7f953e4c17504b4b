from __future__ import annotations

import argparse

from ..core import StartupOptions


def command_options(args: argparse.Namespace) -> int:
    options = StartupOptions()
    failed = [name for name in args.files if not options.load_file(name)]
    options.parse_command_line(args.arg)
    for line in options.format_lines():
        print(line)
    if options.config_files:
        print("Config files")
        for path in options.config_files:
            print(f"  {path}")
    return 1 if failed else 0
