"""
rcconfig

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""
from __future__ import annotations

import json
import logging
import sys
from argparse import REMAINDER, ArgumentParser
from typing import Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from rcconfig.console import console, error_console
from rcconfig.exceptions import MatchError, SchemaError
from rcconfig.matcher import DEFAULT_BYPASS_FLAG
from rcconfig.resolver import ConfigResolver, Resolution
from rcconfig.schema import Schema
from rcconfig.schema_file import load_schema
from rcconfig.utils import setup_logging


def default_env_var(schema: Schema) -> str:
    return f"{schema.name.upper().replace('-', '_').replace(' ', '_')}_CONFIG"


def get_root_parser(prog: str = "rcconfig") -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        description="Resolve program arguments from the command line and an rc file.",
        epilog="Arguments after the options are resolved as the program's own "
        "arguments, e.g. 'rcconfig --schema tool.yaml -- --host example.org'.",
    )
    parser.add_argument(
        "-s", "--schema", required=True, help="YAML or TOML file describing the options"
    )
    parser.add_argument(
        "-e",
        "--env",
        help="Environment variable naming the rc file (default: <NAME>_CONFIG)",
    )
    parser.add_argument(
        "--bypass-flag",
        default=DEFAULT_BYPASS_FLAG,
        help="Flag that disables rc file loading (default: %(default)s)",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "args", nargs=REMAINDER, help="Arguments to resolve", metavar="ARGS"
    )
    return parser


def build_table(resolution: Resolution) -> Table:
    config = resolution.config
    title = config.schema.name
    if resolution.load_result.path is not None:
        title = f"{title} ({resolution.load_result.path})"
    table = Table(title=escape(title), box=box.SIMPLE)
    table.add_column("Option", style="bold")
    table.add_column("State")
    table.add_column("Value")
    for name, value in config.items():
        table.add_row(
            f"--{escape(name)}", str(value.kind), escape(", ".join(value.values))
        )
    return table


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode="cli", console_log_level=logging.DEBUG if args.verbose else logging.WARNING
    )

    try:
        schema = load_schema(args.schema)
    except (FileNotFoundError, SchemaError) as error:
        error_console.print(f"[red]❌ {escape(str(error))}[/]")
        return 1

    program_args = list(args.args)
    if program_args and program_args[0] == "--":
        program_args = program_args[1:]

    try:
        resolver = ConfigResolver(
            schema,
            args.env or default_env_var(schema),
            bypass_flag=args.bypass_flag,
        )
        resolution = resolver.resolve([schema.name, *program_args])
    except SchemaError as error:
        error_console.print(f"[red]❌ {escape(str(error))}[/]")
        return 1
    except MatchError as error:
        error_console.print(escape(error.usage), end="")
        error_console.print(
            f"[red]{escape(schema.name)}: error: {escape(error.message)}[/]"
        )
        return 2

    if args.json:
        console.print_json(json.dumps(resolution.config.as_dict()))
    else:
        console.print(build_table(resolution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
