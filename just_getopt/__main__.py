"""
Just Getopt

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from just_getopt.config import loader
from just_getopt.console import console, error_console
from just_getopt.exceptions import SpecFileError
from just_getopt.parser import Args, OptFlag, OptSpecs, OptValue, parse
from just_getopt.parser.render import render_args
from just_getopt.shell import OptionShell
from just_getopt.utils import get_program_invocation, setup_logging
from just_getopt.version import __version__

CLI_HELP = {
    "help": "Show this help message and exit.",
    "version": "Show the version and exit.",
    "spec": "Load the option specification from a YAML or TOML file.",
    "json": "Print the parse result as JSON.",
    "interactive": "Parse command lines entered at an interactive prompt.",
    "debug": "Enable debug logging.",
    "log_mode": "Logging output mode: cli or json.",
}


def get_cli_specs() -> OptSpecs:
    """Options understood by the `just-getopt` command itself."""
    return (
        OptSpecs()
        .add_options("help", ["h", "help"])
        .add_options("version", ["V", "version"])
        .add_options("spec", ["s", "spec"], OptValue.REQUIRED_NON_EMPTY)
        .add_options("json", ["j", "json"])
        .add_options("interactive", ["i", "interactive"])
        .add_options("debug", ["d", "debug"])
        .add_option("log_mode", "log-mode", OptValue.REQUIRED_NON_EMPTY)
        .set_flag(OptFlag.PREFIX_MATCH_LONG_OPTIONS)
    )


def get_demo_specs() -> OptSpecs:
    """Specification used when no `--spec` file is given."""
    return (
        OptSpecs()
        .add_options("help", ["h", "help"])
        .add_options("file", ["f", "file"], OptValue.REQUIRED_NON_EMPTY)
        .add_options("verbose", ["v", "verbose"], OptValue.OPTIONAL_NON_EMPTY)
        .set_flag(OptFlag.OPTIONS_EVERYWHERE)
    )


def report_problems(args: Args, console: Console) -> bool:
    """Print unknown options and missing values. Returns True if there were any."""
    problems = False
    for name in args.unknown:
        console.print(f"[unknown]Unknown option:[/unknown] {escape(name)}")
        problems = True
    for opt in args.required_value_missing():
        console.print(
            f"[missing]Value is required for option '{escape(opt.name)}'.[/missing]"
        )
        problems = True
    return problems


def render_help(program: str) -> None:
    console.print(escape(f"usage: {program} [OPTIONS] [--] [ARGS ...]\n"))
    console.print(
        "Parse ARGS with a getopt_long-style option specification and show how "
        "each argument was classified.\n"
    )
    registry = get_cli_specs().build()
    table = Table(box=None, show_header=False, padding=(0, 2))
    table.add_column(style="option")
    table.add_column()
    for id in registry.ids():
        usage = ", ".join(spec.get_usage_text() for spec in registry.names_for(id))
        table.add_row(escape(usage), CLI_HELP.get(id, ""))
    console.print(table)
    console.print(
        "\n[dim]Without --spec a demo specification is used. "
        "Put '--' before ARGS that look like options.[/dim]"
    )


def main(argv: Sequence[str] | None = None) -> int:
    program = get_program_invocation()
    cli = parse(get_cli_specs().build(), sys.argv[1:] if argv is None else argv)

    if report_problems(cli, error_console):
        error_console.print(f"Use '{program} --help' for help.")
        return 2

    if cli.option_exists("help"):
        render_help(program)
        return 0

    if cli.option_exists("version"):
        console.print(f"just-getopt {__version__}")
        return 0

    log_mode = cli.options_value_last("log_mode")
    if cli.option_exists("debug") or log_mode:
        try:
            setup_logging(
                mode=log_mode,
                console_log_level=(
                    logging.DEBUG if cli.option_exists("debug") else logging.WARNING
                ),
            )
        except ValueError as error:
            error_console.print(f"[unknown]{escape(str(error))}[/unknown]")
            return 2

    spec_path = cli.options_value_last("spec")
    try:
        specs = loader(spec_path) if spec_path else get_demo_specs()
    except SpecFileError as error:
        error_console.print(f"[unknown]{escape(str(error))}[/unknown]")
        return 2
    registry = specs.build()

    if cli.option_exists("interactive"):
        if cli.other:
            error_console.print("[missing]Arguments are ignored in interactive mode.[/missing]")
        OptionShell(registry).run()
        return 0

    parsed = parse(registry, cli.other)
    if cli.option_exists("json"):
        console.print_json(data=parsed.to_dict())
    else:
        render_args(parsed, console)

    return 1 if report_problems(parsed, error_console) else 0


if __name__ == "__main__":
    sys.exit(main())
