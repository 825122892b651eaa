# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich rendering helpers for parse results and option specifications.

- `build_args_table()`: Table of recognized options with their values.
- `render_args()`: Print the options table followed by other arguments and
  unknown options.
- `build_specs_table()`: Table of declared options grouped by identifier.
"""
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from just_getopt.console import console as default_console
from just_getopt.parser.args import Args
from just_getopt.parser.opt_specs import OptionRegistry


def _format_value(value: str | None, missing: bool) -> str:
    if value is None:
        return "[missing]missing[/missing]" if missing else "[dim]-[/dim]"
    return f"[value]{escape(repr(value))}[/value]"


def build_args_table(args: Args) -> Table:
    table = Table(title="Options", box=box.SIMPLE, title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Id")
    table.add_column("Name", style="option")
    table.add_column("Required")
    table.add_column("Value")
    for index, opt in enumerate(args.options, start=1):
        flag = f"-{opt.name}" if len(opt.name) == 1 else f"--{opt.name}"
        table.add_row(
            str(index),
            escape(opt.id),
            escape(flag),
            "yes" if opt.value_required else "no",
            _format_value(opt.value, opt.value_missing),
        )
    return table


def render_args(args: Args, console: Console | None = None) -> None:
    """Print a parse result."""
    console = console or default_console
    if args.options:
        console.print(build_args_table(args))
    else:
        console.print("[dim]No options.[/dim]")

    if args.other:
        console.print("[bold]Other arguments:[/bold]")
        for value in args.other:
            console.print(f"  [other]{escape(repr(value))}[/other]")

    if args.unknown:
        console.print("[bold]Unknown options:[/bold]")
        for name in args.unknown:
            console.print(f"  [unknown]{escape(name)}[/unknown]")

    if args.arg_limit_exceeded:
        console.print("[missing]Argument limit exceeded; some input was dropped.[/missing]")


def build_specs_table(registry: OptionRegistry) -> Table:
    table = Table(title="Declared options", box=box.SIMPLE, title_justify="left")
    table.add_column("Id")
    table.add_column("Usage", style="option")
    table.add_column("Value")
    for id in registry.ids():
        specs = registry.names_for(id)
        usage = ", ".join(escape(spec.get_usage_text()) for spec in specs)
        value_types = sorted({str(spec.value_type) for spec in specs})
        table.add_row(escape(id), usage, ", ".join(value_types))
    return table
