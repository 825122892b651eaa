"""
Run with different command lines, for example:

    python examples/basic.py -abc --foo
    python examples/basic.py -f 123 --file=456 foo -v3 bar
"""
import sys

from rich.console import Console

from just_getopt import OptFlag, OptSpecs, OptValue

console = Console()
error_console = Console(stderr=True)


def main() -> int:
    specs = (
        OptSpecs()
        .add_option("help", "h")
        .add_option("help", "help")
        .add_option("file", "f", OptValue.REQUIRED_NON_EMPTY)
        .add_option("file", "file", OptValue.REQUIRED_NON_EMPTY)
        .add_option("verbose", "v", OptValue.OPTIONAL_NON_EMPTY)
        .add_option("verbose", "verbose", OptValue.OPTIONAL_NON_EMPTY)
        .set_flag(OptFlag.OPTIONS_EVERYWHERE)
    )

    parsed = specs.getopt(sys.argv[1:])
    console.print(parsed)

    error_exit = False
    for name in parsed.unknown:
        error_console.print(f"Unknown option: {name}")
        error_exit = True

    for opt in parsed.required_value_missing():
        error_console.print(f"Value is required for option '{opt.name}'.")
        error_exit = True

    if error_exit:
        error_console.print("Use '-h' for help.")
        return 1

    if parsed.option_exists("help"):
        console.print("Print friendly help about program's usage.")
        return 2

    for file in parsed.options_value_all("file"):
        console.print(f"File name: {file!r}")

    if parsed.option_exists("verbose"):
        console.print("Option 'verbose' was given.")
        for level in parsed.options_value_all("verbose"):
            console.print(f"Verbose level: {level!r}")

    for other in parsed.other:
        console.print(f"Other argument: {other!r}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
