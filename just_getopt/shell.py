# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Interactive prompt for trying command lines against an option specification.

Each entered line is split like a POSIX shell would split it (`shlex`) and
parsed with the loaded specification; the result is rendered with Rich.

Lines starting with `:` are shell commands:
- `:specs`  show the declared options
- `:help`   show the available shell commands
- `:quit`   leave the prompt (Ctrl-D and Ctrl-C also leave)
"""
from __future__ import annotations

import shlex
from typing import Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.markup import escape

from just_getopt.console import console as default_console
from just_getopt.logger import logger
from just_getopt.parser import Args, OptionRegistry, parse
from just_getopt.parser.render import build_specs_table, render_args

SHELL_COMMANDS = {
    ":specs": "Show the declared options.",
    ":help": "Show this list of commands.",
    ":quit": "Leave the prompt.",
}


class OptionCompleter(Completer):
    """Completes declared option flags for the word under the cursor."""

    def __init__(self, registry: OptionRegistry):
        self.registry = registry

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        stub = document.get_word_before_cursor(WORD=True)
        if not stub.startswith("-"):
            if document.text_before_cursor.strip() == stub and stub.startswith(":"):
                for command in SHELL_COMMANDS:
                    if command.startswith(stub):
                        yield Completion(command, start_position=-len(stub))
            return
        for spec in self.registry.options:
            flag = spec.get_flag_text()
            if flag.startswith(stub):
                yield Completion(flag, start_position=-len(stub))


def evaluate_line(registry: OptionRegistry, line: str) -> Args:
    """
    Split a command line the way a shell would and parse it.

    Raises:
        ValueError: If the line has unbalanced quotes.
    """
    return parse(registry, shlex.split(line))


class OptionShell:
    """Read-parse-print loop over an `OptionRegistry`."""

    def __init__(
        self,
        registry: OptionRegistry,
        session: PromptSession | None = None,
        console: Console | None = None,
        prompt: str = "getopt> ",
    ) -> None:
        self.registry = registry
        self.console = console or default_console
        self.prompt = prompt
        self.session = session or PromptSession(
            history=InMemoryHistory(),
            completer=OptionCompleter(registry),
            complete_while_typing=False,
        )

    def render_commands(self) -> None:
        for command, description in SHELL_COMMANDS.items():
            self.console.print(f"  [option]{command}[/option]  {description}")

    def handle_line(self, line: str) -> bool:
        """Process one entered line. Returns False when the shell should stop."""
        line = line.strip()
        if not line:
            return True
        if line == ":quit":
            return False
        if line == ":help":
            self.render_commands()
            return True
        if line == ":specs":
            self.console.print(build_specs_table(self.registry))
            return True

        try:
            args = evaluate_line(self.registry, line)
        except ValueError as error:
            self.console.print(f"[unknown]Cannot split line:[/unknown] {escape(str(error))}")
            return True
        render_args(args, self.console)
        return True

    def run(self) -> None:
        self.console.print(
            "[dim]Enter a command line to parse. Type :help for commands.[/dim]"
        )
        while True:
            try:
                line = self.session.prompt(self.prompt)
            except (EOFError, KeyboardInterrupt):
                break
            if not self.handle_line(line):
                break
        logger.debug("Interactive shell closed.")
