"""CLI renderer for minishell."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from minishell.core.types import Command, ParsedLine, Token


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


class Renderer:
    """Rich output for tokens and parsed lines."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console(highlight=False, emoji=False)

    def prompt(self, text: str) -> None:
        self.console.print(escape(text), end="")

    def info(self, message: str) -> None:
        self.console.print(message)

    def error(self, message: str) -> None:
        """Render an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def tokens(self, tokens: Sequence[Token]) -> None:
        """Render the token list as a table."""
        table = Table(title="Tokens", title_justify="left")
        table.add_column("#", justify="right")
        table.add_column("kind")
        table.add_column("text")
        for index, token in enumerate(tokens):
            table.add_row(str(index), token.kind.name, escape(repr(token.text)))
        self.console.print(table)

    def parsed_line(self, parsed: ParsedLine) -> None:
        """Render every stage with its redirections and separator."""
        self._print(f"[bold]Parsed commands ({len(parsed.stages)}):[/bold]")
        for index, stage in enumerate(parsed.stages):
            self._command(index, stage.command)
            if stage.separator is not None:
                self._print(f"    Then: {stage.separator.name.lower()}")
        for message in parsed.diagnostics:
            self._print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def _command(self, index: int, command: Command) -> None:
        name = escape(command.program) if command.program is not None else "[red](missing)[/red]"
        self._print(f"  Command {index + 1}: {name}")
        arguments = " ".join(escape(repr(argument)) for argument in command.arguments)
        self._print(f"    Arguments ({command.argc}): {arguments}")
        if command.input_file is not None:
            self._print(f"    Input: {escape(command.input_file)}")
        if command.heredoc is not None:
            self._print("    Here document:")
            self.console.print(command.heredoc, end="", markup=False)
        if command.output_target is not None:
            target = command.output_target
            self._print(f"    Output: {escape(target.filename)} (append: {_yes_no(target.append)})")
        self._print(f"    Background: {_yes_no(command.background)}")

    def _print(self, message: str) -> None:
        self.console.print(message)
