"""CLI main module for minishell."""

from __future__ import annotations

import sys

import typer

from minishell.cli.render import Renderer
from minishell.config import Settings, get_settings
from minishell.core.lexer import tokenize
from minishell.core.parser import parse
from minishell.core.types import ParsedLine
from minishell.errors import ConfigurationError, MalformedStageError
from minishell.logging_utils import configure_logging

EXIT_COMMAND = "exit"

app = typer.Typer(
    name="minishell",
    help="Tokenize and parse shell command lines.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _load_settings(log_level: str | None) -> Settings:
    overrides = {"log_level": log_level} if log_level else {}
    try:
        settings = get_settings(**overrides)
    except ConfigurationError as exc:
        Renderer().error(f"Invalid configuration: {exc}")
        raise typer.Exit(1) from exc
    configure_logging(settings.log_level)
    return settings


def _render_line(line: str, settings: Settings, renderer: Renderer, *, show_tokens: bool) -> ParsedLine:
    tokens = tokenize(line, settings)
    if show_tokens:
        renderer.tokens(tokens)
    parsed = parse(tokens, settings=settings)
    renderer.parsed_line(parsed)
    return parsed


def _run_repl(settings: Settings, *, show_tokens: bool) -> None:
    renderer = Renderer()
    while True:
        try:
            renderer.prompt(settings.prompt)
            line = sys.stdin.readline()
            if not line:
                renderer.info("")
                break
            line = line.rstrip("\n")
            if line == EXIT_COMMAND:
                break
            _render_line(line, settings, renderer, show_tokens=show_tokens)
        except KeyboardInterrupt:
            renderer.info("")
            break
    renderer.info("Goodbye!")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    log_level: str | None = typer.Option(None, "--log-level", help="Override MINISHELL_LOG_LEVEL"),
) -> None:
    ctx.obj = _load_settings(log_level)
    if ctx.invoked_subcommand is None:
        # Default to the read loop
        _run_repl(ctx.obj, show_tokens=True)


@app.command()
def repl(
    ctx: typer.Context,
    tokens: bool = typer.Option(True, "--tokens/--no-tokens", help="Show the token list for each line"),
) -> None:
    """Read lines from standard input and print how each one parses."""
    _run_repl(ctx.obj, show_tokens=tokens)


@app.command("parse")
def parse_command(
    ctx: typer.Context,
    line: str = typer.Argument(..., help="Command line to parse"),
    tokens: bool = typer.Option(False, "--tokens", help="Show the token list"),
) -> None:
    """Parse one command line and print its stages."""
    renderer = Renderer()
    parsed = _render_line(line, ctx.obj, renderer, show_tokens=tokens)
    try:
        parsed.ensure_executable()
    except MalformedStageError as exc:
        renderer.error(str(exc))
        raise typer.Exit(1) from exc


if __name__ == "__main__":
    app()
