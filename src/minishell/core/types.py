"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from minishell.errors import MalformedStageError


class TokenKind(Enum):
    """Token kinds produced by the lexer."""

    WORD = "word"
    PIPE = "pipe"
    REDIRECT_IN = "redirect_in"
    HEREDOC = "heredoc"
    REDIRECT_OUT = "redirect_out"
    APPEND_OUT = "append_out"
    BACKGROUND = "background"
    SEQUENCE = "sequence"
    END_OF_INPUT = "end_of_input"


@dataclass(frozen=True)
class Token:
    """A lexed token."""

    kind: TokenKind
    text: str


END_OF_INPUT = Token(TokenKind.END_OF_INPUT, "EOF")


@dataclass(frozen=True)
class InputSource:
    """Where a command reads its standard input from."""

    kind: Literal["file", "heredoc"]
    value: str


@dataclass(frozen=True)
class OutputTarget:
    """Where a command writes its standard output to."""

    filename: str
    append: bool = False


@dataclass(frozen=True)
class Command:
    """One stage of a parsed line."""

    program: str | None = None
    arguments: tuple[str, ...] = ()
    input_source: InputSource | None = None
    output_target: OutputTarget | None = None
    background: bool = False

    @property
    def argv(self) -> list[str]:
        """Argument vector, program name first."""
        return list(self.arguments)

    @property
    def argc(self) -> int:
        return len(self.arguments)

    @property
    def input_file(self) -> str | None:
        if self.input_source is not None and self.input_source.kind == "file":
            return self.input_source.value
        return None

    @property
    def heredoc(self) -> str | None:
        if self.input_source is not None and self.input_source.kind == "heredoc":
            return self.input_source.value
        return None

    @property
    def is_malformed(self) -> bool:
        return self.program is None


class Separator(Enum):
    """How a stage connects to the one after it."""

    PIPE = "|"
    SEQUENTIAL = ";"


@dataclass(frozen=True)
class Stage:
    """A command and the separator that follows it, if any."""

    command: Command
    separator: Separator | None = None


@dataclass(frozen=True)
class ParsedLine:
    """Ordered stages of one input line plus the diagnostics raised building them."""

    stages: tuple[Stage, ...]
    diagnostics: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.stages:
            raise ValueError("a parsed line has at least one stage")

    @property
    def commands(self) -> list[Command]:
        return [stage.command for stage in self.stages]

    def malformed_stages(self) -> list[int]:
        """Indexes of stages without a program."""
        return [index for index, stage in enumerate(self.stages) if stage.command.is_malformed]

    def ensure_executable(self) -> None:
        """Raise for the first stage an executor must reject."""
        malformed = self.malformed_stages()
        if malformed:
            raise MalformedStageError(malformed[0])
