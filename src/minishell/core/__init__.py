"""Core tokenizer and command builder."""

from .heredoc import HeredocCollector, HeredocText
from .lexer import tokenize
from .parser import CommandBuilder, parse, parse_line
from .types import (
    Command,
    InputSource,
    OutputTarget,
    ParsedLine,
    Separator,
    Stage,
    Token,
    TokenKind,
)

__all__ = [
    "Command",
    "CommandBuilder",
    "HeredocCollector",
    "HeredocText",
    "InputSource",
    "OutputTarget",
    "ParsedLine",
    "Separator",
    "Stage",
    "Token",
    "TokenKind",
    "parse",
    "parse_line",
    "tokenize",
]
