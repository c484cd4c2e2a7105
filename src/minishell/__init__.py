"""minishell - shell line tokenizer and command builder."""

from .core import Command, ParsedLine, Separator, Token, TokenKind, parse, parse_line, tokenize

__version__ = "0.1.0"

__all__ = ["Command", "ParsedLine", "Separator", "Token", "TokenKind", "parse", "parse_line", "tokenize"]
