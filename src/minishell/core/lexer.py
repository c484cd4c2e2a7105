"""Line tokenizer."""

from __future__ import annotations

from minishell.config import Settings, get_settings
from minishell.core.types import END_OF_INPUT, Token, TokenKind

WHITESPACE = frozenset(" \t\n\r\v\f")
QUOTES = frozenset("'\"")
OPERATOR_CHARS = frozenset("|<>&;")

# Two-character operators are checked before their one-character prefixes.
_OPERATORS: tuple[tuple[str, TokenKind], ...] = (
    ("<<", TokenKind.HEREDOC),
    (">>", TokenKind.APPEND_OUT),
    ("<", TokenKind.REDIRECT_IN),
    (">", TokenKind.REDIRECT_OUT),
    ("|", TokenKind.PIPE),
    ("&", TokenKind.BACKGROUND),
    (";", TokenKind.SEQUENCE),
)


def is_operator_char(char: str) -> bool:
    return char in OPERATOR_CHARS


class Lexer:
    """Left-to-right scanner turning one line into tokens.

    Anomalies never fail the scan: unterminated quotes end at end of line,
    long words are cut to ``max_word_length`` and lines with too many tokens
    are cut at ``max_tokens`` (end marker included).
    """

    def __init__(self, line: str, settings: Settings) -> None:
        self._line = line
        self._pos = 0
        self._settings = settings

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        # Reserve the last slot for the end marker.
        limit = self._settings.max_tokens - 1
        while len(tokens) < limit:
            self._skip_whitespace()
            if self._at_end():
                break
            if is_operator_char(self._peek()):
                tokens.append(self._read_operator())
            elif self._peek() in QUOTES:
                tokens.append(self._read_quoted_word())
            else:
                tokens.append(self._read_bare_word())
        tokens.append(END_OF_INPUT)
        return tokens

    def _at_end(self) -> bool:
        return self._pos >= len(self._line)

    def _peek(self) -> str:
        return self._line[self._pos]

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek() in WHITESPACE:
            self._pos += 1

    def _read_operator(self) -> Token:
        for symbol, kind in _OPERATORS:
            if self._line.startswith(symbol, self._pos):
                self._pos += len(symbol)
                return Token(kind, symbol)
        raise ValueError(f"not an operator character: {self._peek()!r}")

    def _read_quoted_word(self) -> Token:
        quote = self._peek()
        start = self._pos + 1
        end = self._line.find(quote, start)
        if end == -1:
            end = len(self._line)
            self._pos = end
        else:
            self._pos = end + 1
        return self._word(self._line[start:end])

    def _read_bare_word(self) -> Token:
        start = self._pos
        while not self._at_end() and self._peek() not in WHITESPACE and not is_operator_char(self._peek()):
            self._pos += 1
        return self._word(self._line[start : self._pos])

    def _word(self, text: str) -> Token:
        return Token(TokenKind.WORD, text[: self._settings.max_word_length])


def tokenize(line: str, settings: Settings | None = None) -> list[Token]:
    """Split one input line into tokens, always ending with the end marker."""

    return Lexer(line, settings or get_settings()).tokenize()
