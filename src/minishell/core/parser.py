"""Command builder folding tokens into stages."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger

from minishell.config import Settings, get_settings
from minishell.core.heredoc import HeredocCollector, HeredocReader, HeredocText
from minishell.core.lexer import tokenize
from minishell.core.types import (
    Command,
    InputSource,
    OutputTarget,
    ParsedLine,
    Separator,
    Stage,
    Token,
    TokenKind,
)

_SEPARATORS: dict[TokenKind, tuple[Separator, str]] = {
    TokenKind.PIPE: (Separator.PIPE, "Too many commands in pipeline"),
    TokenKind.SEQUENCE: (Separator.SEQUENTIAL, "Too many commands"),
}


@dataclass
class _StageDraft:
    arguments: list[str] = field(default_factory=list)
    input_source: InputSource | None = None
    output_target: OutputTarget | None = None
    background: bool = False

    def build(self) -> Command:
        return Command(
            program=self.arguments[0] if self.arguments else None,
            arguments=tuple(self.arguments),
            input_source=self.input_source,
            output_target=self.output_target,
            background=self.background,
        )


class CommandBuilder:
    """Single left-to-right pass over one line's tokens.

    Malformed input never raises: missing redirection targets and the stage
    cap are recorded as diagnostics and scanning goes on. Stages without any
    word come out with ``program`` unset for the executor to reject.
    """

    def __init__(self, settings: Settings | None = None, collector: HeredocReader | None = None) -> None:
        self._settings = settings or get_settings()
        self._collector = collector or HeredocCollector(settings=self._settings)

    def build(self, tokens: Sequence[Token]) -> ParsedLine:
        drafts = [_StageDraft()]
        separators: list[Separator] = []
        diagnostics: list[str] = []

        def diagnose(message: str) -> None:
            logger.warning(message)
            diagnostics.append(message)

        index = 0
        while index < len(tokens):
            token = tokens[index]
            current = drafts[-1]
            index += 1

            if token.kind is TokenKind.END_OF_INPUT:
                break
            if token.kind is TokenKind.WORD:
                current.arguments.append(token.text)
            elif token.kind is TokenKind.BACKGROUND:
                current.background = True
            elif token.kind in _SEPARATORS:
                separator, overflow = _SEPARATORS[token.kind]
                if len(drafts) >= self._settings.max_stages:
                    diagnose(overflow)
                    continue
                separators.append(separator)
                drafts.append(_StageDraft())
            else:
                target, index = self._operand(tokens, index)
                if target is None:
                    noun = "delimiter" if token.kind is TokenKind.HEREDOC else "filename"
                    diagnose(f"Expected {noun} after {token.text}")
                    continue
                warning = self._redirect(current, token.kind, target)
                if warning is not None:
                    # Already logged by the collector.
                    diagnostics.append(warning)

        stages = [
            Stage(draft.build(), separators[position] if position < len(separators) else None)
            for position, draft in enumerate(drafts)
        ]
        return ParsedLine(stages=tuple(stages), diagnostics=tuple(diagnostics))

    @staticmethod
    def _operand(tokens: Sequence[Token], index: int) -> tuple[str | None, int]:
        """Return the word after a redirection and the index to resume at.

        A token that is not a word is consumed in its place, except the end
        marker, which must still stop the scan.
        """
        if index >= len(tokens):
            return None, index
        token = tokens[index]
        if token.kind is TokenKind.WORD:
            return token.text, index + 1
        if token.kind is TokenKind.END_OF_INPUT:
            return None, index
        return None, index + 1

    def _redirect(self, draft: _StageDraft, kind: TokenKind, target: str) -> str | None:
        """Apply one redirection to the draft, returning the collector's warning if any."""
        if kind is TokenKind.REDIRECT_IN:
            draft.input_source = InputSource("file", target)
        elif kind is TokenKind.HEREDOC:
            collected = self._collector(target)
            if isinstance(collected, HeredocText):
                draft.input_source = InputSource("heredoc", collected.text)
                return collected.warning
            draft.input_source = InputSource("heredoc", collected)
        elif kind is TokenKind.REDIRECT_OUT:
            draft.output_target = OutputTarget(target, append=False)
        elif kind is TokenKind.APPEND_OUT:
            draft.output_target = OutputTarget(target, append=True)
        else:
            raise ValueError(f"not a redirection: {kind}")
        return None


def parse(
    tokens: Sequence[Token],
    *,
    settings: Settings | None = None,
    collector: HeredocReader | None = None,
) -> ParsedLine:
    """Fold a token sequence into a parsed line."""

    return CommandBuilder(settings, collector).build(tokens)


def parse_line(
    line: str,
    *,
    settings: Settings | None = None,
    collector: HeredocReader | None = None,
) -> ParsedLine:
    """Tokenize and parse one input line."""

    settings = settings or get_settings()
    return parse(tokenize(line, settings), settings=settings, collector=collector)
