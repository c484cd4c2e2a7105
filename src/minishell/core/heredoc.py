"""Here document collection."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, TextIO, Union

from loguru import logger

from minishell.config import Settings, get_settings


@dataclass(frozen=True)
class HeredocText:
    """Collected here document text and the warning raised while reading it, if any."""

    text: str
    warning: str | None = None


HeredocReader = Callable[[str], Union[str, HeredocText]]


class HeredocCollector:
    """Read here document lines from a text stream until a delimiter line.

    Streams default to ``sys.stdin``/``sys.stdout`` looked up on every call,
    so redirected standard streams are honoured. Reading blocks until a line
    or end of stream arrives.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._settings = settings or get_settings()

    def __call__(self, delimiter: str) -> HeredocText:
        return self.read(delimiter)

    def collect(self, delimiter: str) -> str:
        """Return the text read before ``delimiter``, newline-terminated per line."""
        return self.read(delimiter).text

    def read(self, delimiter: str) -> HeredocText:
        stdin = self._stdin or sys.stdin
        stdout = self._stdout or sys.stdout
        limit = self._settings.max_heredoc_size

        chunks: list[str] = []
        size = 0
        warning = None
        while True:
            stdout.write(self._settings.heredoc_prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                logger.debug("Here document ended by end of input before {!r}", delimiter)
                break
            if line.endswith("\n"):
                line = line[:-1]
            if line == delimiter:
                break
            chunk = line + "\n"
            if size + len(chunk) > limit:
                warning = f"Here document exceeds maximum size of {limit} characters"
                logger.warning(warning)
                break
            chunks.append(chunk)
            size += len(chunk)
        return HeredocText("".join(chunks), warning)
