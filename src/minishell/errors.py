"""Application-level exception types for minishell."""

from __future__ import annotations


class MinishellError(Exception):
    """Base exception for minishell."""


class ConfigurationError(MinishellError):
    """Raised when settings fail validation."""


class MalformedStageError(MinishellError):
    """Raised when a parsed stage cannot be handed to an executor."""

    def __init__(self, index: int, reason: str = "missing command") -> None:
        super().__init__(f"stage {index + 1}: {reason}")
        self.index = index
        self.reason = reason
