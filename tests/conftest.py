from __future__ import annotations

import os

import pytest

from minishell.config import Settings


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in list(os.environ):
        if name.upper().startswith("MINISHELL_"):
            monkeypatch.delenv(name)
    # Keep a stray .env in the working directory out of the settings.
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> Settings:
    return Settings()


class RecordingCollector:
    def __init__(self, text: str = "body\n") -> None:
        self.text = text
        self.delimiters: list[str] = []

    def __call__(self, delimiter: str) -> str:
        self.delimiters.append(delimiter)
        return self.text


@pytest.fixture
def collector() -> RecordingCollector:
    return RecordingCollector()
