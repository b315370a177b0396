"""Shared pytest fixtures for calcline tests."""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any

import pytest
from rich.console import Console

from calcline.config import CalclineConfig
from calcline.repl import Session


class SessionHarness:
    """A Session wired to in-memory stdout/stderr buffers."""

    def __init__(self, **config: Any) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.session = Session(
            CalclineConfig(**config),
            console=Console(file=self.out, highlight=False, width=200),
            err_console=Console(file=self.err, highlight=False, width=200),
        )

    def run(self, text: str, interactive: bool = False) -> int:
        return self.session.run(io.StringIO(text), interactive=interactive)


@pytest.fixture
def make_session() -> Callable[..., SessionHarness]:
    """Return a factory for sessions with captured output."""
    return SessionHarness
