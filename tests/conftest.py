# tests/conftest.py

from typing import List

import pytest

from blackjack.common.cards import Card, Deck


class ScriptedIO:
    """Line provider that answers from a fixed list and records everything shown."""

    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.shown: List[str] = []
        self.closed = False

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.closed or not self.lines:
            raise EOFError("script exhausted")
        return self.lines.pop(0)

    def show(self, line: str = "") -> None:
        self.shown.append(line)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def scripted():
    return ScriptedIO


@pytest.fixture
def stacked():
    """stacked("10H", "7S", ...) -> Deck that deals those cards in the given order."""

    def _make(*codes: str) -> Deck:
        return Deck(cards=[Card.from_str(c) for c in reversed(codes)])

    return _make
