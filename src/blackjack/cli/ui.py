# src/blackjack/cli/ui.py

from typing import Optional

from blackjack.common.constants import VALID_DECISIONS


def parse_decision(raw: str) -> Optional[str]:
    """
    Returns "h" or "s", or None when the line is neither.
    Case and surrounding whitespace are ignored.
    """
    token = raw.strip().lower()
    return token if token in VALID_DECISIONS else None


class ConsoleIO:
    """Line provider backed by input()/print()."""

    def __init__(self) -> None:
        self._closed = False

    def ask(self, prompt: str) -> str:
        if self._closed:
            raise EOFError("console input already closed")
        return input(prompt)

    def show(self, line: str = "") -> None:
        print(line, flush=True)

    def close(self) -> None:
        self._closed = True
