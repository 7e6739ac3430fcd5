# src/blackjack/cli/main.py

import sys

from blackjack.common.logging_utils import setup_logging, get_logger
from blackjack.game.session import Game
from blackjack.cli.ui import ConsoleIO


log = get_logger("cli.main")


def main() -> int:
    setup_logging()

    game = Game(ConsoleIO())
    try:
        outcome = game.run()
    except (EOFError, KeyboardInterrupt):
        log.warning(f"Input ended in state {game.state.value}, round abandoned")
        print("\nNo more input, exiting.")
        return 1

    log.info(f"Outcome: {outcome.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
