# src/blackjack/common/logging_utils.py

import logging
import os

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# Default is WARNING so log records don't interleave with the game text on the console.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (cli/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"blackjack.{name}")
