# src/blackjack/cli/render.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Iterable

from blackjack.common.cards import Card, Suit, rank_to_string

CSI = "\033["

# Environment switch:
#   BLACKJACK_COLOR=0 to print plain text (no ANSI escapes)
COLOR = os.getenv("BLACKJACK_COLOR", "1") == "1"


@dataclass
class Style:
    prefix: str = ""
    suffix: str = CSI + "0m"

    def paint(self, text: str) -> str:
        return self.prefix + text + self.suffix


RED_BOLD = Style(prefix=CSI + "31m" + CSI + "1m")  # hearts/diamonds

SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


def suit_to_symbol(suit: Suit) -> str:
    return SUIT_SYMBOLS[suit]


def is_red(suit: Suit) -> bool:
    return suit in (Suit.HEARTS, Suit.DIAMONDS)


def format_card(card: Card, color: bool = COLOR) -> str:
    text = f"{rank_to_string(card.rank)}{suit_to_symbol(card.suit)}"
    if color and is_red(card.suit):
        return RED_BOLD.paint(text)
    return text


def format_hand(cards: Iterable[Card], color: bool = COLOR) -> str:
    return ", ".join(format_card(c, color) for c in cards)
