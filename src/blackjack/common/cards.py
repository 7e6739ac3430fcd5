# src/blackjack/common/cards.py

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Tuple

from .constants import ACE_POINTS, FACE_POINTS


class Suit(Enum):
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)


SUITS = list(Suit)   # construction order: suit-major
RANKS = list(Rank)   # Ace..King

RANK_SYMBOLS = {Rank.ACE: "A", Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K"}
_SYMBOL_TO_RANK = {**{sym: r for r, sym in RANK_SYMBOLS.items()}, "T": Rank.TEN}


def rank_to_string(rank: Rank) -> str:
    return RANK_SYMBOLS.get(rank, str(int(rank)))


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def point_value(self) -> int:
        """
        Ace is always 11 here; dropping it to 1 is the hand's job (rules.hand_value).
        """
        if self.rank is Rank.ACE:
            return ACE_POINTS
        if self.rank.is_face:
            return FACE_POINTS
        return int(self.rank)

    @property
    def is_ace(self) -> bool:
        return self.rank is Rank.ACE

    def __str__(self) -> str:
        return f"{rank_to_string(self.rank)}{self.suit.value}"

    @classmethod
    def from_str(cls, text: str) -> "Card":
        """
        Parse short notation: rank then suit letter, e.g. "AH", "10s", "TD", "kc".
        Raises ValueError on anything else.
        """
        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"Bad card notation: {text!r}")

        rank_str, suit_str = text[:-1].upper(), text[-1].upper()

        if rank_str in _SYMBOL_TO_RANK:
            rank = _SYMBOL_TO_RANK[rank_str]
        elif rank_str.isdigit() and 2 <= int(rank_str) <= 10:
            rank = Rank(int(rank_str))
        else:
            raise ValueError(f"Bad rank in card notation: {text!r}")

        try:
            suit = Suit(suit_str)
        except ValueError:
            raise ValueError(f"Bad suit in card notation: {text!r}") from None

        return cls(rank, suit)


class Deck:
    def __init__(self, cards: Optional[Iterable[Card]] = None, rng: Optional[random.Random] = None) -> None:
        if cards is None:
            self._cards: List[Card] = [Card(r, s) for s in SUITS for r in RANKS]
        else:
            self._cards = list(cards)
        # the module-level functions share one process-wide generator
        self._rng = rng if rng is not None else random

    def shuffle(self) -> None:
        """Fisher-Yates, in place: walk i from the last index down, swap with a random j in [0, i]."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def deal(self) -> Optional[Card]:
        """
        Remove and return the top card (the end of the list).
        Returns None when the deck is empty; callers must check.
        """
        if not self._cards:
            return None
        return self._cards.pop()

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
