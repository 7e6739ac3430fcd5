# src/blackjack/game/players.py

from dataclasses import dataclass, field
from typing import List, Protocol

from blackjack.common.cards import Card, Deck
from blackjack.common.rules import dealer_should_hit, hand_value, is_bust_score
from blackjack.common.logging_utils import get_logger

log = get_logger("game.players")


@dataclass
class Hand:
    cards: List[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def score(self) -> int:
        # derived every time, never cached
        return hand_value(self.cards)

    def is_bust(self) -> bool:
        return is_bust_score(self.score())

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return ", ".join(str(c) for c in self.cards)


class HandOwner(Protocol):
    """What Player and Dealer have in common: they hold cards and get scored."""

    hand: Hand

    def add_card(self, card: Card) -> None: ...

    def score(self) -> int: ...


@dataclass
class Player:
    hand: Hand = field(default_factory=Hand)

    def add_card(self, card: Card) -> None:
        self.hand.add(card)

    def score(self) -> int:
        return self.hand.score()

    def is_bust(self) -> bool:
        return self.hand.is_bust()


@dataclass
class Dealer:
    hand: Hand = field(default_factory=Hand)

    def add_card(self, card: Card) -> None:
        self.hand.add(card)

    def score(self) -> int:
        return self.hand.score()

    def is_bust(self) -> bool:
        return self.hand.is_bust()

    @property
    def up_card(self) -> Card:
        return self.hand.cards[0]


def play_dealer_turn(dealer: HandOwner, deck: Deck) -> List[Card]:
    """
    House rule: draw while under 17, stand on 17 or more (even when bust).
    Never looks at the player. Stops early if the deck runs out.
    Returns the cards drawn, in order.
    """
    drawn: List[Card] = []
    while dealer_should_hit(dealer.score()):
        card = deck.deal()
        if card is None:
            log.warning(f"Deck empty while dealer at {dealer.score()}, dealer stands")
            break
        dealer.add_card(card)
        drawn.append(card)
        log.debug(f"Dealer draws {card} -> {dealer.score()}")
    return drawn
