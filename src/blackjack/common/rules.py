# src/blackjack/common/rules.py

from enum import Enum
from typing import Iterable

from .cards import Card
from .constants import BLACKJACK, DEALER_STAND_ON, SOFT_ACE_BONUS


class Outcome(Enum):
    PLAYER_BUST = "player_bust"
    DEALER_BUST = "dealer_bust"
    DEALER_WIN = "dealer_win"
    PLAYER_WIN = "player_win"
    TIE = "tie"


def hand_value(hand: Iterable[Card]) -> int:
    """
    Every Ace starts at 11. While the total is over 21, turn one more Ace
    into a 1 until the hand fits or there are no Aces left to turn.
    """
    total = 0
    aces = 0
    for card in hand:
        total += card.point_value()
        if card.is_ace:
            aces += 1

    while total > BLACKJACK and aces > 0:
        total -= SOFT_ACE_BONUS
        aces -= 1
    return total


def is_bust_score(score: int) -> bool:
    return score > BLACKJACK


def is_bust(hand: Iterable[Card]) -> bool:
    return is_bust_score(hand_value(hand))


def dealer_should_hit(score: int) -> bool:
    return score < DEALER_STAND_ON


def decide_winner(player_score: int, dealer_score: int) -> Outcome:
    # Player bust is resolved before the dealer plays, so it is not re-checked here.
    if is_bust_score(dealer_score):
        return Outcome.DEALER_BUST
    if dealer_score > player_score:
        return Outcome.DEALER_WIN
    if dealer_score < player_score:
        return Outcome.PLAYER_WIN
    return Outcome.TIE
