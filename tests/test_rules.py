import pytest

from blackjack.common.cards import Card
from blackjack.common.rules import (
    Outcome,
    decide_winner,
    dealer_should_hit,
    hand_value,
    is_bust,
)


def cards(*codes):
    return [Card.from_str(c) for c in codes]


@pytest.mark.parametrize(
    "codes, score",
    [
        (("AH", "KS"), 21),
        (("AH", "AS"), 12),
        (("AH", "AS", "AD", "8C"), 21),
        (("10H", "9S", "5D"), 24),
        (("AH", "6S"), 17),
        (("AH", "6S", "9D"), 16),
        (("AH", "AS", "AD", "AC"), 14),
        ((), 0),
    ],
)
def test_hand_value(codes, score):
    assert hand_value(cards(*codes)) == score


def test_bust_without_aces_to_rescue():
    assert is_bust(cards("10H", "9S", "5D"))
    assert not is_bust(cards("AH", "AS", "AD", "8C"))


def test_hand_value_does_not_touch_the_cards():
    hand = cards("AH", "AS")
    hand_value(hand)
    assert [c.point_value() for c in hand] == [11, 11]


@pytest.mark.parametrize("score, hit", [(12, True), (16, True), (17, False), (21, False), (25, False)])
def test_dealer_should_hit(score, hit):
    assert dealer_should_hit(score) is hit


@pytest.mark.parametrize(
    "player, dealer, outcome",
    [
        (18, 22, Outcome.DEALER_BUST),
        (20, 18, Outcome.PLAYER_WIN),
        (17, 19, Outcome.DEALER_WIN),
        (20, 20, Outcome.TIE),
        (21, 17, Outcome.PLAYER_WIN),
    ],
)
def test_decide_winner(player, dealer, outcome):
    assert decide_winner(player, dealer) is outcome


def test_decide_winner_checks_dealer_bust_first():
    # a busted player never gets here in a real round; the order is still dealer-bust first
    assert decide_winner(25, 22) is Outcome.DEALER_BUST
    assert decide_winner(25, 19) is Outcome.PLAYER_WIN
