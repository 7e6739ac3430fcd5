# src/blackjack/game/session.py

from enum import Enum
from typing import Optional, Protocol

from blackjack.common.cards import Card, Deck
from blackjack.common.constants import DECISION_HIT, INITIAL_CARDS, PROMPT
from blackjack.common.rules import Outcome, decide_winner
from blackjack.common.logging_utils import get_logger
from blackjack.game.players import Dealer, HandOwner, Player, play_dealer_turn
from blackjack.cli.render import COLOR, format_card, format_hand
from blackjack.cli.ui import parse_decision

log = get_logger("game.session")

OUTCOME_MESSAGES = {
    Outcome.PLAYER_BUST: "You busted. Dealer wins (womp womp).",
    Outcome.DEALER_BUST: "Dealer busts. You win!",
    Outcome.DEALER_WIN: "Dealer wins!",
    Outcome.PLAYER_WIN: "You win!",
    Outcome.TIE: "It's a tie.",
}

INVALID_CHOICE = "Invalid choice. Please enter 'h' for hit or 's' for stay."


class GameState(Enum):
    SETUP = "setup"
    PLAYER_TURN = "player_turn"
    DEALER_TURN = "dealer_turn"
    RESOLVED = "resolved"


class LineIO(Protocol):
    def ask(self, prompt: str) -> str: ...

    def show(self, line: str = "") -> None: ...

    def close(self) -> None: ...


def _deal_to(owner: HandOwner, deck: Deck) -> Optional[Card]:
    card = deck.deal()
    if card is None:
        log.warning("Deck is empty, no card dealt")
        return None
    owner.add_card(card)
    return card


class Game:
    """
    One round of player vs. dealer. Drives SETUP -> PLAYER_TURN -> DEALER_TURN -> RESOLVED
    and is the only thing that talks to the line provider.
    """

    def __init__(self, io: LineIO, deck: Optional[Deck] = None, color: bool = COLOR) -> None:
        if deck is None:
            deck = Deck()
            deck.shuffle()
        self.io = io
        self.deck = deck
        self.player = Player()
        self.dealer = Dealer()
        self.color = color
        self.state = GameState.SETUP
        self.outcome: Optional[Outcome] = None

    def run(self) -> Outcome:
        try:
            while self.state is not GameState.RESOLVED:
                match self.state:
                    case GameState.SETUP:
                        self._setup()
                    case GameState.PLAYER_TURN:
                        self._player_turn()
                    case GameState.DEALER_TURN:
                        self._dealer_turn()
        finally:
            self.io.close()

        assert self.outcome is not None
        log.info(f"Round over: {self.outcome.value} player={self.player.score()} dealer={self.dealer.score()}")
        return self.outcome

    def _card(self, card: Card) -> str:
        return format_card(card, self.color)

    def _hand(self, owner: HandOwner) -> str:
        return format_hand(owner.hand.cards, self.color)

    def _resolve(self, outcome: Outcome) -> None:
        self.outcome = outcome
        self.io.show(OUTCOME_MESSAGES[outcome])
        self.state = GameState.RESOLVED

    def _setup(self) -> None:
        for owner in (self.player, self.dealer):
            for _ in range(INITIAL_CARDS):
                _deal_to(owner, self.deck)

        log.info(f"Initial hands: player=[{self.player.hand}] dealer=[{self.dealer.hand}]")

        if self.dealer.hand.cards:
            self.io.show(f"Dealer's card: {self._card(self.dealer.up_card)}")
        self.io.show("The dealer's second card is hidden.")
        self.io.show()
        self.io.show(f"Your hand: {self._hand(self.player)}")
        self.io.show(f"Your score: {self.player.score()}")

        self.state = GameState.PLAYER_TURN

    def _player_turn(self) -> None:
        if self.player.is_bust():
            log.info(f"Player bust at {self.player.score()}")
            self._resolve(Outcome.PLAYER_BUST)
            return

        # re-prompt until we get h or s; nothing else changes meanwhile
        decision = parse_decision(self.io.ask(PROMPT))
        while decision is None:
            self.io.show(INVALID_CHOICE)
            decision = parse_decision(self.io.ask(PROMPT))
        log.debug(f"Player decision: {decision}")

        if decision == DECISION_HIT:
            card = _deal_to(self.player, self.deck)
            if card is not None:
                self.io.show(f"You got: {self._card(card)}")
                self.io.show(f"Your new score: {self.player.score()}")
            # stay in PLAYER_TURN, the bust check runs on the next pass
            return

        self.io.show("You decided to stay.")
        self.state = GameState.DEALER_TURN

    def _dealer_turn(self) -> None:
        self.io.show()
        self.io.show("Dealer's turn...")
        drawn = play_dealer_turn(self.dealer, self.deck)
        log.info(f"Dealer drew {len(drawn)} card(s), final score {self.dealer.score()}")

        self.io.show(f"Dealer's hand: {self._hand(self.dealer)}")
        self.io.show(f"Dealer's score: {self.dealer.score()}")

        self._resolve(decide_winner(self.player.score(), self.dealer.score()))
