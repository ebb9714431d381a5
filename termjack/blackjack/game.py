"""
This module provides the Blackjack game state machine.

A `Game` owns the deck, the player's hand, the dealer's hand and the current
phase. The only way to move it forward is `update`, which takes one of the
three inputs, performs the deals that transition calls for and returns the
new phase:

    Starting(FIRST) -> Starting(SECOND) -> Starting(THIRD) -> Selecting(HIT)
    Selecting(...)  -> Selecting(...) | Standing() | GameOver(...)
    Standing()      -> Standing() | GameOver(...)
    GameOver(...)   -> Starting(FIRST)

Any input a phase has no use for leaves the game untouched. Every deal and
phase change is also published on the `EventBus`.
"""

import logging
import random
from typing import Any, Dict, Optional

from termjack.blackjack.constants import DEALER_STANDS_ON
from termjack.blackjack.hand import BlackjackHand
from termjack.blackjack.state import (
    Choice,
    GameOver,
    GameResult,
    Input,
    Phase,
    Presenting,
    Selecting,
    Stage,
    Standing,
    Starting,
    cycle_choice,
    phase_to_dict,
)
from termjack.common.deck import Deck
from termjack.events import EngineEventType, EventBus

logger = logging.getLogger(__name__)

PLAYER = "player"
DEALER = "dealer"


class Game:
    """
    A single-player game of Blackjack against the dealer.

    >>> game = Game()
    >>> game.phase
    Starting(stage=<Stage.FIRST: 1>)
    >>> game.update(Input.CONTINUE)
    Starting(stage=<Stage.SECOND: 2>)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a Game.

        :param rng: Random source used to shuffle the deck at the start of
                    each round. A fresh `random.Random` if omitted.
        """
        self.rng = rng or random.Random()
        self.deck = Deck()
        self.player = BlackjackHand()
        self.dealer = BlackjackHand()
        self.phase: Phase = Starting(Stage.FIRST)
        self.rounds_played = 0
        self.event_bus = EventBus.get_instance()

    def update(self, user_input: Input) -> Phase:
        """
        Apply one input to the game.

        :param user_input: The input to apply.
        :return: The phase the game is in afterwards.
        :raises DeckExhaustedError: If a deal is needed and the deck is empty.
        """
        old_phase = self.phase

        match (old_phase, user_input):
            case (Starting(Stage.FIRST), Input.CONTINUE):
                self._start_round()
                self._deal_player()
                new_phase = Starting(Stage.SECOND)
            case (Starting(Stage.SECOND), Input.CONTINUE):
                self._deal_dealer()
                new_phase = Starting(Stage.THIRD)
            case (Starting(Stage.THIRD), Input.CONTINUE):
                self._deal_player()
                new_phase = Selecting(Choice.HIT)
            case (Selecting(choice), Input.CONTINUE):
                new_phase = self._commit(choice)
            case (Selecting(choice), Input.UP):
                new_phase = Selecting(cycle_choice(choice, -1))
            case (Selecting(choice), Input.DOWN):
                new_phase = Selecting(cycle_choice(choice, 1))
            case (Standing(), Input.CONTINUE):
                self._deal_dealer()
                new_phase = self._resolve_dealer()
            case (GameOver(), Input.CONTINUE):
                self._collect_cards()
                new_phase = Starting(Stage.FIRST)
            case (Presenting(), Input.CONTINUE):
                new_phase = Selecting(Choice.HIT)
            case _:
                return old_phase

        self.phase = new_phase
        if new_phase != old_phase:
            logger.debug("Phase %s -> %s on %s", old_phase, new_phase, user_input.name)
            self.event_bus.emit(
                EngineEventType.STATE_CHANGED,
                {
                    "from": phase_to_dict(old_phase),
                    "to": phase_to_dict(new_phase),
                    "input": user_input.name,
                },
            )
        if isinstance(new_phase, GameOver):
            self._finish_round(new_phase.result)
        return new_phase

    def _commit(self, choice: Choice) -> Phase:
        """Carry out the highlighted menu option."""
        self.event_bus.emit(EngineEventType.PLAYER_ACTION, {"action": choice.name})

        match choice:
            case Choice.HIT:
                self._deal_player()
                if self.player.is_bust:
                    self.event_bus.emit(
                        EngineEventType.HAND_BUSTED,
                        {"hand": PLAYER, "points": self.player.points},
                    )
                    return GameOver(GameResult.LOSE)
                return Selecting(Choice.HIT)
            case Choice.STAND:
                self._deal_dealer()
                return self._resolve_dealer()
            case Choice.SURRENDER:
                return GameOver(GameResult.LOSE)

    def _resolve_dealer(self) -> Phase:
        """
        Decide what happens after the dealer has taken a card.

        The dealer busts, keeps drawing below 17, or stands and the totals
        are compared.
        """
        dealer_points = self.dealer.points
        player_points = self.player.points

        if self.dealer.is_bust:
            self.event_bus.emit(
                EngineEventType.HAND_BUSTED, {"hand": DEALER, "points": dealer_points}
            )
            return GameOver(GameResult.WIN)
        if dealer_points < DEALER_STANDS_ON:
            self.event_bus.emit(
                EngineEventType.DEALER_ACTION, {"action": "HIT", "points": dealer_points}
            )
            return Standing()

        self.event_bus.emit(
            EngineEventType.DEALER_ACTION, {"action": "STAND", "points": dealer_points}
        )
        if dealer_points > player_points:
            return GameOver(GameResult.LOSE)
        if dealer_points < player_points:
            return GameOver(GameResult.WIN)
        return GameOver(GameResult.TIE)

    def _start_round(self) -> None:
        self.deck.shuffle(self.rng)
        logger.debug("Round %d started", self.rounds_played + 1)
        self.event_bus.emit(
            EngineEventType.ROUND_STARTED, {"round_number": self.rounds_played + 1}
        )
        self.event_bus.emit(EngineEventType.SHUFFLE, {"deck_size": self.deck.size})

    def _finish_round(self, result: GameResult) -> None:
        self.rounds_played += 1
        logger.info(
            "Round %d: %s (player %d, dealer %d)",
            self.rounds_played,
            result.name,
            self.player.points,
            self.dealer.points,
        )
        self.event_bus.emit(
            EngineEventType.ROUND_ENDED,
            {
                "round_number": self.rounds_played,
                "result": result.name,
                "player_points": self.player.points,
                "dealer_points": self.dealer.points,
            },
        )

    def _collect_cards(self) -> None:
        """Return both hands to the deck ahead of the next shuffle."""
        self.deck.return_cards(self.dealer.clear())
        self.deck.return_cards(self.player.clear())

    def _deal_player(self) -> None:
        self._deal(self.player, PLAYER)

    def _deal_dealer(self) -> None:
        self._deal(self.dealer, DEALER)

    def _deal(self, hand: BlackjackHand, recipient: str) -> None:
        card = self.deck.deal()
        hand.add_card(card)
        self.event_bus.emit(
            EngineEventType.CARD_DEALT,
            {"recipient": recipient, "card": str(card), "points": hand.points},
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game
        """
        return {
            **phase_to_dict(self.phase),
            "rounds_played": self.rounds_played,
            "deck_cards_remaining": self.deck.size,
            "player": {
                "cards": [str(card) for card in self.player.cards],
                "points": self.player.points,
            },
            "dealer": {
                "cards": [str(card) for card in self.dealer.cards],
                "points": self.dealer.points,
            },
        }
