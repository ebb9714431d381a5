"""
Phase model for the Blackjack state machine.

The game is always in exactly one phase. Each phase is a small frozen
dataclass carrying only the data that makes sense for it, so a `GameOver`
can never hold a menu choice and a `Selecting` can never hold a result:

- `Starting(stage)`: the three opening deals.
- `Presenting()`: shows the opening hands; nothing enters it today.
- `Selecting(choice)`: the player's turn, `choice` is the highlighted option.
- `Standing()`: the player stood and the dealer is drawing.
- `GameOver(result)`: the round is decided.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Union


class Input(Enum):
    """The three inputs the game understands."""

    CONTINUE = auto()
    UP = auto()
    DOWN = auto()


class Choice(Enum):
    """Options in the player's menu, in the order they are shown."""

    HIT = "Hit"
    STAND = "Stand"
    SURRENDER = "Surrender"

    def __str__(self) -> str:
        return self.value


class Stage(Enum):
    FIRST = auto()
    SECOND = auto()
    THIRD = auto()


class GameResult(Enum):
    """Outcome of a round from the player's point of view."""

    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


MENU_ORDER = tuple(Choice)


def cycle_choice(choice: Choice, step: int) -> Choice:
    """
    Move the highlight `step` places down the menu, wrapping at either end.

    >>> cycle_choice(Choice.HIT, -1)
    <Choice.SURRENDER: 'Surrender'>
    """
    return MENU_ORDER[(MENU_ORDER.index(choice) + step) % len(MENU_ORDER)]


@dataclass(frozen=True)
class Starting:
    stage: Stage = Stage.FIRST


@dataclass(frozen=True)
class Presenting:
    pass


@dataclass(frozen=True)
class Selecting:
    choice: Choice = Choice.HIT


@dataclass(frozen=True)
class Standing:
    pass


@dataclass(frozen=True)
class GameOver:
    result: GameResult


Phase = Union[Starting, Presenting, Selecting, Standing, GameOver]


def phase_to_dict(phase: Phase) -> Dict[str, Any]:
    """
    Convert a phase to a dictionary suitable for serialization.

    >>> phase_to_dict(Selecting(Choice.STAND))
    {'phase': 'Selecting', 'choice': 'STAND'}
    """
    data: Dict[str, Any] = {"phase": type(phase).__name__}
    match phase:
        case Starting(stage):
            data["stage"] = stage.name
        case Selecting(choice):
            data["choice"] = choice.name
        case GameOver(result):
            data["result"] = result.name
    return data
