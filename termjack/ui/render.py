"""
Text layout for a game snapshot.

`build_frame` turns a `Game` into lines of `(text, Style)` segments. It does
not touch the terminal, so the layout can be checked headless; the curses
front end in `termjack.ui.terminal` only maps each `Style` to a colour.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, List, Tuple

from termjack import __version__
from termjack.blackjack.state import (
    MENU_ORDER,
    Choice,
    GameOver,
    GameResult,
    Presenting,
    Selecting,
    Stage,
    Standing,
    Starting,
)
from termjack.common.card import Card

if TYPE_CHECKING:
    from termjack.blackjack.game import Game
    from termjack.blackjack.hand import BlackjackHand


class Style(Enum):
    PLAIN = auto()
    TITLE = auto()
    HEADING = auto()
    POINTS = auto()
    HIGHLIGHT = auto()
    RED_CARD = auto()
    WHITE_CARD = auto()
    WIN = auto()
    LOSE = auto()
    TIE = auto()


Segment = Tuple[str, Style]
Line = List[Segment]

CONTINUE_PROMPT = "[SPACE / ENTER] Continue"

RESULT_MESSAGES = {
    GameResult.WIN: ("You win!", Style.WIN),
    GameResult.LOSE: ("You lose!", Style.LOSE),
    GameResult.TIE: ("It's a tie!", Style.TIE),
}


def card_segment(card: Card) -> Segment:
    """A card as shown on the table: rank right-aligned to two columns, then the suit."""
    style = Style.RED_CARD if card.suit.is_red else Style.WHITE_CARD
    return f"{card.rank.rank_str:>2} {card.suit}", style


def hand_lines(name: str, hand: BlackjackHand) -> List[Line]:
    cards: Line = [("Cards:", Style.PLAIN)]
    for card in hand.cards:
        cards.append((" ", Style.PLAIN))
        cards.append(card_segment(card))
    return [
        [(f"{name}:", Style.HEADING)],
        cards,
        [("Points: ", Style.PLAIN), (str(hand.points), Style.POINTS)],
        [],
    ]


def menu_line(choice: Choice, selected: bool) -> Line:
    if selected:
        return [(f"> {choice}", Style.HIGHLIGHT)]
    return [(f"- {choice}", Style.PLAIN)]


def control_lines(game: Game) -> List[Line]:
    """The part of the screen that tells the player what they can do."""
    match game.phase:
        case Selecting(selected):
            return [menu_line(choice, choice == selected) for choice in MENU_ORDER]
        case Starting(Stage.FIRST):
            return [
                [("Welcome to Blackjack!", Style.PLAIN)],
                [("[SPACE / ENTER] Start", Style.PLAIN)],
            ]
        case Starting() | Standing() | Presenting():
            return [[(CONTINUE_PROMPT, Style.PLAIN)]]
        case GameOver(result):
            return [
                [RESULT_MESSAGES[result]],
                [("[SPACE / ENTER] Play again", Style.PLAIN)],
                [("[ESC / Q] Quit", Style.PLAIN)],
            ]
    raise TypeError(f"Unknown phase: {game.phase!r}")


def build_frame(game: Game) -> List[Line]:
    """
    Lay out the whole screen for the current state of the game.

    Args:
        game: The game to show.

    Returns:
        The screen as a list of lines, each a list of styled segments.
    """
    frame: List[Line] = [[(f"BLACKJACK v{__version__}", Style.TITLE)], []]
    frame.extend(hand_lines("Dealer", game.dealer))
    frame.extend(hand_lines("You", game.player))
    frame.extend(control_lines(game))
    return frame


def frame_text(game: Game) -> str:
    """The frame without styling, one line per row."""
    return "\n".join(
        "".join(text for text, _ in line) for line in build_frame(game)
    )
