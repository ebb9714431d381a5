"""
termjack: a terminal Blackjack game played against an automated dealer.

The package is split into the card model (`termjack.common`), the game state
machine (`termjack.blackjack`), the event bus (`termjack.events`) and the
terminal adapters (`termjack.ui`).
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
