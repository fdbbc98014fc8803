"""
simplejack: single-player blackjack against a computer dealer.

The game is modelled as an immutable `GameState` advanced by pure
transitions; see `simplejack.blackjack.transitions`.
"""

__version__ = "0.1.0"
