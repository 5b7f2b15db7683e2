"""
Session Module - The scoreboard a front end talks to.

A scoreboard wraps the engine for one table:
- Loads the saved game when created
- Holds the drafts for the round being entered
- Writes the game through to its store after every change

Front ends (API, CLI) never touch GameState directly.
"""

from .scoreboard import Scoreboard

__all__ = [
    "Scoreboard",
]
