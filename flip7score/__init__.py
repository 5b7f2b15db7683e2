"""
Flip 7 Scoreboard - Score tracker for the Flip 7 card game.

Records each round for every player, either as a typed point value or as
the hand of cards the player banked, and keeps running totals until
someone reaches 200 points. Provides:
- Round scoring from number cards, modifiers and the Flip 7 bonus
- A small game state machine (start, submit round, reset, restart)
- Single-slot persistence so a game survives restarts
- A JSON API and a command-line front end
"""

__version__ = "0.1.0"
