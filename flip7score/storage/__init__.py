"""
Storage - Where the current game is kept between runs.

There is exactly one slot. It holds the whole game state and nothing
else; there is no history of past games.
"""

from .store import Store, MemoryStore, JsonFileStore, DEFAULT_KEY

__all__ = [
    "Store",
    "MemoryStore",
    "JsonFileStore",
    "DEFAULT_KEY",
]
