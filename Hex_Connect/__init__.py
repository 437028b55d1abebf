"""Hex_Connect package exports."""

from .Board import Board, BoardError, EmptyInputError, EmptyRowError, MarkerError, Stone, load
from .engine.connectivity import BLACK_ORIENTATION, WHITE_ORIENTATION, Orientation, has_winning_connection
from .engine.referee import result_of, winner_of

# Subpackages for the search engine and helpers
from . import engine, utils

__all__ = [
    "Board",
    "BoardError",
    "EmptyInputError",
    "EmptyRowError",
    "MarkerError",
    "Stone",
    "load",
    "Orientation",
    "BLACK_ORIENTATION",
    "WHITE_ORIENTATION",
    "has_winning_connection",
    "result_of",
    "winner_of",
    "engine",
    "utils",
]
