"""Winner detection for a finished board: black is checked before white."""

import logging

try:
    from Board import load
    from engine.connectivity import BLACK_ORIENTATION, WHITE_ORIENTATION, has_winning_connection
except ImportError:
    from Hex_Connect.Board import load
    from Hex_Connect.engine.connectivity import BLACK_ORIENTATION, WHITE_ORIENTATION, has_winning_connection

LOGGER = logging.getLogger(__name__)

DEFAULT_ORIENTATIONS = (BLACK_ORIENTATION, WHITE_ORIENTATION)
NO_WINNER = ""


def winner_of(board, orientations=DEFAULT_ORIENTATIONS):
    """Return the name of the first orientation that connects its edges, or ""."""
    for orientation in orientations:
        LOGGER.debug("searching for %s connection", orientation.name)
        if has_winning_connection(board, orientation):
            return orientation.name
    return NO_WINNER


def result_of(lines, black="X", white="O", orientations=DEFAULT_ORIENTATIONS):
    """
    Load the board from text rows and return "black", "white" or "" (no winner).
    Raises EmptyInputError/EmptyRowError on malformed input.
    """
    board = load(lines, black=black, white=white)
    return winner_of(board, orientations)
