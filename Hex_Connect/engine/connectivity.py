"""Edge-to-edge connection search for one player's orientation."""

import logging
from dataclasses import dataclass
from typing import Callable

try:
    from Board import Board, Stone
except ImportError:
    from Hex_Connect.Board import Board, Stone

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Orientation:
    """Which stones a player owns and which two edges they must join."""

    name: str
    color: Stone
    start_edge: Callable[[Board], list]
    is_target: Callable[[Board, int, int], bool]


def _left_column(board: Board) -> list:
    return [(0, y) for y in range(board.height)]


def _top_row(board: Board) -> list:
    return [(x, 0) for x in range(board.width)]


BLACK_ORIENTATION = Orientation(
    name="black",
    color=Stone.BLACK,
    start_edge=_left_column,
    is_target=lambda board, x, y: x == board.width - 1,
)

WHITE_ORIENTATION = Orientation(
    name="white",
    color=Stone.WHITE,
    start_edge=_top_row,
    is_target=lambda board, x, y: y == board.height - 1,
)


def evaluate(board: Board, x: int, y: int, orientation: Orientation) -> bool:
    """
    Depth-first search from (x, y) over the orientation's stones.
    Every stone reached is marked connected and never expanded twice, so rings
    of stones terminate. Returns True once a stone on the target edge is reached.
    """
    color = orientation.color
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        stone, connected = board.at(cx, cy, color)
        if not stone or connected:
            continue
        board.mark_connected(cx, cy, color)
        if orientation.is_target(board, cx, cy):
            return True
        # Reversed so the first offset is explored first
        stack.extend(reversed(board.neighbours(cx, cy)))
    return False


def has_winning_connection(board: Board, orientation: Orientation) -> bool:
    for x, y in orientation.start_edge(board):
        if evaluate(board, x, y, orientation):
            LOGGER.debug("%s connects from start cell %s", orientation.name, (x, y))
            return True
    return False
