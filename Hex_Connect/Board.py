"""Board state container for a finished Hex position, loaded from text rows."""

import io
import logging
import sys
from enum import IntEnum

LOGGER = logging.getLogger(__name__)

# Hex adjacency on a parallelogram board
NEIGHBOUR_OFFSETS = [(1, 0), (-1, 0), (0, 1), (0, -1), (-1, 1), (1, -1)]


class Stone(IntEnum):
    BLACK = -1
    EMPTY = 0
    WHITE = 1


class BoardError(ValueError):
    """Malformed board input."""


class EmptyInputError(BoardError):
    pass


class EmptyRowError(BoardError):
    pass


class MarkerError(BoardError):
    pass


class Board:
    def __init__(self, width, height):
        # Store cells as Stone values; connected flags are kept per color
        self.width = width
        self.height = height
        self.cells = [[Stone.EMPTY] * width for _ in range(height)]
        self.connected = {
            Stone.BLACK: [[False] * width for _ in range(height)],
            Stone.WHITE: [[False] * width for _ in range(height)],
        }

    @classmethod
    def from_lines(cls, lines, black="X", white="O"):
        """Build a board from text rows; width comes from the first row."""
        if len(black) != 1 or len(white) != 1:
            raise MarkerError("stone markers must be single characters")
        if black == white:
            raise MarkerError("black and white markers must differ")

        lines = [line.rstrip("\r\n") for line in lines]
        if not lines:
            raise EmptyInputError("No lines given")
        if not lines[0]:
            raise EmptyRowError("First line is empty string")

        board = cls(width=len(lines[0]), height=len(lines))
        markers = {black: Stone.BLACK, white: Stone.WHITE}
        for y, line in enumerate(lines):
            if len(line) != board.width:
                LOGGER.debug("row %d has length %d, expected %d", y, len(line), board.width)
            # Missing cells of a short row stay empty, extra characters are ignored
            for x, ch in enumerate(line[: board.width]):
                board.cells[y][x] = markers.get(ch, Stone.EMPTY)
        LOGGER.debug("loaded %dx%d board", board.width, board.height)
        return board

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def stone_at(self, x, y):
        return self.cells[y][x]

    def at(self, x, y, color):
        """Return (stone of color present, connected flag for color) at (x, y)."""
        return self.cells[y][x] == color, self.connected[color][y][x]

    def is_connected(self, x, y, color):
        return self.connected[color][y][x]

    def mark_connected(self, x, y, color):
        self.connected[color][y][x] = True

    def neighbours(self, x, y):
        """In-grid hex neighbours of (x, y)."""
        coords = []
        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                coords.append((nx, ny))
        return coords

    def _glyph(self, x, y):
        stone = self.cells[y][x]
        if stone == Stone.WHITE:
            return "O" if self.connected[Stone.WHITE][y][x] else "o"
        if stone == Stone.BLACK:
            return "X" if self.connected[Stone.BLACK][y][x] else "x"
        return "."

    def dump(self, stream=None):
        """Write the board, each row shifted right by its index to show the hex skew."""
        stream = stream if stream is not None else sys.stdout
        for y in range(self.height):
            chars = [self._glyph(x, y) for x in range(self.width)]
            stream.write(" " * y + " ".join(chars) + "\n")

    def render(self):
        buf = io.StringIO()
        self.dump(buf)
        return buf.getvalue()


def load(lines, black="X", white="O"):
    return Board.from_lines(lines, black=black, white=white)
