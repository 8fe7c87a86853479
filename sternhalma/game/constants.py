"""Constants for Sternhalma game logic."""

from enum import Enum
from typing import Dict, Optional
from dataclasses import dataclass
import re
import logging

# Setup logger
logger = logging.getLogger(__name__)


class Piece(Enum):
    EMPTY = 0
    HEAD = 1
    TAIL = 2
    LEFT_HAND = 3
    RIGHT_FOOT = 4
    RIGHT_HAND = 5
    LEFT_FOOT = 6

    @property
    def is_player(self) -> bool:
        return self is not Piece.EMPTY

    @property
    def opposite(self) -> 'Piece':
        """The player whose starting triangle this player has to fill."""
        return _OPPOSITES[self]

    @staticmethod
    def from_string(name: str) -> 'Piece':
        """Create Piece from a name like 'head', 'LeftHand' or 'left-hand'."""
        key = re.sub(r'[\s_-]', '', name).lower()
        for piece in Piece:
            if piece.name.replace('_', '').lower() == key:
                return piece
        raise ValueError(f"Unknown piece: {name!r}")


_OPPOSITES = {
    Piece.EMPTY: Piece.EMPTY,
    Piece.HEAD: Piece.TAIL,
    Piece.TAIL: Piece.HEAD,
    Piece.LEFT_HAND: Piece.RIGHT_FOOT,
    Piece.RIGHT_FOOT: Piece.LEFT_HAND,
    Piece.RIGHT_HAND: Piece.LEFT_FOOT,
    Piece.LEFT_FOOT: Piece.RIGHT_HAND,
}

PLAYERS = tuple(piece for piece in Piece if piece.is_player)


@dataclass(frozen=True)
class Point:
    """The overall, padded row and column of a cell.

    The topmost cell of a standard board is ``Point(1, 13)`` even though its
    row holds a single piece, because wider rows have 12 columns to its left.
    Rows and columns are 1-indexed.
    """
    row: int
    column: int

    def __str__(self) -> str:
        return f"({self.row},{self.column})"

    @staticmethod
    def from_string(text: str) -> 'Point':
        """Create Point from a string like '4,10' or '4 10'."""
        parts = [part for part in re.split(r'[\s,]+', text.strip()) if part]
        if len(parts) != 2:
            raise ValueError(f"Expected 'row,column', got {text!r}")
        return Point(int(parts[0]), int(parts[1]))


@dataclass(frozen=True)
class IndexPair:
    """Raw row/column indices into the board's cell rows, e.g. ``rows[0][0]``."""
    row: int
    column: int


@dataclass(frozen=True)
class HomeZone:
    """Where a player's winning triangle sits in the cell rows.

    The zone covers ``player_lines`` rows starting at
    ``bands * player_lines + extra``. Rows widen downwards when ``increasing``
    and the occupied cells sit at the end of each row when ``reversed``.
    """
    bands: int
    extra: int
    increasing: bool
    reversed: bool

    def start_row(self, player_lines: int) -> int:
        return self.bands * player_lines + self.extra


# Game configuration
DEFAULT_PLAYER_LINES = 4
MAX_MOVE_DISTANCE = 2
JUMP_DISTANCE = 2

DEFAULT_SYMBOLS: Dict[Piece, str] = {
    Piece.HEAD: "1",
    Piece.TAIL: "2",
    Piece.LEFT_HAND: "3",
    Piece.RIGHT_HAND: "5",
    Piece.LEFT_FOOT: "6",
    Piece.RIGHT_FOOT: "4",
    Piece.EMPTY: ".",
}

# Winning triangles, keyed by the player who has to fill them
HOME_ZONES: Dict[Piece, Optional[HomeZone]] = {
    Piece.HEAD: HomeZone(bands=3, extra=1, increasing=False, reversed=False),
    Piece.LEFT_HAND: HomeZone(bands=2, extra=1, increasing=True, reversed=True),
    Piece.RIGHT_HAND: HomeZone(bands=2, extra=1, increasing=True, reversed=False),
    Piece.LEFT_FOOT: HomeZone(bands=1, extra=0, increasing=False, reversed=True),
    Piece.RIGHT_FOOT: HomeZone(bands=1, extra=0, increasing=False, reversed=False),
    Piece.TAIL: HomeZone(bands=0, extra=0, increasing=True, reversed=False),
    Piece.EMPTY: None,
}
