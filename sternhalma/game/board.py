"""Core game logic for the Sternhalma board."""

from typing import Iterator, List, Optional, Sequence
import numpy as np
import logging

from .constants import Point, Piece, IndexPair
from .config import BoardConfig
from .coordinates import (
    row_count,
    row_length,
    center_column,
    to_index_pair,
    iter_points,
)
from .moves import MoveValidator
from .types import ErrorKind, GameError
from . import win

# Setup logger
logger = logging.getLogger(__name__)


def _build_rows(player_lines: int) -> List[List[Piece]]:
    """Lay out the six starting triangles around the empty middle, top to bottom."""
    rows: List[List[Piece]] = []

    for n in range(1, player_lines + 1):
        rows.append([Piece.HEAD] * n)

    for n in range(1, player_lines + 1):
        side = player_lines + 1 - n
        rows.append([Piece.LEFT_HAND] * side
                    + [Piece.EMPTY] * (player_lines + n)
                    + [Piece.RIGHT_HAND] * side)

    rows.append([Piece.EMPTY] * (player_lines * 2 + 1))

    for n in range(player_lines, 0, -1):
        side = player_lines + 1 - n
        rows.append([Piece.LEFT_FOOT] * side
                    + [Piece.EMPTY] * (player_lines + n)
                    + [Piece.RIGHT_FOOT] * side)

    for n in range(player_lines, 0, -1):
        rows.append([Piece.TAIL] * n)

    return rows


class Board:
    """Represents the Sternhalma board state.

    Cells are stored as jagged rows forming a six-pointed star. Callers address
    cells with padded ``Point`` coordinates; raw indices never leave the board.
    """

    def __init__(self, config: Optional[BoardConfig] = None):
        self.config = config or BoardConfig()
        self.rows: List[List[Piece]] = _build_rows(self.config.player_lines)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece]],
                  config: Optional[BoardConfig] = None) -> 'Board':
        """Create a board holding the given cells."""
        board = cls(config)
        player_lines = board.config.player_lines
        if len(rows) != row_count(player_lines):
            raise ValueError(f"Expected {row_count(player_lines)} rows, got {len(rows)}")
        for index, row in enumerate(rows):
            expected = row_length(player_lines, index)
            if len(row) != expected:
                raise ValueError(f"Row {index} should have {expected} cells, got {len(row)}")
        board.rows = [list(row) for row in rows]
        return board

    @property
    def player_lines(self) -> int:
        return self.config.player_lines

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board.config = self.config
        new_board.rows = [list(row) for row in self.rows]
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.rows == other.rows and self.config == other.config

    def _index_pair(self, point: Point) -> Optional[IndexPair]:
        return to_index_pair(self.player_lines, point)

    def get_piece(self, point: Point) -> Optional[Piece]:
        """Get the piece at a point, or None when the point is off the board."""
        pair = self._index_pair(point)
        if pair is None:
            return None
        return self.rows[pair.row][pair.column]

    def place_piece(self, point: Point, piece: Piece) -> bool:
        """Put a piece on a cell, ignoring the movement rules."""
        pair = self._index_pair(point)
        if pair is None:
            return False
        self.rows[pair.row][pair.column] = piece
        return True

    def iter_points(self) -> Iterator[Point]:
        return iter_points(self.player_lines)

    def move_piece(self, source: Point, target: Point, player: Piece) -> None:
        """Move one of ``player``'s pieces a single step or jump.

        Raises a GameError subclass when the move is not allowed; the board is
        only changed on success.
        """
        MoveValidator.check_move(self, source, target, player)

        source_pair = self._index_pair(source)
        target_pair = self._index_pair(target)
        self.rows[source_pair.row][source_pair.column] = Piece.EMPTY
        self.rows[target_pair.row][target_pair.column] = player
        logger.debug(f"{player.name} moved {source}->{target}")

    def try_move_piece(self, source: Point, target: Point, player: Piece) -> Optional[ErrorKind]:
        """Check a move on a copy of the board; None means it is legal."""
        test_board = self.copy()
        try:
            test_board.move_piece(source, target, player)
        except GameError as e:
            return e.kind
        return None

    def take_turn(self, points: Sequence[Point], player: Piece) -> None:
        """Play a whole turn: one move, or a chain of jumps through ``points``.

        Segments are applied in order. If a later segment is rejected the
        earlier ones stay applied; probe with ``try_turn`` first when that
        matters.
        """
        points = list(points)
        MoveValidator.check_turn_shape(points)
        for source, target in zip(points, points[1:]):
            self.move_piece(source, target, player)

    def try_turn(self, points: Sequence[Point], player: Piece) -> Optional[ErrorKind]:
        """Check a turn on a copy of the board; None means it is legal."""
        test_board = self.copy()
        try:
            test_board.take_turn(points, player)
        except GameError as e:
            return e.kind
        return None

    def has_player_won(self, piece: Piece) -> bool:
        return win.has_player_won(self.rows, self.player_lines, piece)

    def serialize(self) -> List[str]:
        """One text line per row, centered on the board's vertical axis."""
        width = center_column(self.player_lines)
        return [
            " " * (width - len(row)) + "".join(f" {self.config.symbol(piece)}" for piece in row)
            for row in self.rows
        ]

    def draw(self) -> None:
        for line in self.serialize():
            print(line)

    def to_numpy_array(self) -> np.ndarray:
        """Convert board state to a padded array of piece codes, -1 off the board."""
        width = 2 * (center_column(self.player_lines) - 1) + 1
        state = np.full((len(self.rows), width), -1, dtype=np.int8)

        for point in self.iter_points():
            state[point.row - 1, point.column - 1] = self.get_piece(point).value

        return state

    def __str__(self) -> str:
        """Return string representation of the board."""
        return "\n".join(self.serialize())
