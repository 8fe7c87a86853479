"""Move validation for Sternhalma."""

from typing import List, Sequence, TYPE_CHECKING
import logging

from .constants import Point, Piece, MAX_MOVE_DISTANCE, JUMP_DISTANCE
from .types import (
    WrongPlayerError,
    OutOfBoundsError,
    NoRouteError,
    OccupiedTargetError,
    ExhaustedError,
)

if TYPE_CHECKING:
    from .board import Board

# Setup logger
logger = logging.getLogger(__name__)


class MoveValidator:
    """Checks single moves and whole turns against the board's cells.

    A move is either a step to a neighbouring cell (distance 1) or a jump over
    an occupied cell onto the empty cell behind it (distance 2). A turn is
    one move, or a chain of two or more jumps.
    """

    @staticmethod
    def distance(source: Point, target: Point) -> int:
        """Rows crossed, or half the column gap when both points share a row."""
        if source.row == target.row:
            return abs(source.column - target.column) // 2
        return abs(source.row - target.row)

    @staticmethod
    def jump_midpoint(source: Point, target: Point) -> Point:
        """The cell a distance-2 move has to jump over.

        Only meaningful for points on one of the six lines of the board; the
        arithmetic is not checked against the direction of the move.
        """
        return Point(max(source.row, target.row) - 1,
                     max(source.column, target.column) - 1)

    @staticmethod
    def check_move(board: 'Board', source: Point, target: Point, player: Piece) -> None:
        """Raise a GameError when ``player`` cannot move from source to target.

        EMPTY is never an acting player: passing it raises WrongPlayerError
        even though an empty source cell would otherwise match it.
        """
        logger.debug(f"Validating move {source}->{target} for {player.name}")

        if source == target:
            raise NoRouteError("Source and target are the same point")

        distance = MoveValidator.distance(source, target)
        if distance > MAX_MOVE_DISTANCE:
            raise NoRouteError(f"Target is {distance} steps away")

        source_piece = board.get_piece(source)
        target_piece = board.get_piece(target)
        if source_piece is None:
            raise OutOfBoundsError(f"Source {source} is not on the board")
        if target_piece is None:
            raise OutOfBoundsError(f"Target {target} is not on the board")

        if not player.is_player or source_piece != player:
            raise WrongPlayerError(f"{source} holds {source_piece.name}, not {player.name}")

        if target_piece != Piece.EMPTY:
            raise OccupiedTargetError(f"{target} is occupied by {target_piece.name}")

        if distance == JUMP_DISTANCE:
            midpoint = MoveValidator.jump_midpoint(source, target)
            middle_piece = board.get_piece(midpoint)
            logger.debug(f"Jump over {midpoint}, found {middle_piece}")
            if middle_piece is None or middle_piece == Piece.EMPTY:
                raise NoRouteError(f"Nothing to jump over at {midpoint}")

    @staticmethod
    def segment_distances(points: Sequence[Point]) -> List[int]:
        """Distances of each consecutive pair of points."""
        return [MoveValidator.distance(a, b) for a, b in zip(points, points[1:])]

    @staticmethod
    def check_turn_shape(points: Sequence[Point]) -> None:
        """Raise a GameError unless the points form one move or a jump chain."""
        if len(points) < 2:
            raise NoRouteError("A turn needs a source and at least one target")

        distances = MoveValidator.segment_distances(points)
        logger.debug(f"Turn segment distances: {distances}")
        if len(distances) > 1 and any(d != JUMP_DISTANCE for d in distances):
            raise ExhaustedError(f"Only jumps can be chained, got distances {distances}")
