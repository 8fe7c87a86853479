"""Mapping between padded board points and raw cell indices."""

from typing import Iterator, List, Optional
import logging

from .constants import Point, IndexPair

# Setup logger
logger = logging.getLogger(__name__)


def row_count(player_lines: int) -> int:
    """Number of cell rows on a board: four triangles deep plus the equator."""
    return 4 * player_lines + 1


def center_column(player_lines: int) -> int:
    """Padded column of the board's vertical axis."""
    return 3 * player_lines + 1


def row_length(player_lines: int, row: int) -> int:
    """Number of cells in the 0-indexed ``row``.

    Rows are symmetric around the equator (row ``2N``), so the lower half
    reuses the widths of the upper half.
    """
    if not 0 <= row < row_count(player_lines):
        raise IndexError(f"Row {row} is not on a board with {player_lines} player lines")
    if row > 2 * player_lines:
        row = 4 * player_lines - row
    if row < player_lines:
        return row + 1
    return 4 * player_lines + 1 - row


def valid_columns(player_lines: int, row: int) -> List[int]:
    """Padded columns of the 0-indexed ``row``, centered, with spacing 2."""
    offset = row_length(player_lines, row) - 1
    center = center_column(player_lines)
    return list(range(center - offset, center + offset + 1, 2))


def to_index_pair(player_lines: int, point: Point) -> Optional[IndexPair]:
    """Map a padded point to raw cell indices, or None when it is off the board."""
    row = point.row - 1
    if not 0 <= row < row_count(player_lines):
        logger.debug(f"Row of {point} is outside the board")
        return None

    columns = valid_columns(player_lines, row)
    if point.column not in columns:
        logger.debug(f"Column of {point} is not one of {columns}")
        return None
    return IndexPair(row, columns.index(point.column))


def iter_points(player_lines: int) -> Iterator[Point]:
    """Every valid padded point of a board, row by row."""
    for row in range(row_count(player_lines)):
        for column in valid_columns(player_lines, row):
            yield Point(row + 1, column)
