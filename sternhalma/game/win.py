"""Win detection for Sternhalma."""

from typing import Iterator, List, Sequence
import logging

from .constants import Piece, IndexPair, HOME_ZONES
from .coordinates import row_length

# Setup logger
logger = logging.getLogger(__name__)


def zone_cells(player_lines: int, piece: Piece) -> Iterator[IndexPair]:
    """Cell indices of the triangle ``piece`` has to fill to win.

    Yields nothing for EMPTY.
    """
    zone = HOME_ZONES[piece]
    if zone is None:
        return

    start = zone.start_row(player_lines)
    for n in range(player_lines):
        row = start + n
        width = n + 1 if zone.increasing else player_lines - n
        length = row_length(player_lines, row)
        columns = range(length - width, length) if zone.reversed else range(width)
        for column in columns:
            yield IndexPair(row, column)


def has_player_won(rows: Sequence[List[Piece]], player_lines: int, piece: Piece) -> bool:
    """True when every cell of the player's winning triangle holds ``piece``."""
    if not piece.is_player:
        return False

    for cell in zone_cells(player_lines, piece):
        if rows[cell.row][cell.column] != piece:
            logger.debug(f"{piece.name} has not won: cell {cell} holds {rows[cell.row][cell.column].name}")
            return False

    logger.debug(f"{piece.name} has filled the {piece.opposite.name} starting triangle")
    return True
