"""Basic type definitions for Sternhalma game errors."""

from enum import Enum
from typing import Dict, Optional, Type


class ErrorKind(Enum):
    WRONG_PLAYER = "WRONG_PLAYER"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    NO_ROUTE = "NO_ROUTE"
    OCCUPIED_TARGET = "OCCUPIED_TARGET"
    EXHAUSTED = "EXHAUSTED"


class GameError(Exception):
    """Base exception for rejected moves and turns."""
    kind: ErrorKind

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.__doc__)

    @staticmethod
    def for_kind(kind: ErrorKind, message: Optional[str] = None) -> 'GameError':
        """Build the exception matching an error kind."""
        return _ERRORS_BY_KIND[kind](message)


class WrongPlayerError(GameError):
    """Tried to move a piece of another player."""
    kind = ErrorKind.WRONG_PLAYER


class OutOfBoundsError(GameError):
    """Point does not exist on the board."""
    kind = ErrorKind.OUT_OF_BOUNDS


class NoRouteError(GameError):
    """Cannot get from the source point to the target point."""
    kind = ErrorKind.NO_ROUTE


class OccupiedTargetError(GameError):
    """Target point is occupied by another piece."""
    kind = ErrorKind.OCCUPIED_TARGET


class ExhaustedError(GameError):
    """Attempt to mix single step movement and jump chains in one turn."""
    kind = ErrorKind.EXHAUSTED


_ERRORS_BY_KIND: Dict[ErrorKind, Type[GameError]] = {
    cls.kind: cls
    for cls in (WrongPlayerError, OutOfBoundsError, NoRouteError,
                OccupiedTargetError, ExhaustedError)
}
