"""Game logic package for Sternhalma."""

from .constants import Piece, Point, PLAYERS, DEFAULT_PLAYER_LINES, DEFAULT_SYMBOLS
from .types import (
    ErrorKind,
    GameError,
    WrongPlayerError,
    OutOfBoundsError,
    NoRouteError,
    OccupiedTargetError,
    ExhaustedError,
)
from .config import BoardConfig, ConfigurationError
from .board import Board
from .moves import MoveValidator
from .game import Game, GameResult, TurnScript

__all__ = [
    'Piece',
    'Point',
    'PLAYERS',
    'DEFAULT_PLAYER_LINES',
    'DEFAULT_SYMBOLS',
    'ErrorKind',
    'GameError',
    'WrongPlayerError',
    'OutOfBoundsError',
    'NoRouteError',
    'OccupiedTargetError',
    'ExhaustedError',
    'BoardConfig',
    'ConfigurationError',
    'Board',
    'MoveValidator',
    'Game',
    'GameResult',
    'TurnScript',
]
