"""Scripted turn sequencing for Sternhalma games."""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence
import json
import logging

from .constants import Piece, Point
from .board import Board

logger = logging.getLogger(__name__)

# A short opening on the standard board: a Head step, a Tail step, then a
# double jump by Head.
DEMO_PLAYERS = (Piece.HEAD, Piece.TAIL)
DEMO_TURNS = (
    (Point(4, 10), Point(5, 11)),
    (Point(14, 16), Point(13, 15)),
    (Point(3, 11), Point(5, 13), Point(5, 9)),
)


@dataclass
class GameResult:
    """Summary of a finished game."""
    rounds: int = 0
    turns_played: int = 0
    finished: List[Piece] = field(default_factory=list)


@dataclass
class TurnScript:
    """Players taking part and the turns they play, in rotation."""
    players: List[Piece]
    turns: List[List[Point]]

    @staticmethod
    def from_dict(data: dict) -> 'TurnScript':
        try:
            players = [Piece.from_string(name) for name in data['players']]
            turns = [[Point(int(row), int(column)) for row, column in turn]
                     for turn in data['turns']]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed turn script: {e}") from e
        if not players or any(not player.is_player for player in players):
            raise ValueError("A turn script needs at least one player piece")
        return TurnScript(players, turns)

    @staticmethod
    def load(path: str) -> 'TurnScript':
        """Load a script like ``{"players": ["head"], "turns": [[[4, 10], [5, 11]]]}``."""
        with open(path, 'r') as f:
            data = json.load(f)
        logger.debug(f"Loaded turn script from {path}")
        return TurnScript.from_dict(data)


class Game:
    """Plays a fixed sequence of turns, rotating through the players."""

    def __init__(self, board: Board, pieces: Sequence[Piece]):
        self.board = board
        self.pieces = list(pieces)
        self.result = GameResult()

    def play(self, turns: Sequence[Sequence[Point]],
             on_turn: Optional[Callable[[Piece, Sequence[Point], Board], None]] = None) -> GameResult:
        """Play ``turns`` in order until they run out or one player is left.

        A rejected turn raises its GameError and ends the game.
        """
        result = self.result = GameResult()
        playing = list(self.pieces)

        while len(playing) > 1 and result.turns_played < len(turns):
            result.rounds += 1
            for piece in list(playing):
                if result.turns_played >= len(turns):
                    break

                turn = turns[result.turns_played]
                logger.info(f"Next turn by {piece.name}: {' '.join(str(p) for p in turn)}")
                self.board.take_turn(turn, piece)
                result.turns_played += 1
                if on_turn is not None:
                    on_turn(piece, turn, self.board)

                if self.board.has_player_won(piece):
                    logger.info(f"Player {piece.name} has finished")
                    playing.remove(piece)
                    result.finished.append(piece)
                    if len(playing) < 2:
                        break

        logger.info(f"The game is over after {result.rounds} rounds")
        return result
