"""Test scripted games and turn scripts."""

import json
import os
import tempfile
import unittest
from sternhalma.game.board import Board
from sternhalma.game.config import BoardConfig
from sternhalma.game.constants import Piece, Point
from sternhalma.game.game import Game, TurnScript, DEMO_PLAYERS, DEMO_TURNS
from sternhalma.game.types import WrongPlayerError


class TestGame(unittest.TestCase):
    def test_demo_game(self):
        board = Board()
        played = []
        game = Game(board, DEMO_PLAYERS)
        result = game.play(DEMO_TURNS, on_turn=lambda piece, turn, current: played.append(piece))

        self.assertEqual(played, [Piece.HEAD, Piece.TAIL, Piece.HEAD])
        self.assertEqual(result.turns_played, 3)
        self.assertEqual(result.rounds, 2)
        self.assertEqual(result.finished, [])

        self.assertEqual(board.get_piece(Point(4, 10)), Piece.EMPTY)
        self.assertEqual(board.get_piece(Point(5, 11)), Piece.HEAD)
        self.assertEqual(board.get_piece(Point(14, 16)), Piece.EMPTY)
        self.assertEqual(board.get_piece(Point(13, 15)), Piece.TAIL)
        self.assertEqual(board.get_piece(Point(3, 11)), Piece.EMPTY)
        self.assertEqual(board.get_piece(Point(5, 13)), Piece.EMPTY)
        self.assertEqual(board.get_piece(Point(5, 9)), Piece.HEAD)

    def test_illegal_turn_ends_the_game(self):
        game = Game(Board(), [Piece.HEAD, Piece.TAIL])
        turns = [
            [Point(4, 10), Point(5, 11)],
            [Point(4, 10), Point(5, 11)],
        ]
        with self.assertRaises(WrongPlayerError):
            game.play(turns)
        self.assertEqual(game.result.turns_played, 1)

    def test_game_stops_when_one_player_is_left(self):
        board = Board(BoardConfig(player_lines=1))
        turns = [
            [Point(1, 4), Point(2, 5)],  # Head
            [Point(5, 4), Point(4, 5)],  # Tail
            [Point(2, 5), Point(3, 4)],  # Head
            [Point(4, 5), Point(3, 6)],  # Tail
            [Point(3, 4), Point(4, 3)],  # Head
            [Point(3, 6), Point(2, 5)],  # Tail
            [Point(4, 3), Point(5, 4)],  # Head reaches the bottom
            [Point(2, 5), Point(1, 4)],  # never played
        ]
        result = Game(board, [Piece.HEAD, Piece.TAIL]).play(turns)

        self.assertEqual(result.finished, [Piece.HEAD])
        self.assertEqual(result.turns_played, 7)
        self.assertEqual(result.rounds, 4)
        self.assertTrue(board.has_player_won(Piece.HEAD))
        self.assertEqual(board.get_piece(Point(2, 5)), Piece.TAIL)

    def test_single_player_does_not_play(self):
        result = Game(Board(), [Piece.HEAD]).play(DEMO_TURNS)
        self.assertEqual(result.turns_played, 0)
        self.assertEqual(result.rounds, 0)


class TestTurnScript(unittest.TestCase):
    def test_from_dict(self):
        script = TurnScript.from_dict({
            'players': ['head', 'Tail'],
            'turns': [[[4, 10], [5, 11]], [[14, 16], [13, 15]]],
        })
        self.assertEqual(script.players, [Piece.HEAD, Piece.TAIL])
        self.assertEqual(script.turns[1], [Point(14, 16), Point(13, 15)])

    def test_malformed_scripts(self):
        with self.assertRaises(ValueError):
            TurnScript.from_dict({'players': ['head']})
        with self.assertRaises(ValueError):
            TurnScript.from_dict({'players': ['empty'], 'turns': []})
        with self.assertRaises(ValueError):
            TurnScript.from_dict({'players': ['nobody'], 'turns': []})
        with self.assertRaises(ValueError):
            TurnScript.from_dict({'players': ['head'], 'turns': [[[4, 10, 1]]]})

    def test_load(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'turns.json')
            with open(path, 'w') as f:
                json.dump({'players': ['left-hand', 'right_foot'], 'turns': [[[6, 6], [7, 7]]]}, f)
            script = TurnScript.load(path)
        self.assertEqual(script.players, [Piece.LEFT_HAND, Piece.RIGHT_FOOT])
        self.assertEqual(script.turns, [[Point(6, 6), Point(7, 7)]])


if __name__ == '__main__':
    unittest.main()
