"""Test the sternhalma command line."""

import json
import unittest
from click.testing import CliRunner
from sternhalma.cli.main import cli


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def invoke(self, *args):
        # A config path that does not exist keeps user config files out of the tests
        return self.runner.invoke(cli, ['--config', 'missing.json', *args])

    def test_help_without_command(self):
        result = self.runner.invoke(cli, [])
        self.assertEqual(result.exit_code, 0)
        self.assertIn('Usage', result.output)

    def test_show_small_board(self):
        with self.runner.isolated_filesystem():
            result = self.invoke('show', '--player-lines', '1')
        self.assertEqual(result.exit_code, 0, result.output)
        for line in ["    1", " 3 . . 5", "  . . .", " 6 . . 4", "    2"]:
            self.assertIn(line + "\n", result.output)

    def test_show_rejects_bad_size(self):
        with self.runner.isolated_filesystem():
            result = self.invoke('show', '--player-lines', '0')
        self.assertEqual(result.exit_code, 1)
        self.assertIn('player_lines must be positive', result.output)

    def test_play_demo(self):
        with self.runner.isolated_filesystem():
            result = self.invoke('play')
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Next turn by HEAD', result.output)
        self.assertIn('Next turn by TAIL', result.output)
        self.assertIn('The game is over!', result.output)
        self.assertIn('It lasted 2 rounds (3 turns)', result.output)

    def test_play_illegal_script(self):
        with self.runner.isolated_filesystem():
            with open('bad.json', 'w') as f:
                json.dump({'players': ['head', 'tail'],
                           'turns': [[[4, 10], [5, 11]], [[1, 13], [7, 13]]]}, f)
            result = self.invoke('play', '--script', 'bad.json')
        self.assertEqual(result.exit_code, 1)
        self.assertIn('Turn 2 of the script', result.output)

    def test_play_small_game_until_head_finishes(self):
        turns = [[[1, 4], [2, 5]], [[5, 4], [4, 5]], [[2, 5], [3, 4]], [[4, 5], [3, 6]],
                 [[3, 4], [4, 3]], [[3, 6], [2, 5]], [[4, 3], [5, 4]]]
        with self.runner.isolated_filesystem():
            with open('small.json', 'w') as f:
                json.dump({'players': ['head', 'tail'], 'turns': turns}, f)
            result = self.invoke('play', '--script', 'small.json', '--player-lines', '1')
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Player HEAD has finished in TAIL's triangle", result.output)
        self.assertIn('Finished: HEAD', result.output)

    def test_symbols_that_are_not_an_object(self):
        with self.runner.isolated_filesystem():
            with open('symbols.json', 'w') as f:
                json.dump({'symbols': 'abc'}, f)
            result = self.runner.invoke(cli, ['--config', 'symbols.json', 'show'])
        self.assertEqual(result.exit_code, 1)
        self.assertIsInstance(result.exception, SystemExit)
        self.assertIn('Error: symbols must map piece names to characters', result.output)

    def test_check_legal_turn(self):
        with self.runner.isolated_filesystem():
            result = self.invoke('check', 'head', '4,10', '5,11')
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Legal: HEAD (4,10) (5,11)', result.output)

    def test_check_exhausted_turn(self):
        with self.runner.isolated_filesystem():
            result = self.invoke('check', 'head', '4,10', '5,11', '6,12')
        self.assertEqual(result.exit_code, 1)
        self.assertIn('Illegal (EXHAUSTED)', result.output)
        self.assertIn('Attempt to mix single step movement and jump chains', result.output)

    def test_check_after_script(self):
        with self.runner.isolated_filesystem():
            with open('opening.json', 'w') as f:
                json.dump({'players': ['head', 'tail'], 'turns': [[[4, 10], [5, 11]]]}, f)
            legal = self.invoke('check', 'tail', '14,16', '13,15', '--script', 'opening.json')
            moved = self.invoke('check', 'head', '4,10', '5,11', '--script', 'opening.json')
        self.assertEqual(legal.exit_code, 0, legal.output)
        self.assertEqual(moved.exit_code, 1)
        self.assertIn('Illegal (WRONG_PLAYER)', moved.output)

    def test_check_bad_arguments(self):
        with self.runner.isolated_filesystem():
            empty = self.invoke('check', 'empty', '4,10', '5,11')
            point = self.invoke('check', 'head', '4;10', '5,11')
        self.assertEqual(empty.exit_code, 2)
        self.assertEqual(point.exit_code, 2)

    def test_config_command(self):
        with self.runner.isolated_filesystem():
            result = self.invoke('config')
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('player_lines', result.output)


if __name__ == '__main__':
    unittest.main()
