"""
Play command for running a scripted game.
"""

import click
from typing import Optional

from ..utils import build_board, echo_board, handle_error, quiet_echo, styled
from ...game.game import Game, TurnScript, DEMO_PLAYERS, DEMO_TURNS
from ...game.types import GameError


def load_script(path: Optional[str], verbose: bool) -> TurnScript:
    """The turn script at ``path``, or the built-in opening."""
    if path is None:
        return TurnScript(list(DEMO_PLAYERS), [list(turn) for turn in DEMO_TURNS])
    try:
        return TurnScript.load(path)
    except (ValueError, IOError) as e:
        handle_error(e, verbose, context=f"Loading turn script {path}")


@click.command(name='play')
@click.option('--script', '-s', 'script_path', type=click.Path(exists=True, dir_okay=False),
              help='JSON file with "players" and "turns" (default: built-in opening)')
@click.option('--player-lines', '-n', type=int,
              help='Depth of each player triangle (default from config)')
@click.pass_context
def play(ctx, script_path: Optional[str], player_lines: Optional[int]):
    """
    Play a scripted game, printing the board after every turn.

    Players take the scripted turns in rotation. A player who fills the
    opposite triangle finishes and leaves the rotation.

    \b
    Examples:
        sternhalma play
        sternhalma play --script opening.json
    """
    config = ctx.obj['config']
    verbose = config.get('verbose', False)
    script = load_script(script_path, verbose)
    board = build_board(config, player_lines)
    echo_board(board)

    def on_turn(piece, turn, current):
        quiet_echo(f"\nNext turn by {piece.name}\n")
        echo_board(current)
        if current.has_player_won(piece):
            click.echo(styled(f"\nPlayer {piece.name} has finished in {piece.opposite.name}'s triangle", 'green'))

    game = Game(board, script.players)
    try:
        result = game.play(script.turns, on_turn=on_turn)
    except GameError as e:
        handle_error(e, verbose, context=f"Turn {game.result.turns_played + 1} of the script")

    click.echo("\nThe game is over!")
    click.echo(f"It lasted {result.rounds} rounds ({result.turns_played} turns)")
    if result.finished:
        click.echo("Finished: " + ", ".join(piece.name for piece in result.finished))
