"""
Check command for probing whether a turn is legal.
"""

import click
from typing import Optional, Tuple

from .play import load_script
from ..utils import build_board, echo_board, handle_error, parse_piece, parse_points, styled
from ...game.game import Game
from ...game.types import GameError


@click.command(name='check')
@click.argument('player')
@click.argument('points', nargs=-1, required=True)
@click.option('--script', '-s', 'script_path', type=click.Path(exists=True, dir_okay=False),
              help='Replay this JSON turn script before checking')
@click.option('--player-lines', '-n', type=int,
              help='Depth of each player triangle (default from config)')
@click.option('--show-board', is_flag=True,
              help='Print the board the turn is checked against')
@click.pass_context
def check(ctx, player: str, points: Tuple[str, ...], script_path: Optional[str],
          player_lines: Optional[int], show_board: bool):
    """
    Report whether PLAYER could play the turn through POINTS.

    The board is never changed. Exits with status 1 when the turn is illegal.

    \b
    Examples:
        sternhalma check head 4,10 5,11
        sternhalma check head 3,11 5,13 5,9 --script opening.json
    """
    config = ctx.obj['config']
    verbose = config.get('verbose', False)
    piece = parse_piece(player)
    turn = parse_points(points)
    board = build_board(config, player_lines)

    if script_path is not None:
        script = load_script(script_path, verbose)
        try:
            Game(board, script.players).play(script.turns)
        except GameError as e:
            handle_error(e, verbose, context=f"Replaying {script_path}")

    if show_board:
        echo_board(board)

    turn_text = " ".join(str(point) for point in turn)
    error = board.try_turn(turn, piece)
    if error is None:
        click.echo(styled(f"Legal: {piece.name} {turn_text}", 'green'))
        return

    click.echo(styled(f"Illegal ({error.name}): {piece.name} {turn_text}", 'red'))
    click.echo(f"  {GameError.for_kind(error)}")
    ctx.exit(1)
