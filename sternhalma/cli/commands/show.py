"""
Show command for printing a fresh board.
"""

import click
from typing import Optional

from ..utils import build_board


@click.command(name='show')
@click.option('--player-lines', '-n', type=int,
              help='Depth of each player triangle (default from config)')
@click.pass_context
def show(ctx, player_lines: Optional[int]):
    """
    Print the starting board.

    \b
    Examples:
        sternhalma show
        sternhalma show --player-lines 2
    """
    board = build_board(ctx.obj['config'], player_lines)
    click.echo(str(board))
