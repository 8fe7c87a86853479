"""
Utility functions for the Sternhalma CLI.
"""

from typing import List, Optional, Sequence
import click

from .config import get_config
from ..game.board import Board
from ..game.config import BoardConfig, ConfigurationError
from ..game.constants import Piece, Point


def parse_points(values: Sequence[str]) -> List[Point]:
    """Parse 'row,column' arguments into points."""
    try:
        return [Point.from_string(value) for value in values]
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='POINTS')


def parse_piece(value: str) -> Piece:
    try:
        piece = Piece.from_string(value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='PLAYER')
    if not piece.is_player:
        raise click.BadParameter("EMPTY is not a player", param_hint='PLAYER')
    return piece


def echo_board(board: Board) -> None:
    """Print a board unless in quiet mode."""
    quiet_echo(str(board))


def handle_error(error: Exception, verbose: bool = False, context: Optional[str] = None) -> None:
    """Display an error and exit with status 1."""
    click.echo(click.style(f"Error: {error}", fg='red'), err=True)

    if context:
        click.echo(f"  Context: {context}", err=True)

    if verbose:
        click.echo(click.style("\nDetailed traceback:", fg='cyan'), err=True)
        import traceback
        click.echo(traceback.format_exc(), err=True)

    raise SystemExit(1)


def styled(message: str, color: str) -> str:
    if not get_config().get('color_output', True):
        return message
    return click.style(message, fg=color)


def quiet_echo(message: str, **kwargs):
    """Echo message unless in quiet mode."""
    config = get_config()
    if not config.get('quiet', False):
        click.echo(message, **kwargs)


def build_board(config, player_lines: Optional[int] = None) -> Board:
    """Create a starting board from the CLI config, optionally resized."""
    try:
        board_config = config.board_config()
        if player_lines is not None:
            board_config = BoardConfig(player_lines=player_lines, symbols=board_config.symbols)
    except ConfigurationError as e:
        handle_error(e, config.get('verbose', False))
    return Board(board_config)
