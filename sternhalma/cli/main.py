"""
Main CLI entry point for Sternhalma.

This module provides the main command-line interface for the sternhalma tool.
"""

import logging
import os
import click
from typing import Optional

from .. import __version__
from .config import CLIConfig, set_config
from .commands import show, play, check


def setup_logging(verbose: bool = False, quiet: bool = False):
    """Setup logging configuration."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group(name='sternhalma', invoke_without_command=True)
@click.option('--config', '-c', 'config_file',
              type=click.Path(dir_okay=False),
              help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True,
              help='Suppress non-essential output')
@click.option('--no-color', is_flag=True,
              help='Disable colored output')
@click.version_option(version=__version__, prog_name='sternhalma')
@click.pass_context
def cli(ctx, config_file: Optional[str], verbose: bool, quiet: bool, no_color: bool):
    """
    Sternhalma board CLI

    Prints star-shaped Chinese checkers boards, plays scripted games and
    checks whether turns are legal. Points are written as ROW,COLUMN in the
    padded coordinates of the board, e.g. 4,10.

    \b
    Examples:
        sternhalma show --player-lines 2
        sternhalma play
        sternhalma check head 4,10 5,11
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    cli_config = CLIConfig(config_file=config_file)

    # Override config with command line options
    if verbose:
        cli_config.set('verbose', True)
    if quiet:
        cli_config.set('quiet', True)
    if no_color:
        cli_config.set('color_output', False)

    setup_logging(cli_config.get('verbose', False), cli_config.get('quiet', False))
    set_config(cli_config)

    ctx.ensure_object(dict)
    ctx.obj['config'] = cli_config


# Register commands
cli.add_command(show.show)
cli.add_command(play.play)
cli.add_command(check.check)


@cli.command()
@click.pass_context
def config(ctx):
    """Show current configuration."""
    config_obj = ctx.obj['config']

    click.echo("Current configuration:")
    click.echo("=" * 50)

    for key, value in config_obj.to_dict().items():
        click.echo(f"{key:<25}: {value}")

    if config_obj._config_file and os.path.exists(config_obj._config_file):
        click.echo(f"\nLoaded from: {config_obj._config_file}")
    else:
        click.echo("\nUsing default configuration (no config file found)")


if __name__ == '__main__':
    cli()
