"""
Command modules for the Sternhalma CLI.
"""

from . import show
from . import play
from . import check

__all__ = ['show', 'play', 'check']
