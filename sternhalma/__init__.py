"""Sternhalma: a star-shaped Chinese checkers board and move engine."""

__version__ = "0.1.0"
