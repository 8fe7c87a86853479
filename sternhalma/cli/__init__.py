"""
CLI interface for Sternhalma.

Provides command-line tools for:
- Printing the starting board
- Playing scripted games
- Checking whether a turn is legal
"""

__all__ = ['cli']


# Lazy import to avoid circular dependencies
def __getattr__(name):
    if name == 'cli':
        from .main import cli
        return cli
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
