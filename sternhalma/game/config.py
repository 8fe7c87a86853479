"""Board configuration for Sternhalma."""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Union
import logging

from .constants import Piece, DEFAULT_PLAYER_LINES, DEFAULT_SYMBOLS

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a board configuration is invalid."""
    pass


def _resolve_symbols(symbols: Mapping[Union[Piece, str], str]) -> Dict[Piece, str]:
    if not isinstance(symbols, Mapping):
        raise ConfigurationError(f"symbols must map piece names to characters, got {symbols!r}")
    resolved = dict(DEFAULT_SYMBOLS)
    for key, symbol in symbols.items():
        try:
            piece = key if isinstance(key, Piece) else Piece.from_string(key)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ConfigurationError(
                f"Symbol for {piece.name} must be a single character, got {symbol!r}")
        resolved[piece] = symbol
    return resolved


@dataclass
class BoardConfig:
    """Size of the board and how each piece is drawn.

    ``player_lines`` is the depth of each of the six triangles. Symbols not
    given fall back to the defaults; keys may be pieces or piece names.
    """
    player_lines: int = DEFAULT_PLAYER_LINES
    symbols: Dict[Piece, str] = field(default_factory=lambda: dict(DEFAULT_SYMBOLS))

    def __post_init__(self):
        if isinstance(self.player_lines, bool) or not isinstance(self.player_lines, int):
            raise ConfigurationError(f"player_lines must be an integer, got {self.player_lines!r}")
        if self.player_lines < 1:
            raise ConfigurationError(f"player_lines must be positive, got {self.player_lines}")
        self.symbols = _resolve_symbols(self.symbols)
        logger.debug(f"Board config: {self.player_lines} player lines, symbols {self.symbols}")

    def symbol(self, piece: Piece) -> str:
        return self.symbols[piece]
