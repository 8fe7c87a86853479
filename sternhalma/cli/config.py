"""
Configuration management for the Sternhalma CLI.

Settings come from built-in defaults, then a JSON file, then environment
variables. Command-line flags are applied on top by the CLI entry point.
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from ..game.config import BoardConfig
from ..game.constants import DEFAULT_PLAYER_LINES

logger = logging.getLogger(__name__)


class CLIConfig:
    """Manages CLI configuration settings."""

    DEFAULT_CONFIG = {
        # Board settings
        'player_lines': DEFAULT_PLAYER_LINES,
        'symbols': {},

        # Output formatting
        'color_output': True,

        # CLI behavior
        'verbose': False,
        'quiet': False,
    }

    ENV_MAPPINGS = {
        'STERNHALMA_PLAYER_LINES': 'player_lines',
        'STERNHALMA_COLOR': 'color_output',
        'STERNHALMA_VERBOSE': 'verbose',
        'STERNHALMA_QUIET': 'quiet',
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default locations.
        """
        self._config = self.DEFAULT_CONFIG.copy()
        self._config['symbols'] = {}
        self._config_file = config_file or self._find_config_file()
        self._load_config()

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations."""
        config_locations = [
            Path.cwd() / '.sternhalma.json',
            Path.home() / '.sternhalma.json',
            Path.home() / '.config' / 'sternhalma.json',
        ]

        for config_path in config_locations:
            if config_path.exists() and config_path.is_file():
                logger.debug(f"Found config file: {config_path}")
                return str(config_path)

        return None

    def _load_config(self):
        """Load configuration from file and environment variables."""
        if self._config_file and os.path.exists(self._config_file):
            try:
                with open(self._config_file, 'r') as f:
                    file_config = json.load(f)
                if not isinstance(file_config, dict):
                    raise ValueError("top level must be an object")
                self._config.update(file_config)
                logger.debug(f"Loaded config from {self._config_file}")
            except (ValueError, IOError) as e:
                logger.warning(f"Failed to load config file {self._config_file}: {e}")

        self._load_env_config()

    def _load_env_config(self):
        """Load configuration from environment variables."""
        for env_var, config_key in self.ENV_MAPPINGS.items():
            env_value = os.environ.get(env_var)
            if env_value is None:
                continue
            if config_key in ['color_output', 'verbose', 'quiet']:
                self._config[config_key] = env_value.lower() in ('true', '1', 'yes', 'on')
            elif config_key == 'player_lines':
                try:
                    self._config[config_key] = int(env_value)
                except ValueError:
                    logger.warning(f"Invalid integer value for {config_key}: {env_value}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config[key] = value

    def board_config(self) -> BoardConfig:
        """Board settings as a BoardConfig; raises ConfigurationError when invalid."""
        return BoardConfig(player_lines=self._config['player_lines'],
                           symbols=self._config.get('symbols') or {})

    def to_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary."""
        return self._config.copy()

    def __repr__(self):
        return f"CLIConfig(config_file={self._config_file})"


# Global configuration instance
_config = None


def get_config() -> CLIConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = CLIConfig()
    return _config


def set_config(config: CLIConfig):
    """Set global configuration instance."""
    global _config
    _config = config
