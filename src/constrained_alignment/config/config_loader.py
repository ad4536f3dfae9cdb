"""
Configuration loader for constrained alignment.
"""

import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from ..core.exceptions import ConfigError

logger = logging.getLogger('constrained_alignment.config')

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"


def _get_default_config() -> Dict[str, Any]:
    """Built-in configuration used when no YAML file can be found."""
    return {
        'alignment': {
            'gap_penalty': -1,
            'placeholder': '*',
            'wildcard': '*',
            'match_score': 1,
            'mismatch_score': -1,
            'wildcard_score': 0,
        },
        'limits': {
            'max_matrix_cells': 50_000_000,
            'max_merge_rounds': 10,
        },
        'debug': {
            'log_level': 'INFO',
        },
        'io': {
            'logs_dir': None,
        },
    }


def _deep_update(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    with open(config_path, 'r') as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing config file {config_path}: {e}") from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError(f"Invalid YAML format in {config_path}")
    return config


def load_config(config_path: Optional[str] = None,
                overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML on top of the built-in defaults.

    Fails if an explicitly given file does not exist.

    Args:
        config_path: YAML file; the packaged default_config.yaml when omitted
        overrides: Nested dictionary applied last (e.g. from CLI flags)

    Returns:
        Configuration dictionary with a ``_source`` key
    """
    config_path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)

    config = _get_default_config()
    _deep_update(config, _read_yaml(config_path))
    if overrides:
        _deep_update(config, overrides)

    config['_source'] = str(config_path.resolve())
    return config


class ConfigLoader:
    """Loads and manages configuration from YAML files."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.config = {}
        self.load_config()

    def load_config(self):
        """Load configuration, falling back to defaults when the file is missing."""
        try:
            self.config = _deep_update(_get_default_config(), _read_yaml(self.config_path))
        except FileNotFoundError:
            logger.warning(f"Config file {self.config_path} not found. Using defaults.")
            self.config = _get_default_config()

    def get_alignment_params(self) -> Dict[str, Any]:
        """Get alignment parameters."""
        return self.config.get('alignment', {})

    def get_limits(self) -> Dict[str, Any]:
        """Get size and iteration limits."""
        return self.config.get('limits', {})

    def get_debug_params(self) -> Dict[str, Any]:
        return self.config.get('debug', {})

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.config)


# Global config instance
config_loader = ConfigLoader()


def get_config() -> ConfigLoader:
    """Get the global config loader instance."""
    return config_loader


def reload_config(config_path: Optional[str] = None) -> ConfigLoader:
    """Reload configuration from file."""
    global config_loader
    if config_path:
        config_loader = ConfigLoader(config_path)
    else:
        config_loader.load_config()
    return config_loader


__all__ = [
    'DEFAULT_CONFIG_PATH',
    'ConfigLoader',
    'load_config',
    'get_config',
    'reload_config',
]
