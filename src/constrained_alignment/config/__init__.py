from .config_loader import *

__all__ = [
    'DEFAULT_CONFIG_PATH',
    'ConfigLoader',
    'load_config',
    'get_config',
    'reload_config',
]
