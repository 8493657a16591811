"""
YAML configuration for the command-line tools.
"""

import copy
from pathlib import Path
from typing import Dict, Optional

import yaml

from ..exceptions import InvalidArgumentError

DEFAULT_CONFIG = {
    'interpft': {
        'data': [10.0, 12.0, 15.0, 8.0],
        'target_length': 10,
    },
    'benchmark': {
        # Power-of-two, composite and prime lengths
        'sizes': [256, 1024, 1000, 1536, 97, 1009],
        'n_iter': 50,
        'seed': 0,
    },
    'logging': {
        'log_dir': 'logs',
        'level': 'INFO',
    },
    'plot': {
        'output': None,
    },
}


def _merge(base: Dict, override: Dict) -> Dict:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict:
    """
    Load configuration, filling missing keys from DEFAULT_CONFIG.

    Args:
        config_path: Path to a YAML file (if None, defaults only)

    Returns:
        Configuration dictionary
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(Path(config_path), 'r') as f:
        user_config = yaml.safe_load(f)

    if user_config is None:
        user_config = {}
    if not isinstance(user_config, dict):
        raise InvalidArgumentError(
            f"Config file {config_path} must contain a mapping, got {type(user_config).__name__}"
        )

    return _merge(DEFAULT_CONFIG, user_config)
