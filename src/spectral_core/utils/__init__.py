"""
Utility modules.
"""

from .logging import setup_logging, RunLogger
from .config import load_config, DEFAULT_CONFIG

__all__ = ['setup_logging', 'RunLogger', 'load_config', 'DEFAULT_CONFIG']
