"""
Logging utilities for the command-line tools.

The library modules only create module-level loggers and log at DEBUG; handlers
are configured here by the scripts.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime

DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'


def setup_logging(
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    format_string: str = None,
    name: str = None
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        log_file: Path to log file (if None, only console output)
        level: Logging level
        format_string: Custom format string
        name: Logger name (if None, uses root logger)

    Returns:
        Configured logger
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    # Console handler (minimal output - rich is used for the main display)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


class RunLogger:
    """
    Log file for one script run.

    Writes the run configuration, one record per FFT benchmark length and
    the sequences of an interpolation.
    """

    def __init__(
        self,
        run_name: str,
        log_dir: str = 'logs',
        level: int = logging.DEBUG
    ):
        self.run_name = run_name
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        self.log_file = self.log_dir / f'{run_name}_{timestamp}.log'

        self.logger = setup_logging(
            log_file=str(self.log_file),
            level=level,
            name=run_name
        )

    def log_config(self, config: dict):
        """Log run configuration."""
        self.logger.info("=" * 60)
        self.logger.info("CONFIGURATION")
        self.logger.info("=" * 60)
        self._log_dict(config, indent=2)
        self.logger.info("=" * 60)

    def log_transform(self, record: dict):
        """Log one benchmark record (see scripts/benchmark_fft.py measure_size)."""
        self.logger.info(
            f"N={record['n']:>6d} | {record['algorithm']:<11s} | "
            f"max_error={record['max_error']:.2e} | roundtrip={record['roundtrip_error']:.2e} | "
            f"ours={record['ours_ms']:.3f}ms | scipy={record['scipy_ms']:.3f}ms"
        )

    def log_interpolation(self, original, interpolated):
        """Log input and output of an interpft call."""
        self.logger.info(f"interpft: {len(original)} -> {len(interpolated)} samples")
        self.logger.info("  original: " + ", ".join(repr(float(v)) for v in original))
        self.logger.info("  interpolated: " + ", ".join(repr(float(v)) for v in interpolated))

    def _log_dict(self, d: dict, indent: int = 0):
        """Recursively log dictionary contents."""
        prefix = " " * indent
        for key, value in d.items():
            if isinstance(value, dict):
                self.logger.info(f"{prefix}{key}:")
                self._log_dict(value, indent + 2)
            else:
                self.logger.info(f"{prefix}{key}: {value}")
