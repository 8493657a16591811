#!/usr/bin/env python
"""
interpft demo.

Interpolates a short sequence with FFT zero-padding and prints the original
and interpolated data.

Usage:
    python scripts/interpft_demo.py
    python scripts/interpft_demo.py --data 10 12 15 8 --length 10
    python scripts/interpft_demo.py --config configs/default.yaml --plot outputs/interpft.png
"""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from spectral_core import interpft
from spectral_core.utils import load_config
from spectral_core.utils.logging import RunLogger

console = Console()


def display_sequence(values, title: str):
    """Print a sequence as an index/value table."""
    table = Table(title=f"{title} (size {len(values)})", box=box.ROUNDED)
    table.add_column("Index", justify="right", style="bold")
    table.add_column("Value", justify="right")
    for i, value in enumerate(values):
        table.add_row(str(i), repr(float(value)))
    console.print(table)


def run_demo(config: dict, plot_path: str = None):
    interp_cfg = config['interpft']
    log_cfg = config['logging']

    run_logger = RunLogger(
        'interpft_demo',
        log_dir=str(PROJECT_ROOT / log_cfg['log_dir']),
        level=getattr(logging, str(log_cfg['level']).upper(), logging.INFO),
    )
    run_logger.log_config(config)

    data = [float(v) for v in interp_cfg['data']]
    target_length = int(interp_cfg['target_length'])

    console.print(Panel.fit(
        "[bold blue]FFT Interpolation[/bold blue]\n"
        f"{len(data)} -> {target_length} samples",
        border_style="blue"
    ))

    interpolated = interpft(data, target_length)

    display_sequence(data, "Original data")
    display_sequence(interpolated, "Interpolated data")

    run_logger.log_interpolation(data, interpolated)

    plot_path = plot_path or config['plot'].get('output')
    if plot_path:
        from spectral_core.utils.plot import plot_interpolation
        plot_interpolation(data, interpolated, plot_path)
        console.print(f"\n[green]✓[/green] Plot saved to {plot_path}")

    return interpolated


def main():
    parser = argparse.ArgumentParser(description="FFT interpolation demo")
    parser.add_argument(
        '--config',
        type=str,
        default=str(PROJECT_ROOT / 'configs' / 'default.yaml'),
        help='Path to configuration file'
    )
    parser.add_argument('--data', type=float, nargs='+', default=None, help='Samples to interpolate')
    parser.add_argument('--length', type=int, default=None, help='Number of interpolated samples')
    parser.add_argument('--plot', type=str, default=None, help='Save a PNG plot to this path')
    args = parser.parse_args()

    config = load_config(args.config)
    if args.data is not None:
        config['interpft']['data'] = args.data
    if args.length is not None:
        config['interpft']['target_length'] = args.length

    try:
        run_demo(config, plot_path=args.plot)
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise


if __name__ == '__main__':
    main()
