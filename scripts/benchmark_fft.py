#!/usr/bin/env python
"""
FFT accuracy and speed against scipy.fft.

For every configured length the script reports the maximum round-trip and
reference errors, the algorithm chosen by spectral_core.fft, and the mean
time per call for both implementations.

Usage:
    python scripts/benchmark_fft.py [--config CONFIG_PATH]
"""

import sys
import time
import argparse
import logging
from pathlib import Path

import numpy as np
from scipy.fft import fft as scipy_fft

# Add src to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table
from rich.panel import Panel
from rich import box

from spectral_core import fft, ifft
from spectral_core.fft import _algorithm_name
from spectral_core.utils import load_config
from spectral_core.utils.logging import RunLogger

console = Console()


def time_call(func, x: np.ndarray, n_iter: int) -> float:
    """Mean time per call in ms."""
    start = time.perf_counter()
    for _ in range(n_iter):
        func(x)
    return (time.perf_counter() - start) / n_iter * 1000


def measure_size(n: int, n_iter: int, rng: np.random.Generator) -> dict:
    x = rng.standard_normal(n) + 1j * rng.standard_normal(n)

    # Warm up JIT
    X_ours = fft(x)
    X_scipy = scipy_fft(x)

    return {
        'n': n,
        'algorithm': _algorithm_name(n),
        'max_error': float(np.abs(X_ours - X_scipy).max()),
        'roundtrip_error': float(np.abs(ifft(X_ours) - x).max()),
        'ours_ms': time_call(fft, x, n_iter),
        'scipy_ms': time_call(scipy_fft, x, n_iter),
    }


def display_results_table(results: list):
    table = Table(title="FFT Benchmark vs scipy.fft", box=box.ROUNDED)
    table.add_column("N", justify="right", style="bold")
    table.add_column("Algorithm")
    table.add_column("Max error", justify="right")
    table.add_column("Round trip", justify="right")
    table.add_column("Ours (ms)", justify="right")
    table.add_column("Scipy (ms)", justify="right")
    table.add_column("Ratio", justify="right")

    for r in results:
        status = "[green]✓[/green]" if r['max_error'] < 1e-9 else "[red]✗[/red]"
        table.add_row(
            str(r['n']),
            r['algorithm'],
            f"{r['max_error']:.2e} {status}",
            f"{r['roundtrip_error']:.2e}",
            f"{r['ours_ms']:.3f}",
            f"{r['scipy_ms']:.3f}",
            f"{r['ours_ms'] / r['scipy_ms']:.2f}x",
        )

    console.print(table)


def run_benchmark(config: dict) -> list:
    bench_cfg = config['benchmark']
    log_cfg = config['logging']

    run_logger = RunLogger(
        'benchmark_fft',
        log_dir=str(PROJECT_ROOT / log_cfg['log_dir']),
        level=getattr(logging, str(log_cfg['level']).upper(), logging.INFO),
    )
    run_logger.log_config(bench_cfg)

    rng = np.random.default_rng(bench_cfg['seed'])
    sizes = [int(n) for n in bench_cfg['sizes']]

    console.print(Panel.fit(
        "[bold blue]FFT Benchmark[/bold blue]\n"
        f"Sizes: {', '.join(str(n) for n in sizes)}",
        border_style="blue"
    ))

    results = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=30),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]Benchmarking", total=len(sizes))
        for n in sizes:
            progress.update(task, description=f"[cyan]N={n}")
            r = measure_size(n, int(bench_cfg['n_iter']), rng)
            results.append(r)
            run_logger.log_transform(r)
            progress.update(task, advance=1)

    console.print("\n")
    display_results_table(results)
    return results


def main():
    parser = argparse.ArgumentParser(description="FFT benchmark")
    parser.add_argument(
        '--config',
        type=str,
        default=str(PROJECT_ROOT / 'configs' / 'default.yaml'),
        help='Path to configuration file'
    )
    args = parser.parse_args()

    try:
        run_benchmark(load_config(args.config))
        console.print(Panel.fit(
            "[bold green]Benchmark completed![/bold green]",
            border_style="green"
        ))
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise


if __name__ == '__main__':
    main()
