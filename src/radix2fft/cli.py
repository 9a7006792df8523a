"""
FFT Benchmark

Samples a sine wave on an evenly spaced grid, times the recursive FFT,
checks it against the direct DFT for small sizes and prints the
strongest spectral bins.

Usage:
    radix2fft [--config CONFIG_PATH] [--n-exponent N] [--parallel-depth D]
"""

import argparse
import logging
import time
from typing import List, Optional

import numpy as np
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .complex_math import magnitude, phase
from .config import LOG_LEVELS, BenchmarkConfig, ConfigError, apply_overrides, config_from_dict, load_config
from .fft import to_array, transform
from .reference import dft, max_abs_error
from .signal import bin_frequencies, linspace, sample, sine
from .utils.logging import log_section, setup_logging

console = Console()

# Above this error the verification row is flagged
VERIFY_TOLERANCE = 1e-9


def top_bins(spectrum, k: int) -> List[int]:
    """Indices of the k largest-magnitude bins, strongest first."""
    mags = np.array([magnitude(v) for v in spectrum])
    order = np.argsort(-mags, kind='stable')
    return [int(i) for i in order[:k]]


def display_results_table(spectrum, freqs: np.ndarray, k: int):
    """Display the strongest bins."""
    table = Table(title="Strongest Spectral Bins", box=box.ROUNDED)
    table.add_column("Bin", justify="right", style="bold")
    table.add_column("Frequency", justify="right")
    table.add_column("Magnitude", justify="right")
    table.add_column("Phase (rad)", justify="right")

    for idx in top_bins(spectrum, k):
        value = spectrum[idx]
        table.add_row(
            str(idx),
            f"{freqs[idx]:.4f}",
            f"{magnitude(value):.4f}",
            f"{phase(value):+.4f}",
        )

    console.print(table)


def run_benchmark(config: BenchmarkConfig, logger: logging.Logger) -> dict:
    """Run one benchmark and return its results."""
    n = config.n_samples
    t = linspace(config.start, config.stop, n)
    wave = sample(lambda x: sine(x, config.frequency), t)

    start = time.perf_counter()
    spectrum = transform(wave, parallel_depth=config.parallel_depth)
    elapsed = time.perf_counter() - start

    results = {
        'n_samples': n,
        'transform_time_s': elapsed,
        'max_error': None,
    }

    if n <= config.verify_max_n:
        results['max_error'] = max_abs_error(to_array(spectrum), dft([complex(v) for v in wave]))
        if results['max_error'] > VERIFY_TOLERANCE:
            logger.warning(f"FFT deviates from direct DFT: max error {results['max_error']:.2e}")
    else:
        logger.info(f"Skipping DFT verification for n={n} (> {config.verify_max_n})")

    console.print(Panel.fit(
        f"[bold blue]Fourier transform of {n} samples[/bold blue]\n"
        f"Took {elapsed:.6f} seconds"
        + (f"\nMax error vs direct DFT: {results['max_error']:.2e}"
           if results['max_error'] is not None else ""),
        border_style="blue"
    ))

    freqs = bin_frequencies(n, config.spacing)
    display_results_table(spectrum, freqs, min(config.top_k, n))

    log_section(logger, "RESULTS", results)
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Recursive radix-2 FFT benchmark')

    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML config file')
    parser.add_argument('--n-exponent', type=int, default=None,
                        help='Transform 2**N samples')
    parser.add_argument('--start', type=float, default=None,
                        help='Start of the sample interval')
    parser.add_argument('--stop', type=float, default=None,
                        help='End of the sample interval (exclusive)')
    parser.add_argument('--frequency', type=float, default=None,
                        help='Frequency of the sampled sine')
    parser.add_argument('--parallel-depth', type=int, default=None,
                        help='Recursion levels to run as fork-join pairs')
    parser.add_argument('--top-k', type=int, default=None,
                        help='Number of bins to display')
    parser.add_argument('--log-level', type=str, default=None, choices=LOG_LEVELS,
                        help='Logging level for the log file')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Write detailed logs to this file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        data = load_config(args.config) if args.config else {}
        config = config_from_dict(data)
        config = apply_overrides(config, {
            'n_exponent': args.n_exponent,
            'start': args.start,
            'stop': args.stop,
            'frequency': args.frequency,
            'parallel_depth': args.parallel_depth,
            'top_k': args.top_k,
            'log_file': args.log_file,
            'log_level': args.log_level,
        })
    except ConfigError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        return 2

    logger = setup_logging(config)
    log_section(logger, "BENCHMARK CONFIGURATION", config.to_dict())

    # n_samples is 2**n_exponent, so transform() cannot raise InvalidLength here
    run_benchmark(config, logger)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
