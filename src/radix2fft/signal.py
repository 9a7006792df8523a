"""
Sample grids and signal sampling.

Produces FFT input from a real time-domain function and maps spectrum
bins back to frequencies.
"""

from typing import Callable, List

import numpy as np

from .complex_math import Complex


def linspace(start: float, stop: float, n: int) -> np.ndarray:
    """
    n evenly spaced points on [start, stop).

    The step is (stop - start) / n, so stop itself is not included and
    consecutive grids tile the real line. This differs from np.linspace,
    which includes the endpoint by default.
    """
    if n < 1:
        raise ValueError(f"Number of points must be >= 1, got {n}")
    step = (stop - start) / n
    return start + step * np.arange(n, dtype=np.float64)


def sine(t: np.ndarray, frequency: float = 1.0) -> np.ndarray:
    """sin(2*pi*frequency*t)"""
    return np.sin(2 * np.pi * frequency * np.asarray(t, dtype=np.float64))


def sample(func: Callable[[np.ndarray], np.ndarray], t: np.ndarray) -> List[Complex]:
    """Evaluate a real function on the grid t and wrap values as Complex."""
    values = np.asarray(func(np.asarray(t, dtype=np.float64)), dtype=np.float64)
    if values.shape != np.shape(t):
        raise ValueError(f"Function returned shape {values.shape}, expected {np.shape(t)}")
    return [Complex(float(v), 0.0) for v in values]


def bin_frequencies(n: int, spacing: float) -> np.ndarray:
    """
    Frequency of each DFT bin for n samples taken every `spacing` units.

    Bins above n/2 map to negative frequencies, same convention as
    np.fft.fftfreq.
    """
    if n < 1:
        raise ValueError(f"Number of bins must be >= 1, got {n}")
    if spacing <= 0:
        raise ValueError(f"Sample spacing must be positive, got {spacing}")
    k = np.arange(n)
    k = np.where(k < (n + 1) // 2, k, k - n)
    return k / (n * spacing)
