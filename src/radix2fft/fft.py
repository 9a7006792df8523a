"""
Recursive FFT Implementation

This module implements the radix-2 decimation-in-time Cooley-Tukey FFT
over sequences of Complex values.

Algorithm:
1. A sequence of length 1 is its own transform.
2. Split the input by index parity into even and odd subsequences.
3. Transform both halves recursively.
4. Combine with the butterfly, for k in [0, n/2):
       X[k]       = G[k] + W_k * U[k]
       X[k + n/2] = G[k] - W_k * U[k]
   where W_k = exp(-2*pi*i*k / n).

The input length must be a power of two. Each call allocates a new output
list; the caller's sequence is never modified.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

import numpy as np

from .complex_math import Complex, add, multiply, subtract, twiddle

logger = logging.getLogger(__name__)


class InvalidLength(ValueError):
    """Raised when a transform input length is zero or not a power of two."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"FFT input length must be a power of two >= 1, got {length}")


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def max_parallel_depth() -> int:
    """
    Deepest fork-join level transform() will use.

    floor(log2(cpu_count)), at least 1. A depth d keeps up to 2**d - 1
    worker threads alive at once.
    """
    cpus = os.cpu_count() or 1
    return max(1, cpus.bit_length() - 1)


def transform(sequence: Sequence[Complex], parallel_depth: int = 0) -> List[Complex]:
    """
    Compute the DFT of a power-of-two length sequence.

    Parameters
    ----------
    sequence : Sequence[Complex]
        Input samples. len(sequence) must be a power of two.
    parallel_depth : int
        Number of top recursion levels whose two sub-transforms are run
        as a fork-join pair on a worker thread. 0 (default) is fully
        sequential. Values above max_parallel_depth() are capped to it,
        so at most 2**max_parallel_depth() - 1 threads are started.
        The result does not depend on this value.

    Returns
    -------
    List[Complex]
        Spectrum of the same length in standard DFT order.

    Raises
    ------
    InvalidLength
        If the length is zero or not a power of two.
    ValueError
        If parallel_depth is negative.
    """
    n = len(sequence)
    if not is_power_of_two(n):
        raise InvalidLength(n)
    if parallel_depth < 0:
        raise ValueError(f"parallel_depth must be >= 0, got {parallel_depth}")

    limit = max_parallel_depth()
    if parallel_depth > limit:
        logger.debug("parallel_depth %d capped to %d", parallel_depth, limit)
        parallel_depth = limit

    logger.debug("transform: n=%d, parallel_depth=%d", n, parallel_depth)
    return _fft_recursive(sequence, parallel_depth)


def _fft_recursive(x: Sequence[Complex], parallel_depth: int) -> List[Complex]:
    n = len(x)
    if n == 1:
        return [x[0]]

    even = x[0::2]
    odd = x[1::2]

    if parallel_depth > 0:
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = executor.submit(_fft_recursive, even, parallel_depth - 1)
            u = _fft_recursive(odd, parallel_depth - 1)
            g = future.result()
    else:
        g = _fft_recursive(even, 0)
        u = _fft_recursive(odd, 0)

    return _combine(g, u)


def _combine(g: List[Complex], u: List[Complex]) -> List[Complex]:
    """Butterfly step merging two half-size spectra."""
    half_n = len(g)
    n = 2 * half_n
    lower = [None] * half_n
    upper = [None] * half_n

    for k in range(half_n):
        t = multiply(twiddle(k, n), u[k])
        # Opposite signs for the two halves
        lower[k] = add(g[k], t)
        upper[k] = subtract(g[k], t)

    return lower + upper


# ============== numpy interop ==============

def to_sequence(x) -> List[Complex]:
    """Convert a 1-D array-like of numbers to a list of Complex."""
    arr = np.asarray(x, dtype=np.complex128)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D input, got shape {arr.shape}")
    return [Complex(float(v.real), float(v.imag)) for v in arr]


def to_array(spectrum: Sequence[Complex]) -> np.ndarray:
    """Convert a sequence of Complex to a complex128 ndarray."""
    result = np.empty(len(spectrum), dtype=np.complex128)
    for i, value in enumerate(spectrum):
        result[i] = complex(value.real, value.imag)
    return result


def fft_array(x: np.ndarray, parallel_depth: int = 0) -> np.ndarray:
    """
    Compute the 1-D DFT of an array using the recursive Cooley-Tukey FFT.

    Parameters
    ----------
    x : np.ndarray
        1-D input whose length is a power of two. Real input is treated
        as complex with zero imaginary part.
    parallel_depth : int
        See transform().

    Returns
    -------
    np.ndarray
        complex128 spectrum, same length as x.

    Examples
    --------
    >>> import numpy as np
    >>> X = fft_array(np.array([1.0, 0.0, -1.0, 0.0]))
    >>> # array([0.+0.j, 2.+0.j, 0.+0.j, 2.+0.j])
    """
    return to_array(transform(to_sequence(x), parallel_depth=parallel_depth))
