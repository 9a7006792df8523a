"""
Direct DFT reference (Numba JIT)

O(n^2) evaluation of the DFT sum, used to check the recursive FFT.
Works for any length >= 1.
"""

import numpy as np
from numba import jit


@jit(nopython=True, cache=True)
def _dft_naive_jit(x: np.ndarray) -> np.ndarray:
    """Naive DFT: X[k] = sum_n x[n] * exp(-2*pi*i*k*n / N)."""
    N = len(x)
    X = np.empty(N, dtype=np.complex128)

    for k in range(N):
        s = 0j
        for n in range(N):
            s += x[n] * np.exp(-2j * np.pi * k * n / N)
        X[k] = s

    return X


def dft(x) -> np.ndarray:
    """
    Compute the DFT of a 1-D array by direct summation.

    Parameters
    ----------
    x : array-like
        1-D input of any non-zero length.

    Returns
    -------
    np.ndarray
        complex128 spectrum.
    """
    x = np.asarray(x, dtype=np.complex128)
    if x.ndim != 1:
        raise ValueError(f"Expected a 1-D input, got shape {x.shape}")
    if len(x) == 0:
        raise ValueError("DFT of an empty sequence is undefined")
    return _dft_naive_jit(np.ascontiguousarray(x))


def max_abs_error(spectrum, reference) -> float:
    """Largest elementwise |spectrum - reference|."""
    spectrum = np.asarray(spectrum, dtype=np.complex128)
    reference = np.asarray(reference, dtype=np.complex128)
    if spectrum.shape != reference.shape:
        raise ValueError(f"Shape mismatch: {spectrum.shape} vs {reference.shape}")
    return float(np.abs(spectrum - reference).max())
