"""
radix2fft - Recursive Cooley-Tukey FFT

Hand-written radix-2 decimation-in-time FFT over an immutable Complex
value type, with a direct DFT reference and a small benchmark CLI.

Modules:
    - complex_math: Complex value type and arithmetic
    - fft: recursive FFT engine and numpy adapters
    - reference: direct O(n^2) DFT (Numba JIT)
    - signal: sample grids and function sampling
    - config: YAML benchmark configuration
"""

from .complex_math import Complex, add, multiply, subtract, exp, twiddle
from .fft import InvalidLength, is_power_of_two, max_parallel_depth, transform, fft_array, to_sequence, to_array
from .reference import dft, max_abs_error
from .signal import linspace, sine, sample, bin_frequencies

__all__ = [
    # Complex arithmetic
    'Complex',
    'add',
    'multiply',
    'subtract',
    'exp',
    'twiddle',
    # FFT
    'InvalidLength',
    'is_power_of_two',
    'max_parallel_depth',
    'transform',
    'fft_array',
    'to_sequence',
    'to_array',
    # Reference
    'dft',
    'max_abs_error',
    # Signal
    'linspace',
    'sine',
    'sample',
    'bin_frequencies',
]

__version__ = '1.0.0'
