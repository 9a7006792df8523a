"""
Unit Tests for the Recursive FFT

Validates the hand-written radix-2 FFT against scipy and the direct DFT
reference, and checks the algebraic properties of the transform.

Run:
    pytest tests/test_fft.py -v
    or
    python tests/test_fft.py
"""

import threading
import time
import types

import numpy as np
import pytest
from scipy.fft import fft as scipy_fft

import radix2fft
from radix2fft import Complex, InvalidLength, dft, fft_array, is_power_of_two, to_array, to_sequence, transform
from radix2fft import fft as fft_module
from radix2fft.complex_math import add, multiply, twiddle

TOL = 1e-9


def random_sequence(n, seed=0):
    rng = np.random.default_rng(seed)
    return to_sequence(rng.standard_normal(n) + 1j * rng.standard_normal(n))


def same_sign_transform(x):
    """Faulty variant that adds in both halves of the butterfly."""
    n = len(x)
    if n == 1:
        return [x[0]]
    g = same_sign_transform(x[0::2])
    u = same_sign_transform(x[1::2])
    half = [add(g[k], multiply(twiddle(k, n), u[k])) for k in range(n // 2)]
    return half + half


class TestFFT:
    """Test suite for the FFT engine."""

    def test_fft_random_signal(self):
        """Test FFT on random complex signal."""
        rng = np.random.default_rng(1)
        x = rng.standard_normal(1024) + 1j * rng.standard_normal(1024)
        X_ours = fft_array(x)
        X_scipy = scipy_fft(x)
        error = np.abs(X_ours - X_scipy)

        print(f"\n[FFT Random Signal]")
        print(f"  Max error: {error.max():.2e}")

        assert error.max() < TOL, f"FFT error too large: {error.max()}"

    def test_fft_power_of_2(self):
        """Test FFT on power-of-2 lengths against scipy and the direct DFT."""
        for N in [1, 2, 4, 8, 16, 64, 256]:
            x = np.random.default_rng(N).standard_normal(N)
            X_ours = fft_array(x)
            assert np.abs(X_ours - scipy_fft(x)).max() < TOL, f"FFT failed for N={N}"
            assert np.abs(X_ours - dft(x)).max() < TOL, f"FFT vs DFT failed for N={N}"

    def test_length_preserved(self):
        for N in [1, 2, 32, 128]:
            assert len(transform(random_sequence(N))) == N

    def test_base_case(self):
        z = Complex(3.5, -1.25)
        assert transform([z]) == [z]

    def test_base_case_returns_new_list(self):
        x = [Complex(1.0, 2.0)]
        out = transform(x)
        assert out is not x

    def test_known_pair(self):
        """[1, 0, -1, 0] -> [0, 2, 0, 2]"""
        X = fft_array(np.array([1.0, 0.0, -1.0, 0.0]))
        np.testing.assert_allclose(X, [0, 2, 0, 2], atol=TOL)

    def test_dc_component(self):
        c = Complex(2.0, -0.5)
        n = 16
        X = to_array(transform([c] * n))
        assert abs(X[0] - n * complex(c)) < TOL
        assert np.abs(X[1:]).max() < TOL

    def test_linearity_sum(self):
        x = random_sequence(64, seed=2)
        y = random_sequence(64, seed=3)
        lhs = to_array(transform([a + b for a, b in zip(x, y)]))
        rhs = to_array(transform(x)) + to_array(transform(y))
        assert np.abs(lhs - rhs).max() < TOL

    def test_linearity_scalar(self):
        x = random_sequence(64, seed=4)
        a = Complex(0.7, -1.3)
        lhs = to_array(transform([a * v for v in x]))
        rhs = complex(a) * to_array(transform(x))
        assert np.abs(lhs - rhs).max() < TOL

    def test_sine_peak(self):
        """A sine with an integer number of cycles concentrates in two bins."""
        n = 64
        cycles = 5
        t = np.arange(n) / n
        X = fft_array(np.sin(2 * np.pi * cycles * t))
        mags = np.abs(X)
        assert set(np.argsort(-mags)[:2]) == {cycles, n - cycles}
        assert mags[cycles] == pytest.approx(n / 2, abs=1e-8)

    def test_input_not_mutated(self):
        x = random_sequence(32, seed=5)
        snapshot = list(x)
        transform(x)
        assert x == snapshot

    def test_tuple_input(self):
        x = tuple(random_sequence(8, seed=6))
        np.testing.assert_allclose(to_array(transform(x)), dft(to_array(x)), atol=TOL)


class TestButterflySigns:
    """Regression tests for the subtract half of the butterfly."""

    def test_differs_from_same_sign_combine(self):
        x = to_sequence([1.0, 2.0, 3.0, 4.0, 0.5, -1.0, 2.5, 0.0])
        correct = to_array(transform(x))
        faulty = to_array(same_sign_transform(x))
        n = len(x)

        # Wrong sub-spectra propagate into the lower half as well
        assert np.abs(correct[: n // 2] - faulty[: n // 2]).max() > 1e-3
        assert np.abs(correct[n // 2:] - faulty[n // 2:]).max() > 1e-3
        np.testing.assert_allclose(correct, scipy_fft(to_array(x)), atol=TOL)

    def test_faulty_variant_duplicates_halves(self):
        x = random_sequence(16, seed=7)
        faulty = to_array(same_sign_transform(x))
        np.testing.assert_allclose(faulty[:8], faulty[8:])

        correct = to_array(transform(x))
        assert np.abs(correct[:8] - correct[8:]).max() > 1e-3

    def test_two_point_butterfly(self):
        """n = 2: X = [a + b, a - b]."""
        a, b = Complex(3.0, 1.0), Complex(1.0, -2.0)
        assert transform([a, b]) == [Complex(4.0, -1.0), Complex(2.0, 3.0)]


class TestInvalidLength:
    """Precondition enforcement at the call boundary."""

    @pytest.mark.parametrize("n", [0, 3, 6, 12, 1000])
    def test_rejects_non_power_of_two(self, n):
        with pytest.raises(InvalidLength) as excinfo:
            transform([Complex(1.0, 0.0)] * n)
        assert excinfo.value.length == n
        assert str(n) in str(excinfo.value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            fft_array(np.zeros(5))

    def test_fft_rejects_2d(self):
        with pytest.raises(ValueError):
            fft_array(np.zeros((4, 4)))

    def test_is_power_of_two(self):
        assert [n for n in range(-2, 20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]

    def test_negative_parallel_depth(self):
        with pytest.raises(ValueError):
            transform([Complex(1.0, 0.0)] * 4, parallel_depth=-1)


class TestParallel:
    """Fork-join path must match the sequential result exactly."""

    @pytest.mark.parametrize("depth", [1, 2, 3, 10])
    def test_parallel_matches_sequential(self, depth):
        x = random_sequence(128, seed=8)
        assert transform(x, parallel_depth=depth) == transform(x)

    def test_parallel_base_case(self):
        z = Complex(1.0, 1.0)
        assert transform([z], parallel_depth=4) == [z]

    def test_depth_capped_to_limit(self, monkeypatch):
        """A huge depth starts at most 2**limit - 1 worker threads."""
        monkeypatch.setattr(fft_module, 'max_parallel_depth', lambda: 2)

        created = []
        peak = [threading.active_count()]
        baseline = threading.active_count()

        class CountingExecutor(fft_module.ThreadPoolExecutor):
            def __init__(self, *args, **kwargs):
                super().__init__(*args, **kwargs)
                created.append(self)

        original = fft_module._fft_recursive

        def spy(x, parallel_depth):
            peak[0] = max(peak[0], threading.active_count())
            return original(x, parallel_depth)

        monkeypatch.setattr(fft_module, 'ThreadPoolExecutor', CountingExecutor)
        monkeypatch.setattr(fft_module, '_fft_recursive', spy)

        x = random_sequence(4096, seed=9)
        result = transform(x, parallel_depth=64)

        print(f"\n[Parallel Cap]")
        print(f"  Executors: {len(created)}, peak threads: {peak[0]} (baseline {baseline})")

        assert len(created) == 3
        assert peak[0] - baseline <= 3
        np.testing.assert_allclose(to_array(result), scipy_fft(to_array(x)), atol=TOL)

    def test_limit_is_positive(self):
        assert fft_module.max_parallel_depth() >= 1


class TestModuleLayout:

    def test_fft_submodule_not_shadowed(self):
        assert isinstance(radix2fft.fft, types.ModuleType)
        assert radix2fft.fft.transform is transform
        assert radix2fft.fft_array is fft_array


class TestNumpyAdapters:

    def test_real_input_has_zero_imag(self):
        seq = to_sequence([1, 2.5, -3])
        assert seq == [Complex(1.0, 0.0), Complex(2.5, 0.0), Complex(-3.0, 0.0)]

    def test_to_array_dtype(self):
        arr = to_array([Complex(1.0, -1.0), Complex(0.0, 2.0)])
        assert arr.dtype == np.complex128
        np.testing.assert_array_equal(arr, [1 - 1j, 2j])


class TestPerformance:

    def test_fft_performance(self):
        """Benchmark recursive FFT (informational)."""
        print(f"\n[FFT Performance Benchmark]")
        print(f"{'Size':>6s} | {'Ours (ms)':>10s} | {'Scipy (ms)':>11s}")
        print("-" * 36)

        for N in [256, 1024, 4096]:
            x = np.random.default_rng(N).standard_normal(N)
            seq = to_sequence(x)

            start = time.perf_counter()
            transform(seq)
            time_ours = (time.perf_counter() - start) * 1000

            start = time.perf_counter()
            scipy_fft(x)
            time_scipy = (time.perf_counter() - start) * 1000

            print(f"{N:6d} | {time_ours:10.3f} | {time_scipy:11.3f}")


def run_all_tests():
    """Run the FFT test suites without pytest."""
    print("=" * 70)
    print("Recursive FFT - Unit Tests")
    print("=" * 70)

    suite = TestFFT()
    suite.test_fft_random_signal()
    suite.test_fft_power_of_2()
    suite.test_length_preserved()
    suite.test_base_case()
    suite.test_known_pair()
    suite.test_dc_component()
    suite.test_linearity_sum()
    suite.test_linearity_scalar()
    suite.test_sine_peak()

    signs = TestButterflySigns()
    signs.test_differs_from_same_sign_combine()
    signs.test_faulty_variant_duplicates_halves()
    signs.test_two_point_butterfly()

    print("\n" + "=" * 70)
    print("ALL TESTS PASSED ✓")
    print("=" * 70)


if __name__ == "__main__":
    run_all_tests()
