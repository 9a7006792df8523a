"""
Complex Arithmetic

A small immutable complex-number value type used by the FFT engine.
Each operation returns a new value; nothing is mutated in place.

The module-level functions (add, subtract, multiply, exp, ...) are the
primary interface; the operator overloads on Complex delegate to them.
"""

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Complex:
    """Complex number stored as a pair of double-precision floats."""
    real: float = 0.0
    imag: float = 0.0

    @classmethod
    def zero(cls) -> "Complex":
        return cls(0.0, 0.0)

    @classmethod
    def i(cls) -> "Complex":
        """The imaginary unit."""
        return cls(0.0, 1.0)

    @classmethod
    def from_complex(cls, value: Union[complex, Number]) -> "Complex":
        value = complex(value)
        return cls(value.real, value.imag)

    def to_complex(self) -> complex:
        return complex(self.real, self.imag)

    def __complex__(self) -> complex:
        return self.to_complex()

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return multiply(self, other)

    __rmul__ = __mul__

    def __neg__(self):
        return negate(self)

    def __abs__(self):
        return magnitude(self)


def _coerce(value):
    if isinstance(value, Complex):
        return value
    # bool is an int subclass but never a meaningful operand here
    if isinstance(value, (int, float, complex)) and not isinstance(value, bool):
        return Complex.from_complex(value)
    return None


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.real + b.real, a.imag + b.imag)


def subtract(a: Complex, b: Complex) -> Complex:
    return Complex(a.real - b.real, a.imag - b.imag)


def negate(a: Complex) -> Complex:
    return Complex(-a.real, -a.imag)


def multiply(a: Complex, b: Complex) -> Complex:
    return Complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def conjugate(a: Complex) -> Complex:
    return Complex(a.real, -a.imag)


def magnitude(a: Complex) -> float:
    return math.hypot(a.real, a.imag)


def phase(a: Complex) -> float:
    """Argument of a in radians, in (-pi, pi]."""
    return math.atan2(a.imag, a.real)


def exp(z: Complex) -> Complex:
    """
    Complex exponential.

    exp(x + iy) = exp(x) * (cos(y) + i*sin(y))

    For a purely imaginary argument the scale factor is exactly 1.0, so
    twiddle factors come out on the unit circle.
    """
    scale = math.exp(z.real)
    return Complex(scale * math.cos(z.imag), scale * math.sin(z.imag))


def twiddle(k: int, n: int) -> Complex:
    """Twiddle factor W_k = exp(-2*pi*i*k / n)."""
    return exp(Complex(0.0, -2.0 * math.pi * k / n))
