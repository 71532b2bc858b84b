"""Minimal complex arithmetic used by the butterfly stages."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class ComplexValue:
    """
    Immutable ``(real, imag)`` pair.

    ``magnitude`` and ``phase`` are derived on access and never stored, so a
    value can't drift out of sync with its polar form.
    """

    real: float
    imag: float = 0.0

    @property
    def magnitude(self) -> float:
        return math.hypot(self.real, self.imag)

    @property
    def phase(self) -> float:
        """Angle in ``(-pi, pi]``."""
        angle = math.atan2(self.imag, self.real)
        if angle == -math.pi:
            return math.pi
        return angle

    @classmethod
    def from_complex(cls, value: complex) -> "ComplexValue":
        return cls(float(value.real), float(value.imag))

    def to_complex(self) -> complex:
        return complex(self.real, self.imag)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return ``(real, imag, magnitude, phase)``."""
        return (self.real, self.imag, self.magnitude, self.phase)


ZERO = ComplexValue(0.0, 0.0)


def add(a: ComplexValue, b: ComplexValue) -> ComplexValue:
    return ComplexValue(a.real + b.real, a.imag + b.imag)


def sub(a: ComplexValue, b: ComplexValue) -> ComplexValue:
    return ComplexValue(a.real - b.real, a.imag - b.imag)


def rotate_multiply(value: ComplexValue, angle: float) -> ComplexValue:
    """
    Multiply ``value`` by the unit rotation ``exp(j * angle)``.

    Parameters
    ----------
    value:
        Complex value to rotate.
    angle:
        Rotation in radians. Butterfly stages pass ``-2*pi*k/size``.

    Returns
    -------
    ComplexValue
        ``(cos*re - sin*im, cos*im + sin*re)``. NaN/inf inputs propagate.
    """
    c = math.cos(angle)
    s = math.sin(angle)
    return ComplexValue(
        c * value.real - s * value.imag,
        c * value.imag + s * value.real,
    )
