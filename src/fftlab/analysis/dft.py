"""Direct O(N^2) discrete Fourier transform, kept as a timing/accuracy reference."""

from __future__ import annotations

import time
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike


@dataclass(frozen=True)
class DftResult:
    """Magnitude spectrum over all ``N`` bins plus the wall time it took."""

    spectrum: np.ndarray
    elapsed_ms: float

    def nyquist(self) -> np.ndarray:
        """Bins ``[0, N/2)``, i.e. up to the Nyquist limit."""
        return self.spectrum[: self.spectrum.size // 2]


def compute_dft(samples: ArrayLike) -> DftResult:
    """
    Compute the magnitude spectrum of ``samples`` bin by bin.

    For each bin ``k``::

        real = sum(x[n] * cos(-2*pi*k*n/N))
        imag = sum(x[n] * sin(-2*pi*k*n/N))

    One row of angles is built per bin, so extra memory stays O(N).

    Parameters
    ----------
    samples:
        1-D array-like of real samples.

    Returns
    -------
    DftResult
        ``spectrum`` has length N; use :meth:`DftResult.nyquist` for the
        one-sided half.
    """
    x = np.asarray(samples, dtype=float).reshape(-1)
    n_samples = x.size
    spectrum = np.empty(n_samples, dtype=float)

    start = time.perf_counter()
    n = np.arange(n_samples, dtype=float)
    for k in range(n_samples):
        angle = -2.0 * np.pi * k * n / n_samples
        real = float(np.dot(x, np.cos(angle)))
        imag = float(np.dot(x, np.sin(angle)))
        spectrum[k] = np.sqrt(real * real + imag * imag)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    return DftResult(spectrum=spectrum, elapsed_ms=elapsed_ms)
