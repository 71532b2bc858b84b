"""Feature extraction helpers for signals and spectra."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike


Number = Union[float, np.floating]


def _as_samples(values: ArrayLike) -> np.ndarray:
    """Non-empty 1-D float view of ``values`` (samples or magnitudes)."""
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"expected a 1-D sequence, got shape {arr.shape}")
    if arr.size == 0:
        raise ValueError("expected at least one value")
    return arr


def rms(samples: ArrayLike) -> Number:
    """
    Level of a generated signal as its root-mean-square.

    A unit sine over whole cycles gives ``1/sqrt(2)``; a unit square wave
    gives 1.
    """
    arr = _as_samples(samples)
    return float(np.sqrt(np.mean(np.square(arr))))


def peak_to_peak(samples: ArrayLike) -> Number:
    """Swing between the largest and smallest sample."""
    arr = _as_samples(samples)
    return float(np.max(arr) - np.min(arr))


def peak_bin(spectrum: ArrayLike, *, skip_dc: bool = False) -> int:
    """
    Index of the largest magnitude in ``spectrum``.

    Parameters
    ----------
    spectrum:
        1-D array-like of magnitudes.
    skip_dc:
        Ignore bin 0 when looking for the peak. Ignored for one-bin spectra.
    """
    arr = _as_samples(spectrum)
    if skip_dc and arr.size > 1:
        return int(np.argmax(arr[1:])) + 1
    return int(np.argmax(arr))


def harmonic_number(bin_index: int, fundamental: float) -> Optional[int]:
    """
    Return ``h`` when ``bin_index`` sits on the ``h``-th harmonic of ``fundamental``.

    A bin counts as harmonic when it is within half a bin of an integer
    multiple. Bin 0 and non-positive fundamentals have no harmonic number.
    """
    if fundamental <= 0 or bin_index <= 0:
        return None
    ratio = bin_index / float(fundamental)
    nearest = int(round(ratio))
    if nearest < 1 or abs(bin_index - nearest * fundamental) > 0.5:
        return None
    return nearest


@dataclass(frozen=True)
class OperationCounts:
    """Rough operation counts for an ``n``-point DFT versus FFT."""

    n: int
    dft: int
    fft: int

    @property
    def speedup(self) -> float:
        if self.fft <= 0:
            return 1.0
        return self.dft / self.fft


def operation_counts(n: int) -> OperationCounts:
    """``n**2`` for the direct DFT and ``floor(n*log2(n))`` for the FFT."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    return OperationCounts(n=n, dft=n * n, fft=int(math.floor(n * math.log2(n))))
