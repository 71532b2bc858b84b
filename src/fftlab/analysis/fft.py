"""Iterative radix-2 decimation-in-time FFT with per-stage snapshots.

The engine follows the textbook in-place layout:

- zero-pad the input to ``M = 2**ceil(log2(N))``
- reorder it by bit-reversed index (snapshot 0)
- run ``log2(M)`` butterfly stages; stage ``s`` pairs elements ``2**(s-1)``
  apart inside blocks of ``2**s`` and multiplies the lower branch by the
  twiddle ``exp(-j*2*pi*k/2**s)``
- record a snapshot of the whole working array after every stage

Twiddles are computed fresh for each butterfly rather than read from a table.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from .bitrev import bit_reverse_permute
from .complex_ops import ZERO, ComplexValue, add, rotate_multiply, sub
from .windows import WindowKind, apply_window, normalize_window_kind


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= ``n`` (``n`` must be positive)."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    return 1 << (n - 1).bit_length()


@dataclass(frozen=True)
class StageSnapshot:
    """
    State of the working array after one stage.

    Stage 0 is the padded, bit-reversed input. ``values`` is a tuple of
    immutable :class:`ComplexValue`, so later stages can't alter it.
    """

    stage: int
    values: Tuple[ComplexValue, ...]

    def __len__(self) -> int:
        return len(self.values)

    def to_array(self) -> np.ndarray:
        """Return a fresh complex128 array of the snapshot values."""
        return np.array([v.to_complex() for v in self.values], dtype=np.complex128)

    def magnitudes(self) -> np.ndarray:
        return np.array([v.magnitude for v in self.values], dtype=float)

    def phases(self) -> np.ndarray:
        return np.array([v.phase for v in self.values], dtype=float)


@dataclass(frozen=True)
class FftResult:
    """Final one-sided spectrum, timing, and the full stage history."""

    spectrum: Tuple[ComplexValue, ...]
    elapsed_ms: float
    stages: Tuple[StageSnapshot, ...]
    input_length: int
    padded_length: int
    window: WindowKind = "none"

    @property
    def stage_count(self) -> int:
        """Number of butterfly stages (``log2(padded_length)``)."""
        return len(self.stages) - 1

    def magnitudes(self) -> np.ndarray:
        return np.array([v.magnitude for v in self.spectrum], dtype=float)

    def phases(self) -> np.ndarray:
        return np.array([v.phase for v in self.spectrum], dtype=float)


def _butterfly_stage(buf: List[ComplexValue], stage: int) -> None:
    """Run butterfly stage ``stage`` (1-based) over ``buf`` in place."""
    size = 1 << stage
    half = size >> 1
    for j in range(0, len(buf), size):
        for k in range(half):
            idx1 = j + k
            idx2 = idx1 + half
            angle = -2.0 * math.pi * k / size
            twiddle = rotate_multiply(buf[idx2], angle)
            top = buf[idx1]
            buf[idx1] = add(top, twiddle)
            buf[idx2] = sub(top, twiddle)


def compute_fft(samples: ArrayLike, window: Optional[str] = "none") -> FftResult:
    """
    Transform ``samples`` and capture every intermediate stage.

    Parameters
    ----------
    samples:
        1-D array-like of real samples, at least one element. Any length is
        accepted; the tail is zero-padded up to the next power of two.
        Non-finite values are not rejected and propagate into the output.
    window:
        Window applied before padding (see :mod:`fftlab.analysis.windows`).

    Returns
    -------
    FftResult
        ``spectrum`` holds the first ``M/2`` bins of the final stage (empty
        when ``M == 1``); ``stages`` holds ``log2(M) + 1`` snapshots.
        ``elapsed_ms`` excludes windowing.
    """
    kind = normalize_window_kind(window)
    x = np.asarray(samples, dtype=float).reshape(-1)
    if x.size == 0:
        raise ValueError("samples must contain at least one sample")
    if kind != "none":
        x = apply_window(x, kind)

    start = time.perf_counter()

    n_samples = x.size
    padded = next_power_of_two(n_samples)
    n_stages = padded.bit_length() - 1

    buf: List[ComplexValue] = [ComplexValue(float(v), 0.0) for v in x]
    buf.extend([ZERO] * (padded - n_samples))
    buf = bit_reverse_permute(buf)

    stages: List[StageSnapshot] = [StageSnapshot(0, tuple(buf))]
    for stage in range(1, n_stages + 1):
        _butterfly_stage(buf, stage)
        stages.append(StageSnapshot(stage, tuple(buf)))

    spectrum = tuple(buf[: padded // 2])
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    return FftResult(
        spectrum=spectrum,
        elapsed_ms=elapsed_ms,
        stages=tuple(stages),
        input_length=n_samples,
        padded_length=padded,
        window=kind,
    )
