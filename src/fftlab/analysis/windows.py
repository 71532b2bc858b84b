"""Analysis windows applied to a real sample sequence before transforming."""

from __future__ import annotations

from typing import Callable, Dict, Literal, Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike


WindowKind = Literal["none", "hanning", "hamming", "blackman", "rectangular"]

WINDOW_KINDS: Tuple[str, ...] = ("none", "hanning", "hamming", "blackman", "rectangular")

_ALIASES: Dict[str, str] = {
    "hann": "hanning",
    "han": "hanning",
    "rect": "rectangular",
    "boxcar": "rectangular",
    "off": "none",
}


def _hanning(phase: np.ndarray) -> np.ndarray:
    return 0.5 * (1.0 - np.cos(phase))


def _hamming(phase: np.ndarray) -> np.ndarray:
    return 0.54 - 0.46 * np.cos(phase)


def _blackman(phase: np.ndarray) -> np.ndarray:
    return 0.42 - 0.5 * np.cos(phase) + 0.08 * np.cos(2.0 * phase)


# Each weight function receives 2*pi*i/(N-1).
_WEIGHT_FUNCS: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "hanning": _hanning,
    "hamming": _hamming,
    "blackman": _blackman,
}


def normalize_window_kind(value: Optional[str]) -> WindowKind:
    """
    Return the canonical window name for ``value``.

    Matching is case-insensitive and accepts a few common aliases
    (``hann``, ``rect``, ``boxcar``). ``None`` and ``""`` mean ``none``.
    """
    raw = str(value or "none").strip().lower().replace("-", "_")
    raw = _ALIASES.get(raw, raw)
    if raw not in WINDOW_KINDS:
        raise ValueError(
            f"unknown window {value!r}; expected one of {', '.join(WINDOW_KINDS)}"
        )
    return raw  # type: ignore[return-value]


def window_weights(kind: Optional[str], length: int) -> np.ndarray:
    """
    Per-sample weights for a window of ``length`` samples.

    Lengths of 0 or 1 have no ``N-1`` span to divide by, so every window
    collapses to a weight of 1 there.
    """
    name = normalize_window_kind(kind)
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    func = _WEIGHT_FUNCS.get(name)
    if func is None or length <= 1:
        return np.ones(length, dtype=float)
    phase = 2.0 * np.pi * np.arange(length, dtype=float) / (length - 1)
    # Blackman endpoints round to about -1e-17
    return np.clip(func(phase), 0.0, 1.0)


def apply_window(samples: ArrayLike, kind: Optional[str] = "none") -> np.ndarray:
    """
    Return a weighted copy of ``samples``.

    Parameters
    ----------
    samples:
        1-D array-like of real samples. Left untouched.
    kind:
        Window name (see :data:`WINDOW_KINDS`).

    Returns
    -------
    np.ndarray
        New float array of the same length.
    """
    arr = np.array(samples, dtype=float, copy=True).reshape(-1)
    name = normalize_window_kind(kind)
    if name in ("none", "rectangular"):
        return arr
    return arr * window_weights(name, arr.size)
