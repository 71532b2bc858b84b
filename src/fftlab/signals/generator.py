"""Labelled synthetic signals (sine, square, sawtooth, noise, harmonics)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np
from scipy import signal as sps

logger = logging.getLogger(__name__)

SIGNAL_TYPES: Tuple[str, ...] = ("sine", "square", "sawtooth", "noise", "complex")

MIN_FREQUENCY = 1
MAX_FREQUENCY = 20

_ALIASES: Dict[str, str] = {
    "sin": "sine",
    "saw": "sawtooth",
    "harmonic": "complex",
    "harmonics": "complex",
    "composite": "complex",
    "random": "noise",
}

# (multiple of the fundamental, amplitude) for the composite signal
HARMONICS: Tuple[Tuple[int, float], ...] = ((1, 1.0), (3, 0.5), (5, 0.25))


class InvalidLength(ValueError):
    """Raised when a requested sample count is not a positive integer."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"sample count must be a positive integer, got {value!r}")
        self.value = value


@dataclass(frozen=True)
class SignalComponent:
    """One named curve that makes up (or is) the generated signal."""

    name: str
    data: np.ndarray


@dataclass(frozen=True)
class Signal:
    """A generated sample sequence plus the components it was built from."""

    signal_type: str
    label: str
    frequency: int
    samples: np.ndarray
    components: Tuple[SignalComponent, ...]

    def __len__(self) -> int:
        return int(self.samples.size)


def parse_sample_count(value: Any) -> int:
    """
    Convert ``value`` to a positive ``int`` or raise :class:`InvalidLength`.

    Numeric strings such as ``"256"`` are accepted. Fractional values are
    truncated toward zero, so ``"12.7"`` becomes 12 and ``0.5`` is rejected.
    """
    if isinstance(value, bool):
        raise InvalidLength(value)
    try:
        as_float = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError) as exc:
        raise InvalidLength(value) from exc
    if not math.isfinite(as_float):
        raise InvalidLength(value)
    count = int(as_float)
    if count <= 0:
        raise InvalidLength(value)
    return count


def normalize_signal_type(value: Optional[str]) -> str:
    """Canonical signal type; unknown names fall back to ``sine``."""
    raw = str(value or "sine").strip().lower().replace("-", "_")
    raw = _ALIASES.get(raw, raw)
    if raw not in SIGNAL_TYPES:
        logger.warning("Unknown signal type %r; falling back to 'sine'", value)
        return "sine"
    return raw


def clamp_frequency(value: Any) -> int:
    """Truncate ``value`` to an int cycle count within [MIN_FREQUENCY, MAX_FREQUENCY]."""
    try:
        freq = int(float(value))
    except (TypeError, ValueError, OverflowError):
        freq = MIN_FREQUENCY
    return max(MIN_FREQUENCY, min(MAX_FREQUENCY, freq))


def _sine(freq: float, n: int) -> np.ndarray:
    i = np.arange(n, dtype=float)
    return np.sin(2.0 * np.pi * freq * i / n)


def generate_signal(
    signal_type: Optional[str],
    sample_count: Any,
    frequency: Any = 5,
    *,
    rng: Optional[np.random.Generator] = None,
) -> Signal:
    """
    Build a test signal of ``sample_count`` samples.

    Parameters
    ----------
    signal_type:
        One of :data:`SIGNAL_TYPES` (or an alias such as ``harmonic``).
    sample_count:
        Requested length. Validated before any samples are produced.
    frequency:
        Cycles over the whole sequence, clamped to [1, 20].
    rng:
        Random generator for ``noise``; a fresh unseeded one is used when
        omitted.

    Returns
    -------
    Signal
        ``samples`` is the signal to transform; ``components`` lists the
        curves it was made from, ending with the signal itself when it is a
        combination of several.

    Raises
    ------
    InvalidLength
        If ``sample_count`` is not a positive integer.
    """
    n = parse_sample_count(sample_count)
    kind = normalize_signal_type(signal_type)
    freq = clamp_frequency(frequency)

    components: Tuple[SignalComponent, ...]
    if kind == "sine":
        samples = _sine(freq, n)
        label = f"Sine ({freq} Hz)"
        components = (SignalComponent(label, samples),)
    elif kind == "square":
        base = _sine(freq, n)
        samples = np.where(base >= 0.0, 1.0, -1.0)
        label = f"Square ({freq} Hz)"
        components = (
            SignalComponent(f"Base sine ({freq} Hz)", base),
            SignalComponent(label, samples),
        )
    elif kind == "sawtooth":
        # Wrap in cycles before scaling so period boundaries land exactly on 0
        phase = np.mod(np.arange(n, dtype=float) / n * freq, 1.0)
        samples = sps.sawtooth(2.0 * np.pi * phase)
        label = f"Sawtooth ({freq} Hz)"
        components = (SignalComponent(label, samples),)
    elif kind == "noise":
        generator = rng if rng is not None else np.random.default_rng()
        samples = generator.uniform(-1.0, 1.0, size=n)
        label = "Random noise"
        components = (SignalComponent(label, samples),)
    else:
        parts = []
        for multiple, amplitude in HARMONICS:
            data = amplitude * _sine(freq * multiple, n)
            name = (
                f"Fundamental ({freq} Hz)"
                if multiple == 1
                else f"Harmonic x{multiple} ({freq * multiple} Hz)"
            )
            parts.append(SignalComponent(name, data))
        samples = np.sum([p.data for p in parts], axis=0)
        label = f"Harmonic composite ({freq} Hz)"
        components = tuple(parts) + (SignalComponent(label, samples),)

    logger.debug("Generated %s signal: n=%d, f=%d", kind, n, freq)
    return Signal(
        signal_type=kind,
        label=label,
        frequency=freq,
        samples=np.asarray(samples, dtype=float),
        components=components,
    )
