"""Runtime configuration for signal generation and transforms."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional

import yaml

from ..analysis.windows import normalize_window_kind
from ..signals.generator import clamp_frequency, normalize_signal_type


@dataclass(slots=True)
class FftLabConfig:
    """
    Knobs for one analysis run.

    ``sample_count`` is passed through untouched so that a bad value is
    reported as :class:`~fftlab.signals.generator.InvalidLength` by the
    generator instead of being quietly replaced.
    """

    sample_count: Any = 256
    signal_type: str = "sine"
    frequency: float = 5.0
    window: str = "none"
    seed: Optional[int] = None

    run_reference_dft: bool = True
    # The O(N^2) reference is skipped above this many samples
    max_dft_samples: int = 8192

    def sanitized(self) -> FftLabConfig:
        """Return a copy with names normalised and limits applied."""
        seed = self.seed
        if seed is not None:
            seed = int(seed)
        return FftLabConfig(
            sample_count=self.sample_count,
            signal_type=normalize_signal_type(self.signal_type),
            frequency=float(clamp_frequency(self.frequency)),
            window=normalize_window_kind(self.window),
            seed=seed,
            run_reference_dft=bool(self.run_reference_dft),
            max_dft_samples=max(1, int(self.max_dft_samples)),
        )

    def with_overrides(self, **changes: Any) -> FftLabConfig:
        """Copy with ``changes`` applied (``None`` values are ignored)."""
        known = _recognized_fields()
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"unknown config fields: {', '.join(sorted(unknown))}")
        payload = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **payload).sanitized()


def _recognized_fields() -> set[str]:
    """Return the dataclass field names accepted by :class:`FftLabConfig`."""
    return {f.name for f in fields(FftLabConfig)}


def _normalize_mapping(data: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Flatten known nesting patterns (e.g. top-level ``fftlab`` key)."""
    if "fftlab" in data and isinstance(data["fftlab"], Mapping):
        merged: MutableMapping[str, Any] = {}
        for key, value in data.items():
            if key == "fftlab":
                merged.update(value)
            else:
                merged[key] = value
        return merged
    return dict(data)


def config_from_mapping(data: Mapping[str, Any] | None) -> FftLabConfig:
    """Build :class:`FftLabConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return FftLabConfig()
    normalized = _normalize_mapping(data)
    known = _recognized_fields()
    payload = {key: normalized[key] for key in normalized.keys() & known}
    return FftLabConfig(**payload).sanitized()


def load_config(path: str | Path | None) -> FftLabConfig:
    """
    Load configuration from ``path``.

    Missing files fall back to default :class:`FftLabConfig`.
    """
    if path is None:
        return FftLabConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return FftLabConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = ["FftLabConfig", "config_from_mapping", "load_config"]
