"""Test-signal generation feeding the transform core."""

from .generator import (
    SIGNAL_TYPES,
    InvalidLength,
    Signal,
    SignalComponent,
    generate_signal,
    normalize_signal_type,
    parse_sample_count,
)

__all__ = [
    "SIGNAL_TYPES",
    "InvalidLength",
    "Signal",
    "SignalComponent",
    "generate_signal",
    "normalize_signal_type",
    "parse_sample_count",
]
