"""Transform core: complex arithmetic, windows, and the DFT/FFT engines.

Modules here stay free of plotting and I/O so that the staged FFT can be
driven from scripts, tests, or :mod:`fftlab.core.session` alike. The two
entry points most callers need are :func:`compute_dft` and
:func:`compute_fft`.
"""

from .complex_ops import ComplexValue, add, rotate_multiply, sub
from .dft import DftResult, compute_dft
from .fft import FftResult, StageSnapshot, compute_fft, next_power_of_two
from .windows import WindowKind, apply_window, normalize_window_kind

__all__ = [
    "ComplexValue",
    "add",
    "sub",
    "rotate_multiply",
    "DftResult",
    "compute_dft",
    "FftResult",
    "StageSnapshot",
    "compute_fft",
    "next_power_of_two",
    "WindowKind",
    "apply_window",
    "normalize_window_kind",
]
