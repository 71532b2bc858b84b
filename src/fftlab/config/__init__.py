"""Configuration objects and helpers for fftlab.

A YAML file (see ``fftlab.yaml`` at the repository root) describes the
signal to generate and the window to apply. :mod:`runtime` turns it into a
typed :class:`FftLabConfig` that :class:`fftlab.core.session.TransformSession`
and the CLI tools consume.
"""

from .runtime import FftLabConfig, config_from_mapping, load_config

__all__ = ["FftLabConfig", "config_from_mapping", "load_config"]
