"""Explicit, caller-driven recomputation of signal + transforms."""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from ..analysis.dft import compute_dft
from ..analysis.features import operation_counts
from ..analysis.fft import compute_fft
from ..config.runtime import FftLabConfig
from ..signals.generator import InvalidLength, generate_signal
from ..tools.debug import time_block
from .models import AnalysisResult

logger = logging.getLogger(__name__)


class TransformSession:
    """
    Holds a configuration and the most recent :class:`AnalysisResult`.

    A failed run never replaces ``last_result``: when the requested sample
    count is invalid, the transforms are not invoked and the error is
    re-raised to the caller.
    """

    def __init__(self, config: FftLabConfig | None = None) -> None:
        self.config = (config or FftLabConfig()).sanitized()
        self.last_result: Optional[AnalysisResult] = None

    def run(self, **overrides: Any) -> AnalysisResult:
        """
        Generate a signal and transform it.

        Parameters
        ----------
        overrides:
            Field values for :class:`FftLabConfig` (e.g. ``sample_count=512``)
            applied to this and later runs once the run succeeds.

        Raises
        ------
        InvalidLength
            If the requested sample count is not a positive integer.
        """
        cfg = self.config.with_overrides(**overrides) if overrides else self.config
        rng = np.random.default_rng(cfg.seed)
        try:
            signal = generate_signal(cfg.signal_type, cfg.sample_count, cfg.frequency, rng=rng)
        except InvalidLength:
            logger.warning(
                "Rejected sample count %r; keeping previous result", cfg.sample_count
            )
            raise

        n = len(signal)
        dft = None
        if cfg.run_reference_dft and n <= cfg.max_dft_samples:
            with time_block(f"DFT n={n}", emitter=logger.debug):
                dft = compute_dft(signal.samples)
        elif cfg.run_reference_dft:
            logger.info(
                "Skipping reference DFT: %d samples exceeds max_dft_samples=%d",
                n,
                cfg.max_dft_samples,
            )

        with time_block(f"FFT n={n}", emitter=logger.debug):
            fft = compute_fft(signal.samples, cfg.window)

        result = AnalysisResult(
            signal=signal,
            fft=fft,
            dft=dft,
            counts=operation_counts(fft.padded_length),
        )
        self.config = cfg
        self.last_result = result
        logger.info(
            "Analysed %s: n=%d, M=%d, stages=%d, fft=%.2f ms%s",
            signal.label,
            n,
            fft.padded_length,
            fft.stage_count,
            fft.elapsed_ms,
            "" if dft is None else f", dft={dft.elapsed_ms:.2f} ms",
        )
        return result
