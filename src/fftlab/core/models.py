"""Shared dataclasses for analysis sessions."""

from dataclasses import dataclass
from typing import Optional

from ..analysis.dft import DftResult
from ..analysis.features import OperationCounts
from ..analysis.fft import FftResult
from ..signals.generator import Signal


@dataclass(frozen=True)
class AnalysisResult:
    signal: Signal
    fft: FftResult
    dft: Optional[DftResult]
    counts: OperationCounts

    @property
    def dft_ms(self) -> Optional[float]:
        return None if self.dft is None else self.dft.elapsed_ms

    @property
    def fft_ms(self) -> float:
        return self.fft.elapsed_ms
