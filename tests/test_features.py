import numpy as np
import pytest

from fftlab.analysis.features import (
    harmonic_number,
    operation_counts,
    peak_bin,
    peak_to_peak,
    rms,
)


def test_rms_and_peak_to_peak() -> None:
    assert rms([3.0, -3.0, 3.0, -3.0]) == pytest.approx(3.0)
    assert peak_to_peak([1.0, -2.0, 5.0]) == 7.0
    with pytest.raises(ValueError):
        rms([])


def test_peak_bin_skips_dc_on_request() -> None:
    spectrum = np.array([10.0, 0.5, 4.0, 1.0])
    assert peak_bin(spectrum) == 0
    assert peak_bin(spectrum, skip_dc=True) == 2
    assert peak_bin([7.0], skip_dc=True) == 0


def test_harmonic_number() -> None:
    assert harmonic_number(15, 5) == 3
    assert harmonic_number(5, 5) == 1
    assert harmonic_number(7, 5) is None
    assert harmonic_number(0, 5) is None
    assert harmonic_number(3, 0) is None


def test_operation_counts() -> None:
    counts = operation_counts(256)
    assert counts.dft == 65536
    assert counts.fft == 2048
    assert counts.speedup == pytest.approx(32.0)
    assert operation_counts(1).speedup == 1.0
    with pytest.raises(ValueError):
        operation_counts(0)
