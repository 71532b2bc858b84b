import numpy as np

from fftlab.analysis.dft import compute_dft


def test_dft_matches_numpy_magnitudes() -> None:
    x = np.random.default_rng(1).normal(size=100)
    result = compute_dft(x)
    np.testing.assert_allclose(result.spectrum, np.abs(np.fft.fft(x)), atol=1e-9)
    assert result.spectrum.size == 100
    assert result.elapsed_ms >= 0.0


def test_nyquist_truncation() -> None:
    result = compute_dft(np.ones(10))
    assert result.nyquist().size == 5
    assert result.nyquist()[0] == 10.0


def test_single_sample() -> None:
    result = compute_dft([-4.0])
    np.testing.assert_array_equal(result.spectrum, [4.0])
    assert result.nyquist().size == 0


def test_input_not_mutated() -> None:
    x = [1.0, 2.0, 3.0]
    compute_dft(x)
    assert x == [1.0, 2.0, 3.0]


def test_nan_propagates() -> None:
    result = compute_dft([1.0, float("nan"), 0.0, 0.0])
    assert np.all(np.isnan(result.spectrum))
