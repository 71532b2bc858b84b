import math
import pathlib
import sys
import unittest

import numpy as np

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fftlab.analysis.bitrev import bit_reverse_permute, reverse_bits  # noqa: E402
from fftlab.analysis.complex_ops import ComplexValue  # noqa: E402
from fftlab.analysis.dft import compute_dft  # noqa: E402
from fftlab.analysis.fft import compute_fft, next_power_of_two  # noqa: E402
from fftlab.analysis.windows import apply_window  # noqa: E402


def _sine(freq: float, n: int) -> np.ndarray:
    return np.sin(2.0 * np.pi * freq * np.arange(n) / n)


class NextPowerOfTwoTest(unittest.TestCase):
    def test_values(self):
        self.assertEqual(next_power_of_two(1), 1)
        self.assertEqual(next_power_of_two(2), 2)
        self.assertEqual(next_power_of_two(3), 4)
        self.assertEqual(next_power_of_two(200), 256)
        self.assertEqual(next_power_of_two(256), 256)
        self.assertEqual(next_power_of_two(8193), 16384)

    def test_rejects_non_positive(self):
        with self.assertRaises(ValueError):
            next_power_of_two(0)


class StagedFftTest(unittest.TestCase):
    def test_agrees_with_reference_dft(self):
        rng = np.random.default_rng(42)
        for n in (2, 8, 64, 256, 1024):
            x = rng.uniform(-1.0, 1.0, size=n)
            dft = compute_dft(x).nyquist()
            fft = compute_fft(x, "none").magnitudes()
            self.assertEqual(fft.size, n // 2)
            np.testing.assert_allclose(fft, dft, rtol=0, atol=1e-9 * n)

    def test_matches_numpy_complex_spectrum(self):
        x = np.random.default_rng(3).normal(size=128)
        result = compute_fft(x)
        expected = np.fft.fft(x)[:64]
        got = np.array([v.to_complex() for v in result.spectrum])
        np.testing.assert_allclose(got, expected, atol=1e-9)

    def test_stage_count(self):
        for n in (1, 2, 3, 5, 64, 100, 200, 513):
            result = compute_fft(np.ones(n))
            m = next_power_of_two(n)
            self.assertEqual(len(result.stages), 1 + int(math.log2(m)))
            self.assertEqual(result.stage_count, int(math.log2(m)))
            self.assertEqual([s.stage for s in result.stages], list(range(len(result.stages))))
            for snapshot in result.stages:
                self.assertEqual(len(snapshot), m)

    def test_zero_padding_to_256(self):
        x = np.arange(1, 201, dtype=float)
        result = compute_fft(x)
        self.assertEqual(result.input_length, 200)
        self.assertEqual(result.padded_length, 256)

        stage0 = result.stages[0].values
        self.assertEqual(len(stage0), 256)
        padded_slots = [p for p in range(256) if reverse_bits(p, 8) >= 200]
        self.assertEqual(len(padded_slots), 56)
        for p in range(256):
            src = reverse_bits(p, 8)
            expected = 0.0 if src >= 200 else x[src]
            self.assertEqual(stage0[p], ComplexValue(expected, 0.0))

    def test_known_sine_peak(self):
        for freq in (1, 5, 13, 20):
            mags = compute_fft(_sine(freq, 256)).magnitudes()
            peak = int(np.argmax(mags))
            self.assertLessEqual(abs(peak - freq), 1)
            others = np.delete(mags, peak)
            self.assertTrue(np.all(others < 0.1 * mags[peak]))
            self.assertAlmostEqual(mags[peak], 128.0, places=6)

    def test_base_case_single_sample(self):
        result = compute_fft([3.5], "hanning")
        self.assertEqual(len(result.stages), 1)
        self.assertEqual(result.stage_count, 0)
        self.assertEqual(result.spectrum, ())
        self.assertEqual(result.stages[0].values, (ComplexValue(3.5, 0.0),))
        self.assertEqual(result.padded_length, 1)

    def test_empty_input_rejected(self):
        with self.assertRaises(ValueError):
            compute_fft([])

    def test_deterministic(self):
        x = np.random.default_rng(9).normal(size=300)
        first = compute_fft(x, "blackman")
        second = compute_fft(x, "blackman")
        self.assertEqual(first.spectrum, second.spectrum)
        self.assertEqual(first.stages, second.stages)

    def test_snapshots_are_independent_copies(self):
        x = np.random.default_rng(5).normal(size=16)
        result = compute_fft(x)
        expected_stage0 = tuple(bit_reverse_permute([ComplexValue(float(v), 0.0) for v in x]))
        self.assertEqual(result.stages[0].values, expected_stage0)
        for earlier, later in zip(result.stages, result.stages[1:]):
            self.assertNotEqual(earlier.values, later.values)

        arr = result.stages[1].to_array()
        arr[:] = 0
        self.assertNotEqual(result.stages[1].to_array()[0], 0)

    def test_each_stage_is_one_butterfly_pass(self):
        x = np.random.default_rng(11).normal(size=32)
        result = compute_fft(x)
        for s in range(1, len(result.stages)):
            prev = result.stages[s - 1].to_array()
            size = 1 << s
            half = size // 2
            expected = prev.copy()
            for j in range(0, prev.size, size):
                for k in range(half):
                    w = np.exp(-2j * np.pi * k / size)
                    a, b = prev[j + k], prev[j + k + half]
                    expected[j + k] = a + w * b
                    expected[j + k + half] = a - w * b
            np.testing.assert_allclose(result.stages[s].to_array(), expected, atol=1e-12)

    def test_final_stage_holds_full_spectrum(self):
        x = np.random.default_rng(2).normal(size=64)
        last = compute_fft(x).stages[-1].to_array()
        self.assertEqual(last.size, 64)
        np.testing.assert_allclose(last, np.fft.fft(x), atol=1e-9)

    def test_window_is_applied_before_transform(self):
        x = _sine(4.5, 128)
        windowed = compute_fft(x, "hanning")
        manual = compute_fft(apply_window(x, "hanning"), "none")
        self.assertEqual(windowed.window, "hanning")
        self.assertEqual(windowed.spectrum, manual.spectrum)

    def test_window_alias_and_rectangular(self):
        x = _sine(3, 64)
        self.assertEqual(compute_fft(x, "rect").spectrum, compute_fft(x).spectrum)
        self.assertEqual(compute_fft(x, None).window, "none")

    def test_nan_propagates(self):
        result = compute_fft([float("nan"), 1.0, 2.0, 3.0])
        self.assertEqual(len(result.spectrum), 2)
        for value in result.spectrum:
            self.assertTrue(math.isnan(value.real))

    def test_input_not_mutated(self):
        x = np.linspace(-1.0, 1.0, 50)
        original = x.copy()
        compute_fft(x, "hamming")
        np.testing.assert_array_equal(x, original)

    def test_phases_and_magnitudes_exported(self):
        x = np.cos(2.0 * np.pi * 2 * np.arange(16) / 16)
        result = compute_fft(x)
        self.assertAlmostEqual(result.magnitudes()[2], 8.0)
        self.assertAlmostEqual(result.phases()[2], 0.0, places=9)
        self.assertEqual(result.stages[0].phases().size, 16)
        self.assertGreaterEqual(result.elapsed_ms, 0.0)


if __name__ == "__main__":
    unittest.main()
