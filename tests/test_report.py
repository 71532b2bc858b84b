import numpy as np

from fftlab.core.session import TransformSession
from fftlab.tools.debug import time_block
from fftlab.tools.report import format_stages, format_summary, main


def test_main_prints_summary(capsys) -> None:
    code = main(["-n", "128", "-s", "complex", "-f", "4", "--stages"])
    assert code == 0
    out = capsys.readouterr().out
    assert "Peak bin: 4" in out
    assert "harmonic x1" in out
    assert "DFT time" in out
    assert "stage 7" in out


def test_main_rejects_invalid_length() -> None:
    assert main(["-n", "0"]) == 2
    assert main(["-n", "lots"]) == 2


def test_main_reads_yaml_config(tmp_path, capsys) -> None:
    cfg = tmp_path / "run.yaml"
    cfg.write_text("sample_count: 32\nwindow: hamming\n", encoding="utf-8")
    assert main(["--config", str(cfg), "--no-dft"]) == 0
    out = capsys.readouterr().out
    assert "32 samples, window=hamming" in out
    assert "DFT time: skipped" in out


def test_summary_for_single_sample() -> None:
    result = TransformSession().run(sample_count=1)
    text = format_summary(result)
    assert "no bins below Nyquist" in text
    assert "input (bit-reversed)" in format_stages(result.fft)


def test_summary_counts_use_padded_length() -> None:
    result = TransformSession().run(sample_count=100, run_reference_dft=False)
    assert result.counts.n == 128
    assert np.isfinite(result.counts.speedup)


def test_time_block_emits_when_enabled() -> None:
    messages = []
    with time_block("fft", emitter=messages.append, enabled=True):
        pass
    with time_block("dft", emitter=messages.append, enabled=False):
        pass
    assert len(messages) == 1
    assert messages[0].startswith("[DEBUG] fft took")


def test_summary_reports_signal_level() -> None:
    result = TransformSession().run(sample_count=64, signal_type="square", frequency=2)
    assert "Level:    RMS 1.0000, peak-to-peak 2.0000" in format_summary(result)


def test_noise_summary_has_no_harmonic_note() -> None:
    result = TransformSession().run(sample_count=256, signal_type="noise", seed=0, frequency=1)
    text = format_summary(result)
    assert "Peak bin:" in text
    assert "harmonic" not in text
