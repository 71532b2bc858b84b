#!/usr/bin/env python3
"""
Command-line report for one fftlab analysis run.

Generates a signal from ``--config`` (YAML) and/or the command-line options,
runs the reference DFT and the staged FFT through
:class:`~fftlab.core.session.TransformSession`, and prints:

  * the signal RMS and peak-to-peak level
  * the peak bin and whether it sits on a harmonic of the fundamental
  * DFT vs FFT wall time and the theoretical operation-count speedup
  * optionally (``--stages``) the peak magnitude of every butterfly stage

``--plot`` additionally opens Matplotlib figures of the signal components,
the one-sided spectrum, and the stage-by-stage magnitudes.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..analysis.features import harmonic_number, peak_bin, peak_to_peak, rms
from ..analysis.fft import FftResult
from ..analysis.windows import WINDOW_KINDS
from ..config.runtime import load_config
from ..core.models import AnalysisResult
from ..core.session import TransformSession
from ..signals.generator import SIGNAL_TYPES, InvalidLength

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- # text
def format_summary(result: AnalysisResult) -> str:
    fft = result.fft
    signal = result.signal
    lines = [
        f"Signal:   {signal.label} ({len(signal)} samples, window={fft.window})",
        f"Level:    RMS {rms(signal.samples):.4f}, peak-to-peak {peak_to_peak(signal.samples):.4f}",
        f"Padded:   {fft.padded_length} points, {fft.stage_count} butterfly stages",
    ]
    magnitudes = fft.magnitudes()
    if magnitudes.size:
        peak = peak_bin(magnitudes, skip_dc=True)
        # noise has no fundamental to be a harmonic of
        harmonic = None
        if signal.signal_type != "noise":
            harmonic = harmonic_number(peak, signal.frequency)
        note = f" (harmonic x{harmonic})" if harmonic else ""
        lines.append(f"Peak bin: {peak}, magnitude {magnitudes[peak]:.4f}{note}")
    else:
        lines.append("Peak bin: n/a (no bins below Nyquist)")

    if result.dft is not None:
        lines.append(f"DFT time: {result.dft.elapsed_ms:.2f} ms")
    else:
        lines.append("DFT time: skipped")
    lines.append(f"FFT time: {fft.elapsed_ms:.2f} ms")
    counts = result.counts
    lines.append(
        f"Ops:      DFT ~{counts.dft}, FFT ~{counts.fft} "
        f"(theoretical speedup x{counts.speedup:.1f})"
    )
    return "\n".join(lines)


def format_stages(fft: FftResult) -> str:
    lines = []
    for snapshot in fft.stages:
        name = "input (bit-reversed)" if snapshot.stage == 0 else f"stage {snapshot.stage}"
        mags = snapshot.magnitudes()
        lines.append(f"{name:>22}: max |X| = {mags.max():.4f}, mean |X| = {mags.mean():.4f}")
    return "\n".join(lines)


# --------------------------------------------------------------------------- # plotting
def build_figure(result: AnalysisResult):
    fig, (ax_time, ax_freq, ax_stages) = plt.subplots(3, 1, figsize=(9, 9))

    for component in result.signal.components:
        ax_time.plot(component.data, label=component.name, linewidth=1)
    ax_time.set_title("Time domain")
    ax_time.legend(loc="upper right", fontsize="small")

    magnitudes = result.fft.magnitudes()
    ax_freq.bar(np.arange(magnitudes.size), magnitudes, width=1.0, label="FFT")
    if result.dft is not None:
        ax_freq.plot(result.dft.nyquist(), "r.", markersize=3, label="DFT")
    ax_freq.set_title("Spectrum (up to Nyquist)")
    ax_freq.set_xlabel("Bin")
    ax_freq.legend(loc="upper right", fontsize="small")

    stage_mags = np.vstack([s.magnitudes() for s in result.fft.stages])
    ax_stages.imshow(stage_mags, aspect="auto", interpolation="nearest", cmap="viridis")
    ax_stages.set_title("Butterfly stages (|X|)")
    ax_stages.set_xlabel("Index")
    ax_stages.set_ylabel("Stage")

    fig.tight_layout()
    return fig


# --------------------------------------------------------------------------- # CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the staged FFT on a generated signal and report the results."
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="YAML config file (keys: sample_count, signal_type, frequency, window, seed).",
    )
    parser.add_argument("-n", "--samples", type=str, help="Number of samples to generate.")
    parser.add_argument(
        "-s",
        "--signal",
        type=str,
        choices=list(SIGNAL_TYPES) + ["harmonic"],
        help="Signal type.",
    )
    parser.add_argument("-f", "--frequency", type=float, help="Fundamental frequency (1-20).")
    parser.add_argument("-w", "--window", type=str, choices=list(WINDOW_KINDS), help="Window.")
    parser.add_argument("--seed", type=int, help="Seed for the noise generator.")
    parser.add_argument("--no-dft", action="store_true", help="Skip the reference DFT.")
    parser.add_argument("--stages", action="store_true", help="Print per-stage magnitudes.")
    parser.add_argument("--plot", action="store_true", help="Show Matplotlib figures.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config).expanduser() if args.config else None
    if config_path is not None and not config_path.exists():
        parser.error(f"Config file not found: {config_path}")
    session = TransformSession(load_config(config_path))

    overrides = {
        "sample_count": args.samples,
        "signal_type": args.signal,
        "frequency": args.frequency,
        "window": args.window,
        "seed": args.seed,
    }
    if args.no_dft:
        overrides["run_reference_dft"] = False

    try:
        result = session.run(**overrides)
    except InvalidLength as exc:
        logger.error("%s", exc)
        return 2

    print(format_summary(result))
    if args.stages:
        print(format_stages(result.fft))
    if args.plot:
        build_figure(result)
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
