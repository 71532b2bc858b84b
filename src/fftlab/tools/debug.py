"""Minimal helpers for opt-in debug/instrumentation hooks."""

from __future__ import annotations

import os
import sys
import time
from contextlib import contextmanager
from typing import Callable, Iterator

DEBUG_FFTLAB = os.getenv("FFTLAB_DEBUG", "").lower() in {"1", "true", "yes", "on"}


@contextmanager
def time_block(
    label: str,
    *,
    emitter: Callable[[str], None] | None = None,
    enabled: bool | None = None,
) -> Iterator[None]:
    """
    Context manager that emits elapsed time when debugging is enabled.

    ``enabled`` overrides the ``FFTLAB_DEBUG`` environment switch.
    """
    active = DEBUG_FFTLAB if enabled is None else enabled
    if not active:
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        target = emitter or (lambda msg: print(msg, file=sys.stderr, flush=True))
        target(f"[DEBUG] {label} took {elapsed_ms:.3f} ms")
