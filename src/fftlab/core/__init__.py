"""Caller-side orchestration around the transform core.

:class:`TransformSession` replaces "recompute whenever a parameter changes"
with an explicit :meth:`TransformSession.run` call that generates a signal,
runs both transforms, and keeps the last good result.
"""

from .models import AnalysisResult
from .session import TransformSession

__all__ = ["AnalysisResult", "TransformSession"]
