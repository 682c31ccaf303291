from __future__ import annotations

from .health_scorer import PackageHealthScorer
from .batch_analyzer import BatchAnalyzer, BATCH_FAILURE

__all__ = [
    "PackageHealthScorer",
    "BatchAnalyzer",
    "BATCH_FAILURE",
]
