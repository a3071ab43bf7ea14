"""
Token Insights - Mixed Token Classification and Analysis Engine

Classifies a heterogeneous array of raw tokens into numbers and single
letters, then derives number-theory results, descriptive statistics and
heuristic pattern, outlier and clustering insights in one immutable report.
"""

__version__ = "0.1.0"
__author__ = "Token Insights Team"

from .engine import InsightEngine, analyze  # noqa: E402

__all__ = ["InsightEngine", "analyze", "__version__"]
