"""Insight aggregation and advisory labels"""

from .aggregator import (
    InsightAggregator,
    analyze_file,
    assess_complexity,
    assess_quality,
    confidence_score,
    generate_recommendations,
)
from .labels import collect_labels, fallback_labels, label_confidence

__all__ = [
    "InsightAggregator",
    "analyze_file",
    "assess_complexity",
    "assess_quality",
    "collect_labels",
    "confidence_score",
    "fallback_labels",
    "generate_recommendations",
    "label_confidence",
]
