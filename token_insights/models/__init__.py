"""Report value objects produced by the analysis pipeline"""

from .report import (
    AnomalyReport,
    CategoryCounts,
    ClusterReport,
    ComplexityAssessment,
    FileInsights,
    InsightReport,
    LabelInsights,
    MathSummary,
    PatternRecord,
    PatternReport,
    PatternType,
    QualityAssessment,
    Recommendation,
    RepeatingPattern,
    SequenceAnalysis,
    StatisticalSummary,
    TextAnalysis,
)

__all__ = [
    "AnomalyReport",
    "CategoryCounts",
    "ClusterReport",
    "ComplexityAssessment",
    "FileInsights",
    "InsightReport",
    "LabelInsights",
    "MathSummary",
    "PatternRecord",
    "PatternReport",
    "PatternType",
    "QualityAssessment",
    "Recommendation",
    "RepeatingPattern",
    "SequenceAnalysis",
    "StatisticalSummary",
    "TextAnalysis",
]
