"""Data models for insight reports

Every object here is built once per analysis and never mutated; to_dict()
gives the JSON-ready view used at the request boundary.
"""

import math
import sys
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional, Union

Number = Union[int, float]


class PatternType(str, Enum):
    """Heuristic pattern labels."""
    EVEN_DOMINANCE = "even_dominance"
    ODD_DOMINANCE = "odd_dominance"
    ASCENDING_TREND = "ascending_trend"
    DESCENDING_TREND = "descending_trend"
    UPPERCASE_DOMINANCE = "uppercase_dominance"
    LOWERCASE_DOMINANCE = "lowercase_dominance"
    VOWEL_HEAVY = "vowel_heavy"


@dataclass(frozen=True)
class PatternRecord:
    """One detected pattern with a local heuristic confidence in [0, 1]"""
    type: PatternType
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "confidence": self.confidence}


@dataclass(frozen=True)
class RepeatingPattern:
    """Shortest prefix that rebuilds the concatenated token string"""
    pattern: str
    length: int


@dataclass(frozen=True)
class SequenceAnalysis:
    is_arithmetic: bool
    is_geometric: bool
    is_alphabetical: bool
    has_repetition: Optional[RepeatingPattern] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_arithmetic": self.is_arithmetic,
            "is_geometric": self.is_geometric,
            "is_alphabetical": self.is_alphabetical,
            "has_repetition": asdict(self.has_repetition) if self.has_repetition else False,
        }


@dataclass(frozen=True)
class PatternReport:
    numerical: tuple[PatternRecord, ...]
    alphabetical: tuple[PatternRecord, ...]
    sequence_analysis: SequenceAnalysis

    def to_dict(self) -> dict[str, Any]:
        return {
            "numerical": [record.to_dict() for record in self.numerical],
            "alphabetical": [record.to_dict() for record in self.alphabetical],
            "sequence_analysis": self.sequence_analysis.to_dict(),
        }


@dataclass(frozen=True)
class MathSummary:
    """Arithmetic aggregates and number theory results for the numeric bucket"""
    sum: Number
    product: Number
    max: Number
    min: Number
    average: float
    fibonacci: tuple[int, ...]
    primes: tuple[Number, ...]
    lcm: Optional[int] = None
    hcf: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        # Values beyond double range render as null
        data = _plain(self)
        data["product"] = _finite_or_none(self.product)
        data["lcm"] = _finite_or_none(self.lcm)
        return data


@dataclass(frozen=True)
class StatisticalSummary:
    mean: float
    median: Number
    mode: Optional[tuple[Number, ...]]
    range: Number
    std_dev: float
    skewness: float
    kurtosis: float                  # Excess kurtosis
    is_normal: bool = False          # Mean/median closeness hint, not a test


@dataclass(frozen=True)
class CategoryCounts:
    total_numbers: int
    unique_numbers: int
    even: int
    odd: int
    positive: int
    negative: int
    zero: int
    perfect_squares: int
    fibonacci_numbers: int
    prime_numbers: int
    composite_numbers: int


@dataclass(frozen=True)
class AnomalyReport:
    """Outliers beyond the configured number of standard deviations"""
    anomalies: tuple[Number, ...]
    method: str
    threshold: Optional[float] = None
    mean: Optional[float] = None
    std_dev: Optional[float] = None


@dataclass(frozen=True)
class ClusterReport:
    potential_clusters: int
    average_gap: float
    large_gaps: int


@dataclass(frozen=True)
class TextAnalysis:
    character_frequency: Mapping[str, int]       # Read-only view
    uppercase: int
    lowercase: int
    vowel_consonant_ratio: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "character_frequency": dict(self.character_frequency),
            "case_distribution": {"uppercase": self.uppercase, "lowercase": self.lowercase},
            "vowel_consonant_ratio": self.vowel_consonant_ratio,
        }


@dataclass(frozen=True)
class ComplexityAssessment:
    level: str                       # 'low', 'medium' or 'high'
    score: int
    data_size: int
    number_diversity: float
    alphabet_diversity: float
    numerical_range: Number


@dataclass(frozen=True)
class QualityAssessment:
    completeness: float
    consistency: float
    validity: float
    uniqueness: float
    overall_score: float


@dataclass(frozen=True)
class Recommendation:
    category: str
    suggestion: str
    priority: str                    # 'low', 'medium' or 'high'


@dataclass(frozen=True)
class FileInsights:
    type_category: str
    size_category: Optional[str]
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class LabelInsights:
    """Advisory one-word labels from the text labeling collaborator"""
    analysis: str
    sentiment: str
    recommendation: str
    confidence: float
    enabled: bool = False


@dataclass(frozen=True)
class InsightReport:
    """Complete analysis of one token sequence"""
    numbers: tuple[Number, ...]
    alphabets: tuple[str, ...]
    highest_lowercase_alphabet: Optional[str]
    math: Optional[MathSummary]
    stats: Optional[StatisticalSummary]
    category_counts: Optional[CategoryCounts]
    patterns: PatternReport
    anomalies: AnomalyReport
    clusters: Optional[ClusterReport]
    text_analysis: TextAnalysis
    complexity: ComplexityAssessment
    quality: Optional[QualityAssessment]
    labels: LabelInsights
    confidence_score: float
    recommendations: tuple[Recommendation, ...] = ()
    file_insights: Optional[FileInsights] = None
    dropped_tokens: int = 0

    def has_numbers(self) -> bool:
        return bool(self.numbers)

    def has_alphabets(self) -> bool:
        return bool(self.alphabets)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view of the report"""
        return {
            "numbers": list(self.numbers),
            "alphabets": list(self.alphabets),
            "highest_lowercase_alphabet": self.highest_lowercase_alphabet,
            "math": self.math.to_dict() if self.math else None,
            "stats": _plain(self.stats),
            "category_counts": _plain(self.category_counts),
            "patterns": self.patterns.to_dict(),
            "anomalies": _plain(self.anomalies),
            "clusters": _plain(self.clusters),
            "text_analysis": self.text_analysis.to_dict(),
            "complexity": _plain(self.complexity),
            "quality": _plain(self.quality),
            "recommendations": [asdict(item) for item in self.recommendations],
            "file_insights": _plain(self.file_insights),
            "labels": _plain(self.labels),
            "confidence_score": self.confidence_score,
        }


def _plain(obj: Any) -> Optional[dict[str, Any]]:
    """asdict with tuples turned into lists"""
    if obj is None:
        return None
    return {key: list(value) if isinstance(value, tuple) else value
            for key, value in asdict(obj).items()}


def _finite_or_none(value: Optional[Number]) -> Optional[Number]:
    if value is None or abs(value) > sys.float_info.max:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value
