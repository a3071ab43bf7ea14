"""Insight aggregation: report assembly and heuristic scoring"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import ConfidenceParams, DefaultConfig, get_default_config
from ..data.models import ClassifiedTokens, FileInfo, Number
from ..labeling.base import TextLabeler
from ..models.report import (
    AnomalyReport,
    CategoryCounts,
    ClusterReport,
    ComplexityAssessment,
    FileInsights,
    InsightReport,
    MathSummary,
    PatternReport,
    QualityAssessment,
    Recommendation,
    StatisticalSummary,
    TextAnalysis,
)
from .labels import collect_labels


def confidence_score(classified: ClassifiedTokens, file_info: Optional[FileInfo] = None,
                     params: Optional[ConfidenceParams] = None) -> float:
    """
    Bounded report confidence from completeness and uniqueness heuristics

    Independent of the per-pattern confidences.
    """
    params = params or ConfidenceParams()
    numbers, alphabets = classified.numbers, classified.alphabets

    score = params.base_score

    if classified.total > params.size_threshold:
        score += params.size_bonus
    if numbers and alphabets:
        score += params.mixed_bonus
    if len(set(numbers) | set(alphabets)) == classified.total:
        score += params.unique_bonus
    if file_info is not None and file_info.file_valid:
        score += params.file_bonus

    return min(params.max_score, score)


def assess_complexity(numbers: Sequence[Number], alphabets: Sequence[str]) -> ComplexityAssessment:
    """Score size, numeric range and diversity into a low/medium/high level"""
    total = len(numbers) + len(alphabets)
    unique_numbers = len(set(numbers))
    unique_alphabets = len(set(alphabets))
    numerical_range = max(numbers) - min(numbers) if numbers else 0

    score = 0

    if total > 50:
        score += 3
    elif total > 20:
        score += 2
    elif total > 10:
        score += 1

    if numerical_range > 1000:
        score += 2
    elif numerical_range > 100:
        score += 1

    diversity = (unique_numbers + unique_alphabets) / total if total else 0.0
    if diversity > 0.8:
        score += 2
    elif diversity > 0.5:
        score += 1

    if score >= 6:
        level = "high"
    elif score >= 3:
        level = "medium"
    else:
        level = "low"

    return ComplexityAssessment(
        level=level,
        score=score,
        data_size=total,
        number_diversity=unique_numbers / (len(numbers) or 1),
        alphabet_diversity=unique_alphabets / (len(alphabets) or 1),
        numerical_range=numerical_range,
    )


def assess_quality(numbers: Sequence[Number], alphabets: Sequence[str]) -> Optional[QualityAssessment]:
    """Completeness, consistency, validity and uniqueness; None with no elements"""
    total = len(numbers) + len(alphabets)
    if total == 0:
        return None

    consistency = 1.0
    if any(abs(n) > 1e10 for n in numbers):
        consistency -= 0.2
    if any(len(letter) != 1 for letter in alphabets):
        consistency -= 0.3
    consistency = max(0.0, consistency)

    # Input passed boundary validation and classification to get here
    completeness = 1.0
    validity = 1.0
    uniqueness = len(set(numbers) | set(alphabets)) / total

    return QualityAssessment(
        completeness=completeness,
        consistency=consistency,
        validity=validity,
        uniqueness=uniqueness,
        overall_score=(completeness + consistency + validity + uniqueness) / 4,
    )


def generate_recommendations(numbers: Sequence[Number], alphabets: Sequence[str],
                             math_summary: Optional[MathSummary]) -> list[Recommendation]:
    """Rule-based processing suggestions"""
    recommendations = []

    if len(numbers) > len(alphabets) * 3:
        recommendations.append(Recommendation(
            category="data_processing",
            suggestion="Consider separate numerical analysis pipeline",
            priority="medium",
        ))

    if len(numbers) > 100:
        recommendations.append(Recommendation(
            category="performance",
            suggestion="Implement batch processing for large datasets",
            priority="high",
        ))

    if math_summary is not None and math_summary.primes:
        recommendations.append(Recommendation(
            category="analysis",
            suggestion="Prime numbers detected - consider cryptographic applications",
            priority="low",
        ))

    return recommendations


def categorize_file_type(mime_type: Optional[str]) -> str:
    mime_type = mime_type or ""
    if mime_type.startswith("image/"):
        return "image"
    if mime_type.startswith("text/"):
        return "text"
    if "json" in mime_type:
        return "data"
    if "pdf" in mime_type:
        return "document"
    return "binary"


def categorize_file_size(size_kb: Optional[float]) -> Optional[str]:
    if size_kb is None:
        return None
    if size_kb < 10:
        return "small"
    if size_kb < 100:
        return "medium"
    if size_kb < 1000:
        return "large"
    return "very_large"


def analyze_file(file_info: Optional[FileInfo]) -> Optional[FileInsights]:
    """Type/size categories and hints for a valid attachment"""
    if file_info is None or not file_info.file_valid:
        return None

    recommendations = []
    if file_info.size_kb is not None and file_info.size_kb > 1000:
        recommendations.append("Consider file compression")
    if file_info.mime_type == "application/octet-stream":
        recommendations.append("File type unclear - consider adding file extension")

    return FileInsights(
        type_category=categorize_file_type(file_info.mime_type),
        size_category=categorize_file_size(file_info.size_kb),
        recommendations=tuple(recommendations),
    )


class InsightAggregator:
    """Merges the component outputs into one InsightReport."""

    def __init__(self, config: Optional[DefaultConfig] = None,
                 labeler: Optional[TextLabeler] = None):
        self.config = config or get_default_config()
        self.labeler = labeler

    def aggregate(
        self,
        classified: ClassifiedTokens,
        math_summary: Optional[MathSummary],
        stats: Optional[StatisticalSummary],
        category_counts: Optional[CategoryCounts],
        patterns: PatternReport,
        anomalies: AnomalyReport,
        clusters: Optional[ClusterReport],
        text_analysis: TextAnalysis,
        file_info: Optional[FileInfo] = None,
    ) -> InsightReport:
        """
        Build the final report

        Args:
            classified: Classifier output
            math_summary: Math block, None without numbers
            stats: Statistical summary, None without numbers
            category_counts: Category counts, None without numbers
            patterns: Pattern report
            anomalies: Outlier report
            clusters: Cluster report, None with too few numbers
            text_analysis: Alphabetic statistics
            file_info: Optional attachment description

        Returns:
            Immutable InsightReport
        """
        numbers, alphabets = classified.numbers, classified.alphabets

        complexity = assess_complexity(numbers, alphabets)
        quality = assess_quality(numbers, alphabets)

        labels = collect_labels(
            self.labeler,
            self._label_summary(classified, math_summary, complexity, quality, patterns, file_info),
            parallel=self.config.execution.parallel_labels,
            max_workers=self.config.execution.max_workers,
        )

        return InsightReport(
            numbers=numbers,
            alphabets=alphabets,
            highest_lowercase_alphabet=classified.highest_lowercase,
            math=math_summary,
            stats=stats,
            category_counts=category_counts,
            patterns=patterns,
            anomalies=anomalies,
            clusters=clusters,
            text_analysis=text_analysis,
            complexity=complexity,
            quality=quality,
            labels=labels,
            confidence_score=confidence_score(classified, file_info, self.config.confidence),
            recommendations=tuple(generate_recommendations(numbers, alphabets, math_summary)),
            file_insights=analyze_file(file_info),
            dropped_tokens=classified.dropped,
        )

    def _label_summary(self, classified, math_summary, complexity, quality, patterns, file_info) -> dict:
        """Plain summary handed to the labeling collaborator"""
        pattern_types = [record.type.value for record in patterns.numerical + patterns.alphabetical]
        return {
            "numbers": list(classified.numbers),
            "alphabets": list(classified.alphabets),
            "has_math": math_summary is not None,
            "file_valid": bool(file_info and file_info.file_valid),
            "complexity": complexity.level,
            "quality": round(quality.overall_score, 2) if quality else None,
            "patterns": ", ".join(pattern_types) or "none",
        }
