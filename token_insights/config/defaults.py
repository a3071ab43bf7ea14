"""Default configuration parameters for the token insight pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PatternParams:
    """Numeric and alphabetic pattern detection parameters."""
    min_pattern_length: int = 3                      # Min bucket size before patterns are reported
    dominance_ratio: float = 2.0                     # Even/odd and case dominance multiplier
    dominance_confidence: float = 0.8                # Fixed confidence for dominance patterns
    trend_ratio: float = 1.5                         # Ascending vs descending pair multiplier
    geometric_tolerance: float = 1e-4                # Absolute tolerance on consecutive ratios


@dataclass(frozen=True)
class AnomalyParams:
    """Outlier detection parameters."""
    min_samples: int = 3
    std_dev_multiplier: float = 2.0


@dataclass(frozen=True)
class ClusterParams:
    """Gap-based clustering parameters."""
    min_samples: int = 3
    gap_multiplier: float = 2.0


@dataclass(frozen=True)
class ConfidenceParams:
    """Report confidence scoring parameters."""
    base_score: float = 0.5
    size_threshold: int = 10           # More than this many elements earns size_bonus
    size_bonus: float = 0.2
    mixed_bonus: float = 0.1           # Both numbers and alphabets present
    unique_bonus: float = 0.1          # Every element distinct
    file_bonus: float = 0.1            # Valid file attachment present
    max_score: float = 1.0


@dataclass(frozen=True)
class ExecutionParams:
    """Concurrency switches for independent computations."""
    parallel_number_theory: bool = False
    parallel_labels: bool = True
    max_workers: int = 4


@dataclass(frozen=True)
class LabelerParams:
    """Text labeling collaborator parameters."""
    enabled: bool = True
    endpoint: str = "https://generativelanguage.googleapis.com/v1beta/models"
    model: str = "gemini-1.5-flash"
    api_key_env: str = "GEMINI_API_KEY"
    timeout_seconds: int = 10


@dataclass(frozen=True)
class LimitsParams:
    """Request boundary limits."""
    max_tokens: int = 1000
    max_string_length: int = 100
    max_abs_number: int = 999_999_999


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    patterns: PatternParams
    anomalies: AnomalyParams
    clusters: ClusterParams
    confidence: ConfidenceParams
    execution: ExecutionParams
    labeler: LabelerParams
    limits: LimitsParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        patterns=PatternParams(),
        anomalies=AnomalyParams(),
        clusters=ClusterParams(),
        confidence=ConfidenceParams(),
        execution=ExecutionParams(),
        labeler=LabelerParams(),
        limits=LimitsParams(),
    )
