"""
Main analysis engine coordinator.

Orchestrates the token insight pipeline: classification, number theory,
statistics, pattern and anomaly detection, and report aggregation.
"""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .config.loader import ConfigLoader
from .data.classifier import classify
from .data.models import FileInfo, RawToken
from .data.validators import RequestValidator
from .errors import AnalysisError, DataQualityError
from .insights.aggregator import InsightAggregator
from .labeling.base import TextLabeler
from .labeling.http_labeler import HttpTextLabeler
from .logging.config import get_analysis_logger, log_stage_result
from .metrics.calculator import MathCalculator
from .metrics.statistics import count_categories, summarize
from .models.report import InsightReport
from .patterns.alphabetic import analyze_text
from .patterns.anomalies import detect_anomalies, detect_clusters
from .patterns.detector import detect_patterns
from .utils.time import elapsed_ms, start_timer, to_iso, utc_now

ALGORITHM_VERSION = "2.0.0"

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class InsightEngine:
    """
    Main coordinator for the token insight pipeline.

    Manages the analysis pipeline:
    Raw tokens → Classifier → {Math, Statistics, Patterns} → Aggregator → Report

    The engine keeps configuration and collaborators only; each analyze()
    call works on its own inputs and returns an independent report.
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 labeler: Optional[TextLabeler] = None) -> None:
        """Initialize the engine with a configuration and optional labeler."""
        self.logger = logger
        self.analysis_logger = get_analysis_logger(__name__)

        self.config = config or get_default_config()
        self.labeler = labeler

        self.math_calculator = MathCalculator(self.config)
        self.aggregator = InsightAggregator(self.config, labeler)
        self.validator = RequestValidator(self.config.limits)

        self.logger.debug(
            "Insight engine initialized",
            labeler=labeler.name if labeler else None,
            labeler_available=bool(labeler and labeler.available)
        )

    @classmethod
    def from_config_dir(
        cls,
        config_dir: Optional[str] = None,
        profile: str = "default",
        overrides: Optional[dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "InsightEngine":
        """
        Build an engine from layered configuration.

        The HTTP labeler is attached when the labeler section is enabled; it
        reads its API key from the configured environment variable and falls
        back to the documented labels when the key is absent.
        """
        loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        config = loader.load(profile, overrides)

        labeler = None
        if config.labeler.enabled:
            labeler = HttpTextLabeler.from_params(config.labeler, environ)

        return cls(config=config, labeler=labeler)

    def analyze(self, tokens: Iterable[RawToken],
                file_info: Optional[FileInfo] = None) -> InsightReport:
        """
        Analyze a raw token sequence.

        Args:
            tokens: Strings and numbers in request order
            file_info: Optional attachment description

        Returns:
            Immutable InsightReport

        Raises:
            AnalysisError: If a stage fails unexpectedly
        """
        classified = classify(tokens)
        numbers, alphabets = classified.numbers, classified.alphabets

        self.analysis_logger.debug(
            "Tokens classified",
            numbers_count=len(numbers),
            alphabets_count=len(alphabets),
            dropped_count=classified.dropped
        )

        math_summary = self._run_stage("math", self.math_calculator.calculate, numbers)
        stats = self._run_stage("stats", summarize, numbers)
        category_counts = self._run_stage("category_counts", count_categories, numbers)

        patterns = self._run_stage("patterns", detect_patterns, numbers, alphabets, self.config.patterns)
        anomalies = self._run_stage("anomalies", detect_anomalies, numbers, self.config.anomalies)
        clusters = self._run_stage("clusters", detect_clusters, numbers, self.config.clusters)
        text_analysis = self._run_stage("text_analysis", analyze_text, alphabets)

        report = self.aggregator.aggregate(
            classified=classified,
            math_summary=math_summary,
            stats=stats,
            category_counts=category_counts,
            patterns=patterns,
            anomalies=anomalies,
            clusters=clusters,
            text_analysis=text_analysis,
            file_info=file_info,
        )

        self.logger.info(
            "Analysis completed",
            numbers_count=len(numbers),
            alphabets_count=len(alphabets),
            anomalies_count=len(report.anomalies.anomalies),
            confidence_score=report.confidence_score,
            labels_enabled=report.labels.enabled
        )

        return report

    def process_request(self, payload: Any) -> dict[str, Any]:
        """
        Validate a request payload, analyze it and attach processing metadata.

        Args:
            payload: Decoded body of the form {"data": [...], "file": {...}}

        Returns:
            Response dict with is_success, report and metadata

        Raises:
            MalformedDataError: If the payload breaks a boundary rule
        """
        started_at = utc_now()
        timer = start_timer()

        data = self.validator.validate_payload(payload)
        file_info = FileInfo.from_dict(payload.get("file"))

        report = self.analyze(data, file_info)

        return {
            "is_success": True,
            "report": report.to_dict(),
            "metadata": {
                "analysis_timestamp": to_iso(started_at),
                "processing_time_ms": elapsed_ms(timer),
                "algorithm_version": ALGORITHM_VERSION,
                "data_count": len(data),
                "dropped_count": report.dropped_tokens,
                "labeler_status": "enabled" if report.labels.enabled else "disabled",
            },
        }

    def _run_stage(self, stage: str, func: Callable[..., T], *args: Any) -> Optional[T]:
        """
        Run one stage, turning data quality issues into a suppressed block.

        Raises:
            AnalysisError: For any failure that is not a data quality issue
        """
        try:
            result = func(*args)

        except DataQualityError as e:
            log_stage_result(self.analysis_logger, stage, produced=False, reason=str(e))
            return None

        except AnalysisError:
            raise

        except Exception as e:
            self.logger.error("Analysis stage failed", stage=stage, error=str(e))
            raise AnalysisError(
                f"{stage} stage failed: {str(e)}",
                stage=stage
            ) from e

        log_stage_result(self.analysis_logger, stage, produced=result is not None)
        return result


def analyze(tokens: Iterable[RawToken], file_info: Optional[FileInfo] = None,
            labeler: Optional[TextLabeler] = None,
            config: Optional[DefaultConfig] = None) -> InsightReport:
    """Analyze tokens with a one-off engine (default configuration, no labeler by default)."""
    return InsightEngine(config=config, labeler=labeler).analyze(tokens, file_info)
