"""Collect advisory labels from the text labeling collaborator"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

import structlog

from ..errors import CollaboratorUnavailableError
from ..labeling.base import ERROR_LABELS, UNAVAILABLE_LABELS, LabelKind, LabelRequest, TextLabeler
from ..models.report import LabelInsights

logger = structlog.get_logger(__name__)


def fallback_labels() -> LabelInsights:
    """Labels reported when no collaborator is available"""
    return LabelInsights(
        analysis=UNAVAILABLE_LABELS[LabelKind.ANALYSIS],
        sentiment=UNAVAILABLE_LABELS[LabelKind.SENTIMENT],
        recommendation=UNAVAILABLE_LABELS[LabelKind.RECOMMENDATION],
        confidence=0.0,
        enabled=False,
    )


def label_confidence(analysis: str, sentiment: str, recommendation: str) -> float:
    """0.5 base, plus 0.2 / 0.15 / 0.15 for each label that is not a failure word

    A "review" recommendation is the per-call error word but still earns its
    bonus; only "retry" and "error" count as recommendation failures.
    """
    confidence = 0.5

    if analysis and analysis not in ("error", "unavailable"):
        confidence += 0.2
    if sentiment and sentiment not in ("unknown", "error"):
        confidence += 0.15
    if recommendation and recommendation not in ("retry", "error"):
        confidence += 0.15

    return min(1.0, confidence)


def _safe_label(labeler: TextLabeler, request: LabelRequest) -> tuple[str, bool]:
    """
    Call the labeler, substituting the error label for any failure

    Returns:
        The label and whether the collaborator reported itself unavailable
    """
    try:
        return labeler.label(request), False
    except CollaboratorUnavailableError as e:
        logger.warning(
            "Labeler unavailable, using fallback",
            labeler=labeler.name,
            kind=request.kind.value,
            error=str(e),
            retryable=e.retryable
        )
        return ERROR_LABELS[request.kind], True
    except Exception as e:
        logger.error(
            "Labeler failed unexpectedly, using fallback",
            labeler=labeler.name,
            kind=request.kind.value,
            error=str(e),
            exc_info=True
        )
        return ERROR_LABELS[request.kind], False


def collect_labels(labeler: Optional[TextLabeler], summary: dict[str, Any],
                   parallel: bool = True, max_workers: int = 3) -> LabelInsights:
    """
    Ask the collaborator for analysis, sentiment and recommendation labels

    The three calls are independent and run in a thread pool when parallel
    is set. A missing collaborator, or one that is unreachable on every call,
    yields the fallback labels; any other failing call yields that kind's
    error label. Never raises.
    """
    if labeler is None or not labeler.available:
        return fallback_labels()

    requests = [LabelRequest(kind, summary) for kind in LabelKind]

    if parallel:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="labeler") as executor:
            futures = [executor.submit(_safe_label, labeler, request) for request in requests]
            results = [future.result() for future in futures]
    else:
        results = [_safe_label(labeler, request) for request in requests]

    if all(unavailable for _, unavailable in results):
        logger.warning("Labeler unreachable for every call, reporting fallback labels",
                       labeler=labeler.name)
        return fallback_labels()

    analysis, sentiment, recommendation = (label for label, _ in results)

    return LabelInsights(
        analysis=analysis,
        sentiment=sentiment,
        recommendation=recommendation,
        confidence=label_confidence(analysis, sentiment, recommendation),
        enabled=True,
    )
