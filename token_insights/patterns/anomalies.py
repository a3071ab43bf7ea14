"""Outlier detection and gap-based clustering"""

import math
from collections.abc import Sequence
from typing import Optional

from ..config.defaults import AnomalyParams, ClusterParams
from ..data.models import Number
from ..errors import InsufficientDataError
from ..models.report import AnomalyReport, ClusterReport

STATISTICAL_OUTLIER = "statistical_outlier"
INSUFFICIENT_DATA = "insufficient_data"


def detect_anomalies(numbers: Sequence[Number],
                     params: Optional[AnomalyParams] = None) -> AnomalyReport:
    """
    Flag values further than k population standard deviations from the mean

    Args:
        numbers: Numeric bucket
        params: min_samples and std_dev_multiplier (k)

    Returns:
        AnomalyReport with the flagged values, threshold, mean and std dev;
        method is 'insufficient_data' when there are too few numbers
    """
    params = params or AnomalyParams()
    if len(numbers) < params.min_samples:
        return AnomalyReport(anomalies=(), method=INSUFFICIENT_DATA)

    center = sum(numbers) / len(numbers)
    deviation = math.sqrt(sum((n - center) ** 2 for n in numbers) / len(numbers))
    threshold = params.std_dev_multiplier * deviation

    return AnomalyReport(
        anomalies=tuple(n for n in numbers if abs(n - center) > threshold),
        method=STATISTICAL_OUTLIER,
        threshold=threshold,
        mean=center,
        std_dev=deviation,
    )


def detect_clusters(numbers: Sequence[Number],
                    params: Optional[ClusterParams] = None) -> ClusterReport:
    """
    Count cluster boundaries as gaps wider than a multiple of the average gap

    Raises:
        InsufficientDataError: With fewer than min_samples numbers; the
            engine reports no cluster block in that case
    """
    params = params or ClusterParams()
    # At least one gap is needed for an average
    required = max(params.min_samples, 2)
    if len(numbers) < required:
        raise InsufficientDataError(
            f"Clustering needs at least {required} numbers",
            required_count=required,
            available_count=len(numbers),
        )

    ordered = sorted(numbers)
    gaps = [current - previous for previous, current in zip(ordered, ordered[1:])]
    average_gap = sum(gaps) / len(gaps)
    large_gaps = sum(1 for gap in gaps if gap > average_gap * params.gap_multiplier)

    return ClusterReport(
        potential_clusters=large_gaps + 1,
        average_gap=average_gap,
        large_gaps=large_gaps,
    )
