"""Numeric trend, parity dominance and progression checks"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import PatternParams
from ..data.models import Number
from ..models.report import PatternRecord, PatternType


def detect_numerical_patterns(numbers: Sequence[Number],
                              params: Optional[PatternParams] = None) -> list[PatternRecord]:
    """
    Detect parity dominance and ascending/descending trends

    Args:
        numbers: Numeric bucket in input order
        params: Pattern thresholds

    Returns:
        Detected patterns; empty when fewer than min_pattern_length numbers
    """
    params = params or PatternParams()
    if len(numbers) < params.min_pattern_length:
        return []

    patterns = []

    even_count = sum(1 for n in numbers if n % 2 == 0)
    odd_count = len(numbers) - even_count

    if even_count > odd_count * params.dominance_ratio:
        patterns.append(PatternRecord(PatternType.EVEN_DOMINANCE, params.dominance_confidence))
    elif odd_count > even_count * params.dominance_ratio:
        patterns.append(PatternRecord(PatternType.ODD_DOMINANCE, params.dominance_confidence))

    ascending = 0
    descending = 0
    for previous, current in zip(numbers, numbers[1:]):
        if current > previous:
            ascending += 1
        elif current < previous:
            descending += 1

    pairs = len(numbers) - 1
    if ascending > descending * params.trend_ratio:
        patterns.append(PatternRecord(PatternType.ASCENDING_TREND, ascending / pairs))
    elif descending > ascending * params.trend_ratio:
        patterns.append(PatternRecord(PatternType.DESCENDING_TREND, descending / pairs))

    return patterns


def is_arithmetic_sequence(numbers: Sequence[Number]) -> bool:
    """True if the sorted numbers have one exact common difference"""
    if len(numbers) < 2:
        return False

    ordered = sorted(numbers)
    difference = ordered[1] - ordered[0]

    return all(current - previous == difference
               for previous, current in zip(ordered[1:], ordered[2:]))


def is_geometric_sequence(numbers: Sequence[Number], tolerance: float = 1e-4) -> bool:
    """True if the sorted numbers share one ratio within an absolute tolerance

    Any zero makes the ratio undefined, so the check fails.
    """
    if len(numbers) < 2 or any(n == 0 for n in numbers):
        return False

    ordered = sorted(numbers)
    ratio = ordered[1] / ordered[0]

    return all(abs(current / previous - ratio) <= tolerance
               for previous, current in zip(ordered[1:], ordered[2:]))
