"""Pattern report assembly"""

from collections.abc import Sequence
from typing import Optional

from ..config.defaults import PatternParams
from ..data.models import Number
from ..models.report import PatternReport, SequenceAnalysis
from .alphabetic import detect_alphabetical_patterns, is_alphabetical_sequence
from .numeric import detect_numerical_patterns, is_arithmetic_sequence, is_geometric_sequence
from .repetition import concatenate_tokens, find_repeating_pattern


def detect_patterns(numbers: Sequence[Number], alphabets: Sequence[str],
                    params: Optional[PatternParams] = None) -> PatternReport:
    """
    Run every pattern check over both buckets

    Args:
        numbers: Numeric bucket in input order
        alphabets: Alphabetic bucket in input order
        params: Pattern thresholds

    Returns:
        PatternReport with numeric and alphabetic records and sequence analysis
    """
    params = params or PatternParams()

    sequence_analysis = SequenceAnalysis(
        is_arithmetic=is_arithmetic_sequence(numbers),
        is_geometric=is_geometric_sequence(numbers, params.geometric_tolerance),
        is_alphabetical=is_alphabetical_sequence(alphabets),
        has_repetition=find_repeating_pattern(concatenate_tokens(numbers, alphabets)),
    )

    return PatternReport(
        numerical=tuple(detect_numerical_patterns(numbers, params)),
        alphabetical=tuple(detect_alphabetical_patterns(alphabets, params)),
        sequence_analysis=sequence_analysis,
    )
