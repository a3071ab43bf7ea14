"""Tests for numeric pattern detection."""

import pytest

from token_insights.config.defaults import PatternParams
from token_insights.models.report import PatternRecord, PatternType
from token_insights.patterns.numeric import (
    detect_numerical_patterns,
    is_arithmetic_sequence,
    is_geometric_sequence,
)


class TestDetectNumericalPatterns:
    """Test suite for parity dominance and trends."""

    def test_even_dominance_and_ascending_trend(self) -> None:
        """Test a mostly even, mostly ascending set."""
        patterns = detect_numerical_patterns([2, 4, 6, 8, 1])

        assert patterns == [
            PatternRecord(PatternType.EVEN_DOMINANCE, 0.8),
            PatternRecord(PatternType.ASCENDING_TREND, 0.75),
        ]

    def test_odd_dominance(self) -> None:
        """Test a strictly ascending odd set."""
        patterns = detect_numerical_patterns([1, 3, 5])

        assert patterns == [
            PatternRecord(PatternType.ODD_DOMINANCE, 0.8),
            PatternRecord(PatternType.ASCENDING_TREND, 1.0),
        ]

    def test_descending_without_dominance(self) -> None:
        """Test that a balanced parity split reports only the trend."""
        patterns = detect_numerical_patterns([5, 4, 3, 2, 1])
        assert patterns == [PatternRecord(PatternType.DESCENDING_TREND, 1.0)]

    def test_trend_confidence_is_share_of_pairs(self) -> None:
        """Test the trend confidence over mixed pair directions."""
        patterns = detect_numerical_patterns([1, 2, 1, 2])

        assert len(patterns) == 1
        assert patterns[0].type is PatternType.ASCENDING_TREND
        assert patterns[0].confidence == pytest.approx(2 / 3)

    def test_too_few_numbers(self) -> None:
        """Test that fewer than three numbers report nothing."""
        assert detect_numerical_patterns([2, 4]) == []

    def test_constant_set_has_no_trend(self) -> None:
        """Test that equal neighbours count towards neither direction."""
        patterns = detect_numerical_patterns([4, 4, 4])
        assert patterns == [PatternRecord(PatternType.EVEN_DOMINANCE, 0.8)]

    def test_custom_min_length(self) -> None:
        """Test that the minimum bucket size is configurable."""
        params = PatternParams(min_pattern_length=2)
        assert detect_numerical_patterns([1, 3], params) != []

    def test_confidences_in_unit_interval(self) -> None:
        """Test that every reported confidence lies in [0, 1]."""
        for numbers in ([2, 4, 6, 8, 1], [9, 7, 5, 3, 2], [1, 2, 1, 2, 1, 2, 3]):
            for record in detect_numerical_patterns(numbers):
                assert 0 <= record.confidence <= 1


class TestSequenceChecks:
    """Test suite for arithmetic and geometric progressions."""

    @pytest.mark.parametrize("numbers,expected", [
        ([5, 1, 3], True),
        ([2, 2, 2], True),
        ([1, 2, 4], False),
        ([1], False),
        ([], False),
    ])
    def test_arithmetic(self, numbers, expected) -> None:
        """Test arithmetic detection on the sorted values."""
        assert is_arithmetic_sequence(numbers) is expected

    @pytest.mark.parametrize("numbers,expected", [
        ([8, 2, 4], True),
        ([1, 3, 9.0001], True),
        ([1, 2, 3], False),
        ([0, 1, 2], False),
        ([1], False),
    ])
    def test_geometric(self, numbers, expected) -> None:
        """Test geometric detection with its ratio tolerance."""
        assert is_geometric_sequence(numbers) is expected

    def test_geometric_tolerance_is_configurable(self) -> None:
        """Test that a tight tolerance rejects near-geometric sets."""
        assert not is_geometric_sequence([1, 3, 9.0001], tolerance=1e-6)
