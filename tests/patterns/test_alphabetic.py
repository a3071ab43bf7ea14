"""Tests for alphabetic pattern detection and text statistics."""

import pytest

from token_insights.models.report import PatternRecord, PatternType
from token_insights.patterns.alphabetic import (
    analyze_text,
    detect_alphabetical_patterns,
    is_alphabetical_sequence,
    vowel_consonant_ratio,
)


class TestDetectAlphabeticalPatterns:
    """Test suite for case dominance and vowel-heavy buckets."""

    def test_uppercase_dominance(self) -> None:
        """Test a mostly uppercase bucket."""
        patterns = detect_alphabetical_patterns(["A", "B", "C", "d"])
        assert patterns == [PatternRecord(PatternType.UPPERCASE_DOMINANCE, 0.8)]

    def test_lowercase_and_vowel_heavy(self) -> None:
        """Test a lowercase, vowel-heavy bucket."""
        patterns = detect_alphabetical_patterns(["a", "e", "x"])

        assert patterns[0] == PatternRecord(PatternType.LOWERCASE_DOMINANCE, 0.8)
        assert patterns[1].type is PatternType.VOWEL_HEAVY
        assert patterns[1].confidence == pytest.approx(2 / 3)

    def test_too_few_letters(self) -> None:
        """Test that fewer than three letters report nothing."""
        assert detect_alphabetical_patterns(["a", "e"]) == []

    def test_balanced_case(self) -> None:
        """Test that neither case dominates an even split."""
        assert detect_alphabetical_patterns(["A", "b", "C", "d"]) == []


class TestIsAlphabeticalSequence:
    """Test suite for contiguous letter runs."""

    @pytest.mark.parametrize("letters,expected", [
        (["c", "a", "b"], True),
        (["X", "Y", "Z"], True),
        (["a", "c"], False),
        (["a", "a"], False),
        (["Z", "a"], False),
        (["a"], False),
    ])
    def test_sequences(self, letters, expected) -> None:
        """Test sorted code point contiguity."""
        assert is_alphabetical_sequence(letters) is expected


class TestAnalyzeText:
    """Test suite for text statistics."""

    def test_analysis(self) -> None:
        """Test frequency, case split and vowel ratio."""
        analysis = analyze_text(["a", "B", "a", "e"])

        assert analysis.character_frequency == {"a": 2, "B": 1, "e": 1}
        assert analysis.uppercase == 1
        assert analysis.lowercase == 3
        assert analysis.vowel_consonant_ratio == 3.0

    def test_no_consonants(self) -> None:
        """Test that the ratio falls back to the vowel count."""
        assert vowel_consonant_ratio(["a", "e"]) == 2

    def test_empty_bucket(self) -> None:
        """Test text statistics over no letters."""
        analysis = analyze_text([])

        assert analysis.character_frequency == {}
        assert analysis.uppercase == 0
        assert analysis.lowercase == 0
        assert analysis.vowel_consonant_ratio == 0

    def test_frequency_is_read_only(self) -> None:
        """Test that the frequency table cannot be changed after analysis."""
        analysis = analyze_text(["a", "b"])

        with pytest.raises(TypeError):
            analysis.character_frequency["a"] = 5
        assert analysis.character_frequency["a"] == 1
        assert analysis.to_dict()["character_frequency"] == {"a": 1, "b": 1}

    def test_to_dict_nests_case_distribution(self) -> None:
        """Test the JSON view of the text block."""
        data = analyze_text(["A", "b"]).to_dict()
        assert data["case_distribution"] == {"uppercase": 1, "lowercase": 1}
