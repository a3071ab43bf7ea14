"""Alphabetic bucket patterns and text statistics"""

from collections.abc import Sequence
from types import MappingProxyType
from typing import Optional

from ..config.defaults import PatternParams
from ..models.report import PatternRecord, PatternType, TextAnalysis

VOWELS = frozenset("aeiouAEIOU")


def detect_alphabetical_patterns(alphabets: Sequence[str],
                                 params: Optional[PatternParams] = None) -> list[PatternRecord]:
    """
    Detect case dominance and vowel-heavy buckets

    Args:
        alphabets: Single-letter bucket
        params: Pattern thresholds

    Returns:
        Detected patterns; empty when fewer than min_pattern_length letters
    """
    params = params or PatternParams()
    if len(alphabets) < params.min_pattern_length:
        return []

    patterns = []

    uppercase_count = sum(1 for letter in alphabets if letter.isupper())
    lowercase_count = len(alphabets) - uppercase_count

    if uppercase_count > lowercase_count * params.dominance_ratio:
        patterns.append(PatternRecord(PatternType.UPPERCASE_DOMINANCE, params.dominance_confidence))
    elif lowercase_count > uppercase_count * params.dominance_ratio:
        patterns.append(PatternRecord(PatternType.LOWERCASE_DOMINANCE, params.dominance_confidence))

    vowels = count_vowels(alphabets)
    consonants = len(alphabets) - vowels

    if vowels > consonants:
        patterns.append(PatternRecord(PatternType.VOWEL_HEAVY, vowels / len(alphabets)))

    return patterns


def is_alphabetical_sequence(alphabets: Sequence[str]) -> bool:
    """True if the sorted code points form one contiguous run"""
    if len(alphabets) < 2:
        return False

    codes = sorted(ord(letter) for letter in alphabets)
    return all(current - previous == 1 for previous, current in zip(codes, codes[1:]))


def count_vowels(alphabets: Sequence[str]) -> int:
    return sum(1 for letter in alphabets if letter in VOWELS)


def vowel_consonant_ratio(alphabets: Sequence[str]) -> float:
    """Vowels per consonant; the bare vowel count when there are no consonants"""
    vowels = count_vowels(alphabets)
    consonants = len(alphabets) - vowels
    return vowels / consonants if consonants > 0 else vowels


def analyze_text(alphabets: Sequence[str]) -> TextAnalysis:
    """Character frequency, case split and vowel/consonant ratio"""
    frequency: dict[str, int] = {}
    for letter in alphabets:
        frequency[letter] = frequency.get(letter, 0) + 1

    uppercase = sum(1 for letter in alphabets if letter.isupper())

    return TextAnalysis(
        character_frequency=MappingProxyType(frequency),
        uppercase=uppercase,
        lowercase=len(alphabets) - uppercase,
        vowel_consonant_ratio=vowel_consonant_ratio(alphabets),
    )
