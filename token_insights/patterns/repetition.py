"""Repeating-prefix detection over the concatenated token string"""

from collections.abc import Sequence
from typing import Optional

from ..data.classifier import format_number
from ..data.models import Number
from ..models.report import RepeatingPattern


def concatenate_tokens(numbers: Sequence[Number], alphabets: Sequence[str]) -> str:
    """Numbers (as rendered strings) followed by letters, joined without separators"""
    return "".join([format_number(n) for n in numbers] + list(alphabets))


def find_repeating_pattern(text: str) -> Optional[RepeatingPattern]:
    """
    Find the shortest prefix whose repetition rebuilds text

    Prefix lengths from 1 up to half the string length are tried in order.

    Returns:
        The first matching RepeatingPattern, or None if no pattern is found
    """
    for length in range(1, len(text) // 2 + 1):
        prefix = text[:length]
        if prefix * (len(text) // length) == text:
            return RepeatingPattern(pattern=prefix, length=length)
    return None
