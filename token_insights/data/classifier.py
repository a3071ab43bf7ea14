"""
Token classifier splitting raw input into numbers and single letters.

A token is numeric when it is a finite int/float or a string that parses in
full as a decimal literal; it is alphabetic when it is exactly one ASCII
letter. Everything else is dropped without error.
"""

import math
import re
from collections.abc import Iterable
from typing import Optional

from .models import ClassifiedTokens, Number, RawToken

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_ALPHABET_RE = re.compile(r"[A-Za-z]")
_LOWERCASE_RE = re.compile(r"[a-z]")


def parse_number(token: RawToken) -> Optional[Number]:
    """
    Parse a token as a finite number.

    Args:
        token: Raw token from the request

    Returns:
        int for integral literals, float otherwise, or None if not numeric
    """
    if isinstance(token, bool):
        return None

    if isinstance(token, (int, float)):
        return token if math.isfinite(token) else None

    if not isinstance(token, str):
        return None

    text = token.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None

    if _INTEGER_RE.fullmatch(text):
        return int(text)

    value = float(text)
    return value if math.isfinite(value) else None


def is_alphabet_token(token: RawToken) -> bool:
    """True if the token is a string of exactly one ASCII letter."""
    return isinstance(token, str) and _ALPHABET_RE.fullmatch(token) is not None


def classify(tokens: Iterable[RawToken]) -> ClassifiedTokens:
    """
    Classify raw tokens into numbers and alphabets.

    Args:
        tokens: Raw token sequence

    Returns:
        ClassifiedTokens with both buckets and the highest lowercase letter
    """
    numbers: list[Number] = []
    alphabets: list[str] = []
    dropped = 0

    for token in tokens:
        number = parse_number(token)
        if number is not None:
            numbers.append(number)
        elif is_alphabet_token(token):
            alphabets.append(token)  # type: ignore[arg-type]
        else:
            dropped += 1

    lowercase = [letter for letter in alphabets if _LOWERCASE_RE.fullmatch(letter)]
    highest_lowercase = max(lowercase) if lowercase else None

    return ClassifiedTokens(
        numbers=tuple(numbers),
        alphabets=tuple(alphabets),
        highest_lowercase=highest_lowercase,
        dropped=dropped,
    )


def format_number(value: Number) -> str:
    """Render a number for output, without a trailing .0 on integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
