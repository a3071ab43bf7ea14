"""Descriptive statistics and categorical counts over the numeric bucket"""

import math
from collections.abc import Sequence
from typing import Optional

from ..data.models import Number
from ..errors import EmptyInputError
from ..models.report import CategoryCounts, StatisticalSummary
from .number_theory import is_fibonacci, is_perfect_square, is_prime


def mean(numbers: Sequence[Number]) -> float:
    return sum(numbers) / len(numbers)


def median(numbers: Sequence[Number]) -> Number:
    """Middle value; average of the two middle values for an even count"""
    ordered = sorted(numbers)
    mid = len(ordered) // 2

    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def mode(numbers: Sequence[Number]) -> Optional[list[Number]]:
    """
    Most frequent value(s)

    Values are listed in the order they reached the top frequency.

    Returns:
        List of modal values, or None when every value is unique
    """
    frequency: dict[Number, int] = {}
    max_frequency = 0
    modes: list[Number] = []

    for number in numbers:
        frequency[number] = frequency.get(number, 0) + 1
        if frequency[number] > max_frequency:
            max_frequency = frequency[number]
            modes = [number]
        elif frequency[number] == max_frequency and number not in modes:
            modes.append(number)

    return None if len(modes) == len(numbers) else modes


def value_range(numbers: Sequence[Number]) -> Number:
    return max(numbers) - min(numbers)


def std_dev(numbers: Sequence[Number]) -> float:
    """Population standard deviation (divides by N)"""
    center = mean(numbers)
    variance = sum((n - center) ** 2 for n in numbers) / len(numbers)
    return math.sqrt(variance)


def _standardized_moment(numbers: Sequence[Number], order: int) -> float:
    deviation = std_dev(numbers)
    if deviation == 0:
        return 0.0

    center = mean(numbers)
    return sum(((n - center) / deviation) ** order for n in numbers) / len(numbers)


def skewness(numbers: Sequence[Number]) -> float:
    """Third standardized moment; 0 for constant sets"""
    return _standardized_moment(numbers, 3)


def kurtosis(numbers: Sequence[Number]) -> float:
    """Excess kurtosis (fourth standardized moment minus 3); 0 for constant sets"""
    if std_dev(numbers) == 0:
        return 0.0
    return _standardized_moment(numbers, 4) - 3


def is_roughly_normal(numbers: Sequence[Number]) -> bool:
    """
    Cheap normality hint: mean within 10% of the upper median

    This is a heuristic flag, not a statistical test.
    """
    center = mean(numbers)
    upper_median = sorted(numbers)[len(numbers) // 2]
    return abs(center - upper_median) < abs(center) * 0.1


def summarize(numbers: Sequence[Number]) -> StatisticalSummary:
    """
    Compute the statistical summary of a number set

    Args:
        numbers: Raw (non-deduplicated) numeric bucket

    Returns:
        StatisticalSummary

    Raises:
        EmptyInputError: If numbers is empty
    """
    if not numbers:
        raise EmptyInputError("No numbers provided for statistics", data_type="numbers")

    modes = mode(numbers)

    return StatisticalSummary(
        mean=mean(numbers),
        median=median(numbers),
        mode=tuple(modes) if modes is not None else None,
        range=value_range(numbers),
        std_dev=std_dev(numbers),
        skewness=skewness(numbers),
        kurtosis=kurtosis(numbers),
        is_normal=is_roughly_normal(numbers),
    )


def _is_composite(n: Number) -> bool:
    return n > 1 and float(n).is_integer() and not is_prime(n)


def count_categories(numbers: Sequence[Number]) -> CategoryCounts:
    """
    Count numbers per category in a single pass

    Raises:
        EmptyInputError: If numbers is empty
    """
    if not numbers:
        raise EmptyInputError("No numbers provided for category counts", data_type="numbers")

    counts = dict.fromkeys(
        ("even", "odd", "positive", "negative", "zero",
         "perfect_squares", "fibonacci_numbers", "prime_numbers", "composite_numbers"),
        0,
    )

    for n in numbers:
        if n % 2 == 0:
            counts["even"] += 1
        else:
            counts["odd"] += 1

        if n > 0:
            counts["positive"] += 1
        elif n < 0:
            counts["negative"] += 1
        else:
            counts["zero"] += 1

        if is_perfect_square(n):
            counts["perfect_squares"] += 1
        if is_fibonacci(n):
            counts["fibonacci_numbers"] += 1
        if is_prime(n):
            counts["prime_numbers"] += 1
        elif _is_composite(n):
            counts["composite_numbers"] += 1

    return CategoryCounts(
        total_numbers=len(numbers),
        unique_numbers=len(set(numbers)),
        **counts,
    )
