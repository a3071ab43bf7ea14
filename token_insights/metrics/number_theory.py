"""Number theory helpers: primality, Fibonacci, GCD/LCM folds"""

import math
from collections.abc import Sequence
from functools import reduce
from typing import Optional

from ..data.models import Number


def _as_integer(n: Number) -> Optional[int]:
    """Return n as an int if it is integral, otherwise None."""
    if isinstance(n, int):
        return n
    if isinstance(n, float) and n.is_integer():
        return int(n)
    return None


def is_prime(n: Number) -> bool:
    """
    Check primality by trial division over odd divisors up to sqrt(n)

    Non-integral values are never prime.

    Args:
        n: Value to test

    Returns:
        True if n is a prime number
    """
    value = _as_integer(n)
    if value is None or value < 2:
        return False
    if value == 2:
        return True
    if value % 2 == 0:
        return False

    limit = math.isqrt(value)
    for divisor in range(3, limit + 1, 2):
        if value % divisor == 0:
            return False

    return True


def primes(numbers: Sequence[Number]) -> list[Number]:
    """Prime members of numbers in ascending order, duplicates kept"""
    return sorted(n for n in numbers if is_prime(n))


def fibonacci_up_to(max_value: Number) -> list[int]:
    """
    Generate the Fibonacci sequence up to max_value

    Args:
        max_value: Inclusive upper bound

    Returns:
        [] for negative bounds, [0] for zero, otherwise [0, 1, ...] while next <= max_value
    """
    if max_value < 0:
        return []
    if max_value == 0:
        return [0]

    sequence = [0, 1]
    while True:
        following = sequence[-1] + sequence[-2]
        if following > max_value:
            break
        sequence.append(following)

    return sequence


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm; gcd(0, 0) == 0"""
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; 0 if either operand is 0"""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def _fold_operands(numbers: Sequence[Number]) -> list[int]:
    """Drop zeros, then floor and take absolute values"""
    return [abs(math.floor(n)) for n in numbers if n != 0]


def lcm_all(numbers: Sequence[Number]) -> Optional[int]:
    """
    LCM across a number set

    Returns:
        None for empty input, 0 when every value is zero, otherwise the
        left fold of lcm over the zero-filtered operands
    """
    if not numbers:
        return None

    operands = _fold_operands(numbers)
    if not operands:
        return 0

    return reduce(lcm, operands)


def hcf_all(numbers: Sequence[Number]) -> Optional[int]:
    """
    HCF across a number set

    Unlike lcm_all, an all-zero input yields None rather than 0.

    Returns:
        None for empty or all-zero input, otherwise the left fold of gcd
        over the zero-filtered operands
    """
    if not numbers:
        return None

    operands = _fold_operands(numbers)
    if not operands:
        return None

    return reduce(gcd, operands)


def is_perfect_square(n: Number) -> bool:
    """True if n is a non-negative integral square"""
    value = _as_integer(n)
    if value is None or value < 0:
        return False
    root = math.isqrt(value)
    return root * root == value


def is_fibonacci(n: Number) -> bool:
    """Fibonacci membership: n is Fibonacci iff 5n^2 + 4 or 5n^2 - 4 is a perfect square"""
    value = _as_integer(n)
    if value is None or value < 0:
        return False
    return is_perfect_square(5 * value * value + 4) or is_perfect_square(5 * value * value - 4)
