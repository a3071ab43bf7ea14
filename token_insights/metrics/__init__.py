"""Number theory and statistics engine for the numeric bucket"""

from .calculator import MathCalculator, NumberTheoryResults
from .number_theory import (
    fibonacci_up_to,
    gcd,
    hcf_all,
    is_fibonacci,
    is_perfect_square,
    is_prime,
    lcm,
    lcm_all,
    primes,
)
from .statistics import count_categories, summarize

__all__ = [
    "MathCalculator",
    "NumberTheoryResults",
    "count_categories",
    "fibonacci_up_to",
    "gcd",
    "hcf_all",
    "is_fibonacci",
    "is_perfect_square",
    "is_prime",
    "lcm",
    "lcm_all",
    "primes",
    "summarize",
]
