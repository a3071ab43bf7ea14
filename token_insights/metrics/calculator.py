"""Math calculator coordinating the number theory computations"""

import math
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import Number
from ..errors import AnalysisError, EmptyInputError
from ..models.report import MathSummary
from .number_theory import fibonacci_up_to, hcf_all, lcm_all, primes


@dataclass(frozen=True)
class NumberTheoryResults:
    """Results of the four independent number theory computations"""
    fibonacci: list[int]
    primes: list[Number]
    lcm: Optional[int]
    hcf: Optional[int]


class MathCalculator:
    """
    Computes arithmetic aggregates and number theory results for a numeric bucket

    The calculator holds configuration only; every call works on its own
    arguments and returns a fresh value object.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    def calculate(self, numbers: Sequence[Number]) -> MathSummary:
        """
        Calculate the math block for a number set

        Args:
            numbers: Numeric bucket in first-seen order

        Returns:
            MathSummary with aggregates, Fibonacci, primes, LCM and HCF

        Raises:
            EmptyInputError: If numbers is empty
            AnalysisError: If a computation fails unexpectedly
        """
        if not numbers:
            raise EmptyInputError("No numbers provided for analysis", data_type="numbers")

        try:
            theory = self.number_theory(numbers)
            total = sum(numbers)

            return MathSummary(
                sum=total,
                product=_product(numbers),
                max=max(numbers),
                min=min(numbers),
                average=total / len(numbers),
                fibonacci=tuple(theory.fibonacci),
                primes=tuple(theory.primes),
                lcm=theory.lcm,
                hcf=theory.hcf,
            )

        except AnalysisError:
            raise
        except Exception as e:
            raise AnalysisError(
                f"Math calculation failed: {str(e)}",
                stage="math",
                calculation_input={"count": len(numbers)}
            )

    def number_theory(self, numbers: Sequence[Number]) -> NumberTheoryResults:
        """
        Run Fibonacci, primes, LCM and HCF over the number set

        The four computations share no data, so they run in a thread pool
        when execution.parallel_number_theory is set and sequentially
        otherwise; both paths return identical results. LCM and HCF are only
        reported for sets with more than one number.
        """
        numbers = list(numbers)
        has_pairs = len(numbers) > 1

        tasks: dict[str, Callable[[], Any]] = {
            "fibonacci": partial(fibonacci_up_to, max(numbers)),
            "primes": partial(primes, numbers),
            "lcm": partial(lcm_all, numbers) if has_pairs else _none,
            "hcf": partial(hcf_all, numbers) if has_pairs else _none,
        }

        if self.config.execution.parallel_number_theory:
            with ThreadPoolExecutor(max_workers=self.config.execution.max_workers,
                                    thread_name_prefix="number-theory") as executor:
                futures = {name: executor.submit(task) for name, task in tasks.items()}
                results = {name: future.result() for name, future in futures.items()}
        else:
            results = {name: task() for name, task in tasks.items()}

        return NumberTheoryResults(**results)


def _none() -> None:
    return None


def _product(numbers: list[Number]) -> Number:
    """Product in double precision; stays int while an integer product is exact."""
    if 0 in numbers:
        return 0
    product = math.prod(float(n) for n in numbers)
    if all(isinstance(n, int) for n in numbers) and abs(product) <= 2 ** 53:
        return int(product)
    return product
