"""Tests for the math calculator."""

from dataclasses import replace

import pytest

from token_insights.config.defaults import ExecutionParams, get_default_config
from token_insights.errors import EmptyInputError
from token_insights.metrics.calculator import MathCalculator


@pytest.fixture
def parallel_calculator() -> MathCalculator:
    config = replace(get_default_config(), execution=ExecutionParams(parallel_number_theory=True))
    return MathCalculator(config)


class TestMathCalculator:
    """Test suite for the math block."""

    def test_calculate(self) -> None:
        """Test aggregates and number theory over a simple set."""
        summary = MathCalculator().calculate([1, 2, 3, 4, 5])

        assert summary.sum == 15
        assert summary.product == 120
        assert summary.max == 5
        assert summary.min == 1
        assert summary.average == 3
        assert summary.fibonacci == (0, 1, 1, 2, 3, 5)
        assert summary.primes == (2, 3, 5)
        assert summary.lcm == 60
        assert summary.hcf == 1

    def test_single_number_has_no_lcm_or_hcf(self) -> None:
        """Test that LCM and HCF need more than one number."""
        summary = MathCalculator().calculate([7])

        assert summary.lcm is None
        assert summary.hcf is None
        assert summary.primes == (7,)
        assert summary.fibonacci == (0, 1, 1, 2, 3, 5)

    def test_negative_maximum(self) -> None:
        """Test that a negative maximum yields no Fibonacci numbers."""
        summary = MathCalculator().calculate([-5, -3])

        assert summary.fibonacci == ()
        assert summary.lcm == 15
        assert summary.hcf == 1

    def test_zero_product(self) -> None:
        """Test that a zero member zeroes the product."""
        assert MathCalculator().calculate([0, 5, 7]).product == 0

    def test_empty_raises(self) -> None:
        """Test that an empty numeric bucket is rejected."""
        with pytest.raises(EmptyInputError):
            MathCalculator().calculate([])

    @pytest.mark.parametrize("numbers", [
        [1, 2, 3, 4, 5],
        [12, 18, 30, 0],
        [0, 0],
        [97],
        [-4, 6, 2.5, 13],
    ])
    def test_parallel_matches_sequential(self, parallel_calculator, numbers) -> None:
        """Test that the thread pool path returns the sequential result."""
        assert parallel_calculator.calculate(numbers) == MathCalculator().calculate(numbers)

    def test_product_overflows_to_infinity(self) -> None:
        """Test that the product follows double precision rather than growing unbounded."""
        summary = MathCalculator().calculate([999_999_999] * 500)

        assert summary.product == float("inf")
        assert summary.sum == 499_999_999_500
        assert summary.lcm == 999_999_999
        assert summary.to_dict()["product"] is None
        assert summary.to_dict()["lcm"] == 999_999_999

    def test_zero_product_after_overflow(self) -> None:
        """Test that a zero member still zeroes an overflowing product."""
        assert MathCalculator().calculate([999_999_999] * 40 + [0]).product == 0

    def test_exact_integer_product_stays_int(self) -> None:
        """Test that small integer products keep their integer type."""
        assert isinstance(MathCalculator().calculate([2, 3, 7]).product, int)
        assert MathCalculator().calculate([0.5, 4]).product == 2.0

    def test_lcm_beyond_double_range_renders_null(self) -> None:
        """Test that an LCM too large for a double is null in the JSON view."""
        summary = MathCalculator().calculate(list(range(999_999_000, 999_999_400)))

        assert summary.lcm > 10 ** 400
        assert summary.to_dict()["lcm"] is None
        assert summary.to_dict()["hcf"] == 1


class TestNumberTheory:
    """Test suite for the number theory quartet."""

    def test_sequential_results(self) -> None:
        """Test the four results computed one after another."""
        results = MathCalculator().number_theory([12, 18, 7, 0])

        assert results.fibonacci == [0, 1, 1, 2, 3, 5, 8, 13]
        assert results.primes == [7]
        assert results.lcm == 252
        assert results.hcf == 1

    def test_thread_pool_results(self, parallel_calculator) -> None:
        """Test that the configured thread pool gives the sequential results."""
        numbers = [12, 18, 30]
        assert parallel_calculator.number_theory(numbers) == MathCalculator().number_theory(numbers)
        assert parallel_calculator.number_theory(numbers).hcf == 6
