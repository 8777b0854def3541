"""Statistical averages: mean, median, mode, geometric and AGM."""

import logging
import math
from collections import Counter
from typing import Optional

import structlog

# Fixed pass count; the AGM does not test for convergence.
AGM_ITERATIONS = 10

log = structlog.wrap_logger(
    logging.getLogger(__name__),
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
)


class Average:
    """Averages over a list of numbers.

    Empty input gives None for mean, median and geometric_mean, but an
    empty list for mode. Invalid numeric domains come back as NaN rather
    than raising.
    """

    def mean(self, numbers: list) -> Optional[float]:
        """Calculate the arithmetic mean of a list of numbers."""
        if not numbers:
            log.debug("empty_input", operation="mean")
            return None
        return sum(numbers) / len(numbers)

    def median(self, numbers: list) -> Optional[float]:
        """Calculate the median of a list of numbers."""
        if not numbers:
            log.debug("empty_input", operation="median")
            return None
        sorted_numbers = sorted(numbers)
        n = len(sorted_numbers)
        if n % 2 == 0:
            return self.mean([sorted_numbers[n//2 - 1], sorted_numbers[n//2]])
        return sorted_numbers[n//2]

    def mode(self, numbers: list) -> list:
        """Return every value that occurs most often.

        Always a list, even for a single mode or empty input. Modes keep
        the order in which they first appear. Values are grouped by exact
        equality, so floats that differ in the last bit count separately.
        """
        if not numbers:
            return []
        counts = Counter(numbers)
        highest = max(counts.values())
        return [number for number, count in counts.items() if count == highest]

    def geometric_mean(self, numbers: list) -> Optional[float]:
        """Calculate the n-th root of the product of n numbers.

        The product is taken in floating point, so overflow gives inf. A
        negative product under a fractional root is NaN.
        """
        if not numbers:
            log.debug("empty_input", operation="geometric_mean")
            return None
        product = math.prod(numbers, start=1.0)
        try:
            return math.pow(product, 1 / len(numbers))
        except ValueError:
            log.debug("nan_result", operation="geometric_mean", product=product)
            return math.nan

    def arithmetic_geometric_mean(self, x: float, y: float) -> float:
        """Calculate the arithmetic-geometric mean of x and y.

        Both means are taken of the pair and fed back in as the next pair;
        after AGM_ITERATIONS passes the arithmetic side is returned. A
        negative input gives NaN and a zero input gives 0.
        """
        if x < 0 or y < 0:
            log.debug("nan_result", operation="arithmetic_geometric_mean", x=x, y=y)
            return math.nan
        if x == 0 or y == 0:
            log.debug("zero_input", operation="arithmetic_geometric_mean", x=x, y=y)
            return 0.0

        a, g = x, y
        for _ in range(AGM_ITERATIONS):
            a, g = self.mean([a, g]), self.geometric_mean([a, g])
        return float(a)

    def agm(self, x: float, y: float) -> float:
        """Shorthand for arithmetic_geometric_mean."""
        return self.arithmetic_geometric_mean(x, y)

    def get_averages(self, numbers: list) -> dict:
        """Report mean, median, mode and geometric mean of a list of numbers."""
        return {
            "mean": self.mean(numbers),
            "median": self.median(numbers),
            "mode": self.mode(numbers),
            "geometric_mean": self.geometric_mean(numbers),
        }
