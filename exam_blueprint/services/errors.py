"""Blueprint engine error hierarchy.

All of these stop the allocation immediately. None are recovered inside
the engine; the API layer maps them to responses.
"""

from decimal import Decimal


class BlueprintError(Exception):
    """Base exception for blueprint allocation."""


class EmptyCategorySetError(BlueprintError):
    """No categories were supplied, so there is nothing to allocate to."""

    def __init__(self) -> None:
        super().__init__("Cannot distribute questions across an empty category set")


class DegenerateWeightsError(BlueprintError):
    """Every category is weighted but the weights sum to zero.

    Proportional shares are undefined here. Treated as a configuration
    problem in the category store, not as a request for uniform mode.
    """

    def __init__(self, total_weight: Decimal):
        self.total_weight = total_weight
        super().__init__(
            f"Category weights sum to {total_weight}; proportional distribution is undefined"
        )


class RoundingDriftError(BlueprintError):
    """Allocations do not add up to the requested total.

    Always a defect in the rounding step. Never retried.
    """

    def __init__(self, allocated: int, expected: int):
        self.allocated = allocated
        self.expected = expected
        super().__init__(
            f"Rounding drift detected: allocated {allocated} questions but expected {expected}"
        )
