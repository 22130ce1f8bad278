"""Blueprint weight engine.

Distributes a fixed number of exam questions across blueprint categories.

- Every category weighted: proportional split using the largest remainder
  (Hamilton) method.
- Any category unweighted: uniform split, leftover questions going to the
  first categories in input order.

The allocations always sum to the requested total. The engine is a pure
function of its inputs: no I/O, no logging, no shared state.
"""

from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction
from math import floor

from exam_blueprint.models.blueprint import (
    BlueprintCategory,
    CategoryDistribution,
    DistributionMode,
    ExamPreview,
)
from exam_blueprint.services.errors import (
    DegenerateWeightsError,
    EmptyCategorySetError,
    RoundingDriftError,
)


def resolve_mode(categories: Sequence[BlueprintCategory]) -> DistributionMode:
    """Proportional only when every category carries a weight."""
    if all(category.weight is not None for category in categories):
        return DistributionMode.PROPORTIONAL
    return DistributionMode.UNIFORM


def _proportional_counts(weights: list[Decimal], total: int) -> list[int]:
    """Largest remainder apportionment of `total` by `weights`.

    Shares are exact rationals, so floors and fractional parts carry no
    float error and equal weights produce exactly equal remainders.
    """
    total_weight = sum(weights, Decimal(0))
    if total_weight == 0:
        raise DegenerateWeightsError(total_weight)

    exact = [Fraction(weight) * total / Fraction(total_weight) for weight in weights]
    counts = [floor(share) for share in exact]
    remaining = total - sum(counts)

    # sorted() is stable: equal remainders keep input order
    by_remainder = sorted(
        range(len(exact)),
        key=lambda i: exact[i] - counts[i],
        reverse=True,
    )
    for index in by_remainder[:remaining]:
        counts[index] += 1

    return counts


def _uniform_counts(category_count: int, total: int) -> list[int]:
    """Even split; the first `total % n` categories get one extra question."""
    base, remainder = divmod(total, category_count)
    return [base + 1 if index < remainder else base for index in range(category_count)]


def distribute_questions(
    categories: Sequence[BlueprintCategory],
    total_questions: int,
) -> tuple[list[CategoryDistribution], DistributionMode]:
    """Allocate `total_questions` across `categories`.

    Args:
        categories: Categories in the order results should be returned.
        total_questions: Positive number of questions to distribute.

    Returns:
        Tuple of (per-category distribution in input order, mode used).

    Raises:
        EmptyCategorySetError: If no categories are given.
        DegenerateWeightsError: If all weights are present but sum to zero.
        RoundingDriftError: If allocations fail to sum to the total.
        ValueError: If total_questions is not a positive integer.
    """
    if not categories:
        raise EmptyCategorySetError()
    if isinstance(total_questions, bool) or not isinstance(total_questions, int):
        raise ValueError(f"total_questions must be an integer, got {total_questions!r}")
    if total_questions < 1:
        raise ValueError(f"total_questions must be positive, got {total_questions}")

    mode = resolve_mode(categories)
    if mode is DistributionMode.PROPORTIONAL:
        counts = _proportional_counts([c.weight for c in categories], total_questions)
    else:
        counts = _uniform_counts(len(categories), total_questions)

    # Verify no rounding drift
    allocated = sum(counts)
    if allocated != total_questions or any(count < 0 for count in counts):
        raise RoundingDriftError(allocated, total_questions)

    distribution = [
        CategoryDistribution(
            categoryCode=category.code,
            categoryName=category.name,
            weight=float(category.weight) if category.weight is not None else None,
            questionsAllocated=count,
        )
        for category, count in zip(categories, counts, strict=True)
    ]
    return distribution, mode


def build_preview(
    categories: Sequence[BlueprintCategory],
    total_questions: int,
) -> ExamPreview:
    """Run the engine and wrap the result in the preview payload."""
    distribution, mode = distribute_questions(categories, total_questions)
    return ExamPreview(
        totalQuestions=total_questions,
        distribution=distribution,
        engine=mode,
    )
