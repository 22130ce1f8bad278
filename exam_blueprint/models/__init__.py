"""Backend models package."""

from .blueprint import (
    BlueprintCategory,
    CategoryDistribution,
    DistributionMode,
    ExamPreview,
    DEFAULT_QUESTIONS,
    MAX_QUESTIONS,
    MIN_QUESTIONS,
)

__all__ = [
    "BlueprintCategory",
    "CategoryDistribution",
    "DistributionMode",
    "ExamPreview",
    "DEFAULT_QUESTIONS",
    "MAX_QUESTIONS",
    "MIN_QUESTIONS",
]
