"""Pydantic models for blueprint categories and exam previews."""

from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Question count bounds accepted by the preview endpoint
MIN_QUESTIONS = 1
MAX_QUESTIONS = 1000
DEFAULT_QUESTIONS = 40


class DistributionMode(str, Enum):
    """How questions were spread across categories."""

    PROPORTIONAL = "proportional"
    UNIFORM = "uniform"


class BlueprintCategory(BaseModel):
    """An exam blueprint category as read from the category store."""

    model_config = ConfigDict(frozen=True)

    code: Annotated[str, Field(min_length=1)]
    name: str
    weight: Annotated[Decimal, Field(ge=0)] | None = None
    description: str = ""
    isActive: bool = True


# Response schemas
class CategoryDistribution(BaseModel):
    """Questions allocated to a single category."""

    categoryCode: str
    categoryName: str
    weight: float | None = None
    questionsAllocated: Annotated[int, Field(ge=0)]


class ExamPreview(BaseModel):
    """Per-category question distribution for a requested exam size."""

    totalQuestions: int
    distribution: list[CategoryDistribution]
    engine: DistributionMode
