"""Services package for backend business logic."""

from . import blueprint_engine
from . import category_repository
from . import seed_loader

from .blueprint_engine import build_preview, distribute_questions, resolve_mode
from .category_repository import CategoryRepository
from .errors import (
    BlueprintError,
    DegenerateWeightsError,
    EmptyCategorySetError,
    RoundingDriftError,
)

__all__ = [
    "blueprint_engine",
    "category_repository",
    "seed_loader",
    # Engine
    "build_preview",
    "distribute_questions",
    "resolve_mode",
    "CategoryRepository",
    # Errors
    "BlueprintError",
    "DegenerateWeightsError",
    "EmptyCategorySetError",
    "RoundingDriftError",
]
