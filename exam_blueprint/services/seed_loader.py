"""Load blueprint categories from a YAML seed file into the category store."""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from exam_blueprint.models.blueprint import BlueprintCategory
from exam_blueprint.services.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


@dataclass
class SeedSummary:
    """Outcome of a seed run."""

    created: int = 0
    updated: int = 0

    @property
    def total(self) -> int:
        return self.created + self.updated


def load_seed_file(path: Path) -> list[BlueprintCategory]:
    """Parse and validate a seed file.

    Expected layout:

        categories:
          - code: BC01
            name: Wiring Methods & Materials
            weight: 15.0

    Raises:
        ValueError: If the file is malformed, a category is invalid, or a
            code appears twice.
    """
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict) or not isinstance(raw.get("categories"), list):
        raise ValueError(f"{path}: expected a top-level 'categories' list")

    categories = []
    seen: set[str] = set()
    for i, entry in enumerate(raw["categories"]):
        try:
            category = BlueprintCategory.model_validate(entry)
        except PydanticValidationError as e:
            raise ValueError(f"{path}: category #{i + 1} is invalid: {e}") from e
        if category.code in seen:
            raise ValueError(f"{path}: duplicate category code '{category.code}'")
        seen.add(category.code)
        categories.append(category)

    return categories


async def seed_categories(
    repository: CategoryRepository,
    categories: list[BlueprintCategory],
) -> SeedSummary:
    """Upsert every category by code. Safe to run repeatedly."""
    await repository.ensure_indexes()

    summary = SeedSummary()
    for category in categories:
        if await repository.upsert(category):
            summary.created += 1
        else:
            summary.updated += 1

    logger.info(
        f"Seeded {summary.total} blueprint categories "
        f"({summary.created} created, {summary.updated} updated)"
    )
    return summary
