#!/usr/bin/env python3
"""Seed blueprint categories into MongoDB.

Reads categories from a YAML seed file and upserts them by code, so the
script can be re-run after editing weights.

Usage:
    # Seed from the default file
    python scripts/seed_categories.py

    # Seed from a custom file into another database
    MONGODB_URL=mongodb://db:27017 python scripts/seed_categories.py --file my_blueprint.yaml

    # Validate the file and print the distribution for a 100-question exam
    python scripts/seed_categories.py --dry-run --questions 100
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from exam_blueprint.db.mongo import create_client, DATABASE_NAME
from exam_blueprint.models.blueprint import DEFAULT_QUESTIONS, BlueprintCategory
from exam_blueprint.services.blueprint_engine import build_preview
from exam_blueprint.services.category_repository import CategoryRepository
from exam_blueprint.services.errors import BlueprintError
from exam_blueprint.services.seed_loader import load_seed_file, seed_categories

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).parent.parent / "data" / "blueprint_categories.yaml"


def print_preview(categories: list[BlueprintCategory], total_questions: int) -> None:
    """Print the question distribution the seeded categories would produce."""
    active = [c for c in categories if c.isActive]
    preview = build_preview(active, total_questions)

    print("=" * 60)
    print(f"{total_questions} questions, engine={preview.engine.value}")
    print("-" * 60)
    for row in preview.distribution:
        weight = "-" if row.weight is None else f"{row.weight:g}"
        print(f"{row.categoryCode:<6} {row.categoryName:<36} {weight:>6} {row.questionsAllocated:>5}")
    print("=" * 60)


async def run_seed(categories: list[BlueprintCategory]) -> int:
    client = create_client()
    try:
        repository = CategoryRepository(client[DATABASE_NAME])
        summary = await seed_categories(repository, categories)
    finally:
        client.close()

    print(f"Seeded {summary.total} blueprint categories into '{DATABASE_NAME}'")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Seed exam blueprint categories into MongoDB"
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=DEFAULT_SEED_FILE,
        help=f"YAML seed file (default: {DEFAULT_SEED_FILE.name})"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the file and print a preview without writing to the database"
    )
    parser.add_argument(
        "--questions",
        type=int,
        default=DEFAULT_QUESTIONS,
        help=f"Question count for the dry-run preview (default: {DEFAULT_QUESTIONS})"
    )

    args = parser.parse_args()

    if not args.file.exists():
        print(f"Error: Seed file {args.file} does not exist")
        return 1

    try:
        categories = load_seed_file(args.file)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.dry_run:
        try:
            print_preview(categories, args.questions)
        except (BlueprintError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        return 0

    try:
        return asyncio.run(run_seed(categories))
    except Exception:
        logger.exception("Error seeding database")
        return 1


if __name__ == "__main__":
    sys.exit(main())
