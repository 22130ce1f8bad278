"""Blueprint category store backed by MongoDB.

The repository is handed a database explicitly; it never reaches for a
global client.
"""

import logging
from decimal import Decimal

from bson.decimal128 import Decimal128
from motor.motor_asyncio import AsyncIOMotorDatabase

from exam_blueprint.models.blueprint import BlueprintCategory

logger = logging.getLogger(__name__)

COLLECTION_NAME = "blueprint_categories"


def _to_weight(value: object) -> Decimal | None:
    """Normalize a stored weight to Decimal (or None when unset)."""
    if value is None:
        return None
    if isinstance(value, Decimal128):
        return value.to_decimal()
    if isinstance(value, float):
        # str() keeps 15.0 as 15.0 rather than its binary expansion
        return Decimal(str(value))
    return Decimal(value)


def _to_category(doc: dict) -> BlueprintCategory:
    """Convert MongoDB document to BlueprintCategory model."""
    return BlueprintCategory(
        code=doc["code"],
        name=doc["name"],
        weight=_to_weight(doc.get("weight")),
        description=doc.get("description", ""),
        isActive=doc.get("isActive", True),
    )


class CategoryRepository:
    """Read and upsert blueprint categories.

    Usage:
        repository = CategoryRepository(database)
        categories = await repository.list_active()
    """

    def __init__(self, database: AsyncIOMotorDatabase):
        self._collection = database[COLLECTION_NAME]

    async def ensure_indexes(self) -> None:
        """Create the unique index on category code."""
        await self._collection.create_index("code", unique=True)

    async def list_active(self) -> list[BlueprintCategory]:
        """List active categories, sorted by code ascending."""
        cursor = self._collection.find({"isActive": True}).sort("code", 1)
        docs = await cursor.to_list(length=None)
        return [_to_category(doc) for doc in docs]

    async def count_active(self) -> int:
        """Count active categories."""
        return await self._collection.count_documents({"isActive": True})

    async def upsert(self, category: BlueprintCategory) -> bool:
        """Insert or update a category by code.

        Returns:
            True if a new document was created, False if one was updated.
        """
        doc = {
            "code": category.code,
            "name": category.name,
            "description": category.description,
            "weight": Decimal128(category.weight) if category.weight is not None else None,
            "isActive": category.isActive,
        }
        result = await self._collection.update_one(
            {"code": category.code},
            {"$set": doc},
            upsert=True,
        )
        created = result.upserted_id is not None
        logger.debug(f"Upserted category {category.code} (created={created})")
        return created
