"""Tests for the MongoDB-backed category repository."""

from decimal import Decimal
from typing import Any

import pytest
from bson.decimal128 import Decimal128

from exam_blueprint.models.blueprint import BlueprintCategory
from exam_blueprint.services.category_repository import COLLECTION_NAME, CategoryRepository


class TestListActive:
    @pytest.mark.asyncio
    async def test_sorted_by_code(self, seeded_db: Any) -> None:
        repository = CategoryRepository(seeded_db)

        categories = await repository.list_active()

        assert [c.code for c in categories] == [f"BC{i:02d}" for i in range(1, 11)]

    @pytest.mark.asyncio
    async def test_excludes_inactive(self, mock_db: Any) -> None:
        await mock_db[COLLECTION_NAME].insert_many([
            {"code": "A", "name": "Active", "weight": 1.0, "isActive": True},
            {"code": "B", "name": "Retired", "weight": 1.0, "isActive": False},
        ])
        repository = CategoryRepository(mock_db)

        categories = await repository.list_active()

        assert [c.code for c in categories] == ["A"]
        assert await repository.count_active() == 1

    @pytest.mark.asyncio
    async def test_empty_store(self, mock_db: Any) -> None:
        repository = CategoryRepository(mock_db)

        assert await repository.list_active() == []
        assert await repository.count_active() == 0

    @pytest.mark.asyncio
    async def test_normalizes_stored_weights(self, mock_db: Any) -> None:
        await mock_db[COLLECTION_NAME].insert_many([
            {"code": "A", "name": "Float", "weight": 12.5, "isActive": True},
            {"code": "B", "name": "Int", "weight": 3, "isActive": True},
            {"code": "C", "name": "Decimal128", "weight": Decimal128("7.25"), "isActive": True},
            {"code": "D", "name": "Null", "weight": None, "isActive": True},
            {"code": "E", "name": "Missing", "isActive": True},
        ])
        repository = CategoryRepository(mock_db)

        categories = await repository.list_active()

        assert [c.weight for c in categories] == [
            Decimal("12.5"),
            Decimal(3),
            Decimal("7.25"),
            None,
            None,
        ]
        assert categories[4].description == ""


class TestUpsert:
    @pytest.mark.asyncio
    async def test_creates_then_updates(self, mock_db: Any) -> None:
        repository = CategoryRepository(mock_db)
        original = BlueprintCategory(code="BC01", name="Wiring", weight=Decimal("15"))
        revised = BlueprintCategory(code="BC01", name="Wiring Methods", weight=Decimal("12.5"))

        assert await repository.upsert(original) is True
        assert await repository.upsert(revised) is False

        categories = await repository.list_active()
        assert len(categories) == 1
        assert categories[0].name == "Wiring Methods"
        assert categories[0].weight == Decimal("12.5")

    @pytest.mark.asyncio
    async def test_preserves_null_weight(self, mock_db: Any) -> None:
        repository = CategoryRepository(mock_db)

        await repository.upsert(BlueprintCategory(code="X", name="Unweighted"))

        categories = await repository.list_active()
        assert categories[0].weight is None
