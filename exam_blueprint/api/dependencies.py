"""FastAPI dependencies that hand collaborators to route handlers."""

from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from exam_blueprint.db.mongo import get_database
from exam_blueprint.services.category_repository import CategoryRepository


def get_category_repository(
    database: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
) -> CategoryRepository:
    """Build a category repository over the request's database."""
    return CategoryRepository(database)


CategoryRepositoryDep = Annotated[CategoryRepository, Depends(get_category_repository)]
