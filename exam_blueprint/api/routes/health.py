"""Health check endpoint."""

from fastapi import APIRouter

from exam_blueprint.api.dependencies import CategoryRepositoryDep
from exam_blueprint.api.response import success_response

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check(repository: CategoryRepositoryDep) -> dict:
    """Report status and how many categories a preview would use.

    Goes through the category store, so an unreachable database
    surfaces as 503 here too.
    """
    active = await repository.count_active()
    return success_response({"status": "ok", "activeCategories": active})
