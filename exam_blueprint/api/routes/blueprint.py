"""Blueprint category listing endpoint."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from exam_blueprint.api.dependencies import CategoryRepositoryDep
from exam_blueprint.api.response import success_response

router = APIRouter(prefix="/blueprint", tags=["Blueprint"])


@router.get("/categories")
async def list_categories(repository: CategoryRepositoryDep) -> JSONResponse:
    """List active blueprint categories, sorted by code."""
    categories = await repository.list_active()
    return JSONResponse(
        content=success_response([c.model_dump(mode="json") for c in categories])
    )
