"""Exam preview endpoint.

Shows how many questions each active blueprint category would receive
for a given exam size.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from exam_blueprint.api.dependencies import CategoryRepositoryDep
from exam_blueprint.api.exceptions import CategoriesNotFoundError, ValidationError
from exam_blueprint.api.response import success_response
from exam_blueprint.models.blueprint import DEFAULT_QUESTIONS, MAX_QUESTIONS, MIN_QUESTIONS
from exam_blueprint.services.blueprint_engine import build_preview

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/exam", tags=["Exam"])

INVALID_QUESTIONS_MESSAGE = (
    f"Invalid questions parameter. Must be between {MIN_QUESTIONS} and {MAX_QUESTIONS}."
)


def parse_question_count(raw: str | None) -> int:
    """Parse the `questions` query parameter, defaulting when absent."""
    if raw is None or raw == "":
        return DEFAULT_QUESTIONS

    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(INVALID_QUESTIONS_MESSAGE) from None

    if not MIN_QUESTIONS <= value <= MAX_QUESTIONS:
        raise ValidationError(INVALID_QUESTIONS_MESSAGE)
    return value


@router.get("/preview")
async def preview_exam(
    repository: CategoryRepositoryDep,
    questions: Annotated[
        str | None,
        Query(description=f"Total questions to distribute ({MIN_QUESTIONS}-{MAX_QUESTIONS})"),
    ] = None,
) -> JSONResponse:
    """Distribute questions across active blueprint categories."""
    total_questions = parse_question_count(questions)

    categories = await repository.list_active()
    if not categories:
        raise CategoriesNotFoundError()

    preview = build_preview(categories, total_questions)
    logger.info(
        f"Exam preview: {total_questions} questions across "
        f"{len(categories)} categories ({preview.engine.value})"
    )

    return JSONResponse(content=success_response(preview.model_dump(mode="json")))
