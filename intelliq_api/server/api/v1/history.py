"""
Quiz History Endpoints.

Lists the quizzes the caller has played, newest first.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from intelliq_api.core.models.domain.enums import QuizType
from intelliq_api.core.models.io.history import (
    Pagination,
    QuizHistoryItem,
    QuizHistoryResponse,
)
from intelliq_api.server.services.deps import CurrentUserDep, QuizRepositoryDep

router = APIRouter()


def _split_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    if not tags:
        return None
    split = [tag.strip() for value in tags for tag in value.split(",") if tag.strip()]
    return split or None


@router.get(
    "",
    response_model=QuizHistoryResponse,
    summary="Get Quiz History",
    description="Paginated list of the caller's played quizzes.",
    response_description="History page and pagination metadata.",
)
async def get_history(
    user: CurrentUserDep,
    repository: QuizRepositoryDep,
    quiz_type: Optional[QuizType] = Query(None, alias="type", description="Only quizzes of this type"),
    status: Optional[bool] = Query(None, description="Only passed (true) or failed (false) quizzes"),
    tags: Optional[List[str]] = Query(None, description="Tags; repeat the parameter or separate with commas"),
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: int = Query(10, ge=1, le=100, description="Page size"),
):
    quizzes, total = await repository.list_history(
        user.id,
        quiz_type=quiz_type,
        passed=status,
        tags=_split_tags(tags),
        limit=limit,
        offset=(page - 1) * limit,
    )
    return QuizHistoryResponse(
        data=[QuizHistoryItem.from_entity(quiz) for quiz in quizzes],
        pagination=Pagination.build(page=page, limit=limit, total_items=total),
    )
