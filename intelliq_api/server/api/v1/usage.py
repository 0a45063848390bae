"""
Usage Statistics Endpoints.

This module provides the endpoint for querying the aggregated token usage of
the caller's quiz generations.
"""

from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Query

from intelliq_api.core.models.io.usage import UsagePeriod, UsageRecord, UsageSummary
from intelliq_api.server.services.deps import CurrentUserDep, UsageRepositoryDep

router = APIRouter()


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat a date bound given without an offset as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@router.get(
    "",
    response_model=UsageSummary,
    summary="Get Usage Statistics",
    description="Retrieve aggregated token usage of the caller.",
    response_description="Aggregated usage data.",
)
async def get_usage(
    user: CurrentUserDep,
    repository: UsageRepositoryDep,
    from_date: Optional[datetime] = Query(None, alias="from", description="Start date for filtering usage."),
    to_date: Optional[datetime] = Query(None, alias="to", description="End date for filtering usage."),
):
    """
    Get aggregated usage.

    Sums prompt, completion and total tokens over the caller's usage rows
    within the optional date range.
    """
    from_date, to_date = as_utc(from_date), as_utc(to_date)
    totals = await repository.totals_for_user(user.id, from_date=from_date, to_date=to_date)
    return UsageSummary(
        user_id=user.id,
        period=UsagePeriod(from_date=from_date, to_date=to_date),
        **totals,
    )


@router.get(
    "/requests",
    response_model=List[UsageRecord],
    summary="List Usage Records",
    description="List the caller's recorded quiz generations, newest first.",
)
async def list_usage(
    user: CurrentUserDep,
    repository: UsageRepositoryDep,
    from_date: Optional[datetime] = Query(None, alias="from", description="Start date for filtering usage."),
    to_date: Optional[datetime] = Query(None, alias="to", description="End date for filtering usage."),
):
    rows = await repository.list_for_user(user.id, from_date=as_utc(from_date), to_date=as_utc(to_date))
    return [UsageRecord.model_validate(row) for row in rows]
