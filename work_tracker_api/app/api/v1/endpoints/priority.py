"""
Priority preview endpoint for API v1.

Forms call this while the user picks a deadline to learn whether the
priority selector must be locked and which value will be stored.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from work_tracker_api.app.api.dependencies import get_today
from work_tracker_api.app.core import priority as rules
from work_tracker_api.app.schemas.service_record import PriorityPreview


router = APIRouter()


@router.get("/preview", response_model=PriorityPreview)
async def preview_priority(
    submission_date: str = Query(..., description="Deadline as an ISO date, e.g. 2024-06-20."),
    priority: Optional[rules.Priority] = Query(
        None,
        description="Priority the user would choose. Defaults to the suggested priority.",
    ),
    today: date = Depends(get_today),
) -> PriorityPreview:
    """Apply the priority rules to a prospective deadline.

    ``effective_priority`` is the value that would be stored: ``High``
    when fewer than eight days remain, otherwise the chosen priority (or
    the suggestion when none is given).
    """
    try:
        deadline = rules.to_date(submission_date)
    except rules.InvalidDateError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    days = rules.days_until(deadline, today)
    suggested = rules.suggested_priority(deadline, today)
    return PriorityPreview(
        submission_date=deadline,
        days_until=days,
        days_until_text=rules.days_until_text(days),
        suggested_priority=suggested,
        priority_editable=rules.is_priority_editable(deadline, today),
        effective_priority=rules.resolve_effective_priority(deadline, priority or suggested, today),
    )
