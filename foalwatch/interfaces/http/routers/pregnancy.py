from __future__ import annotations

from fastapi import APIRouter, Depends

from foalwatch.application.use_cases.pregnancy import (
    get_pregnancy_status,
    get_pregnancy_summary,
    list_milestones,
)
from foalwatch.config.settings import Settings
from foalwatch.domain.models.pregnancy import Milestone
from foalwatch.interfaces.http.deps import get_app_settings
from foalwatch.interfaces.http.schemas.pregnancy import (
    MilestonesResponse,
    PregnancyStatusResponse,
    PregnancySummaryRequest,
    PregnancySummaryResponse,
)

router = APIRouter(prefix="/pregnancy", tags=["pregnancy"])


@router.get("/status", response_model=PregnancyStatusResponse)
async def pregnancy_status_endpoint(
    conception_date: str,
    reference_date: str | None = None,
    settings: Settings = Depends(get_app_settings),
):
    status = get_pregnancy_status.execute(
        {"conception_date": conception_date, "reference_date": reference_date},
        tz=settings.tz,
    )
    return PregnancyStatusResponse.model_validate(status)


@router.get("/milestones", response_model=MilestonesResponse)
async def milestones_endpoint(
    elapsed_days: int,
    limit: int | None = None,
    settings: Settings = Depends(get_app_settings),
):
    result = list_milestones.execute(
        elapsed_days,
        upcoming_limit=limit if limit is not None else settings.upcoming_milestone_limit,
    )
    return MilestonesResponse.model_validate(result)


@router.post("/summary", response_model=PregnancySummaryResponse)
async def pregnancy_summary_endpoint(
    payload: PregnancySummaryRequest,
    settings: Settings = Depends(get_app_settings),
):
    milestones = None
    if payload.milestones is not None:
        milestones = [Milestone(day=m.day, label=m.label) for m in payload.milestones]
    summary = get_pregnancy_summary.execute(
        payload.to_payload(),
        tz=settings.tz,
        milestones=milestones,
        upcoming_limit=(
            payload.upcoming_limit
            if payload.upcoming_limit is not None
            else settings.upcoming_milestone_limit
        ),
    )
    return PregnancySummaryResponse.model_validate(summary)
