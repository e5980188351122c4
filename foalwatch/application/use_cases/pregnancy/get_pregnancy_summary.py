from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import tzinfo
from typing import Any, Mapping

from foalwatch.application.use_cases.pregnancy import get_pregnancy_status, list_milestones
from foalwatch.domain.models.care_guidelines import PreFoalingSign, StageGuidelines
from foalwatch.domain.models.pregnancy import (
    DueDateWindow,
    Milestone,
    MonitoringSchedule,
    PregnancyRecord,
    PregnancyStatus,
)
from foalwatch.domain.services import pregnancy_calculator


@dataclass(slots=True)
class PregnancySummary:
    status: PregnancyStatus
    due_window: DueDateWindow
    monitoring: MonitoringSchedule
    upcoming: list[Milestone]
    completed: list[Milestone]
    guidelines: StageGuidelines
    pre_foaling_signs: list[PreFoalingSign]


def execute(
    payload: Mapping[str, Any] | PregnancyRecord,
    *,
    tz: tzinfo | None = None,
    milestones: Iterable[Milestone] | None = None,
    upcoming_limit: int | None = None,
) -> PregnancySummary:
    status = get_pregnancy_status.execute(payload, tz=tz)
    # Reuse the resolved reference date so every section agrees on "today"
    due_window = pregnancy_calculator.due_date_window(
        status.conception_date, status.reference_date, tz=tz
    )
    milestones_result = list_milestones.execute(
        status.elapsed_days, milestones=milestones, upcoming_limit=upcoming_limit
    )
    return PregnancySummary(
        status=status,
        due_window=due_window,
        monitoring=pregnancy_calculator.monitoring_schedule(status.elapsed_days),
        upcoming=milestones_result.upcoming,
        completed=milestones_result.completed,
        guidelines=pregnancy_calculator.stage_guidelines(status.elapsed_days),
        pre_foaling_signs=pregnancy_calculator.pre_foaling_signs(status.elapsed_days),
    )
