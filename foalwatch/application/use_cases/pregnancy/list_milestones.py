from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from foalwatch.application.errors import ValidationError
from foalwatch.domain.models.pregnancy import DEFAULT_MILESTONES, Milestone
from foalwatch.domain.services import pregnancy_calculator

MAX_UPCOMING_LIMIT = 50


@dataclass(slots=True)
class MilestonesResult:
    upcoming: list[Milestone]
    completed: list[Milestone]


def execute(
    elapsed_days: int,
    *,
    milestones: Iterable[Milestone] | None = None,
    upcoming_limit: int | None = None,
) -> MilestonesResult:
    if upcoming_limit is not None and (upcoming_limit <= 0 or upcoming_limit > MAX_UPCOMING_LIMIT):
        raise ValidationError(f"limit must be between 1 and {MAX_UPCOMING_LIMIT}")

    table = tuple(milestones) if milestones is not None else DEFAULT_MILESTONES
    upcoming = pregnancy_calculator.upcoming_milestones(elapsed_days, table)
    if upcoming_limit is not None:
        upcoming = upcoming[:upcoming_limit]
    return MilestonesResult(
        upcoming=upcoming,
        completed=pregnancy_calculator.completed_milestones(elapsed_days, table),
    )
