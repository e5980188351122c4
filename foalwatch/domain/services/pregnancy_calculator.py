"""Gestation arithmetic for mares.

Every function here is pure: callers pass "today" explicitly (or let it
default to the current date in the farm timezone) and get a fresh value
object back. Nothing is cached, so dashboards recompute on every render.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from datetime import date, datetime, timedelta, tzinfo

from foalwatch.domain.errors import InvalidDateError
from foalwatch.domain.models.care_guidelines import (
    PRE_FOALING_SIGNS,
    PRE_FOALING_SIGNS_START,
    STAGE_GUIDELINES,
    PreFoalingSign,
    StageGuidelines,
)
from foalwatch.domain.models.pregnancy import (
    EARLIEST_FOALING_DAY,
    LATEST_FOALING_DAY,
    MAX_CONCEPTION_DATE,
    STAGE_TABLE,
    TOTAL_GESTATION_DAYS,
    DueDateWindow,
    Milestone,
    MonitoringSchedule,
    PregnancyStatus,
)
from foalwatch.domain.value_objects.gestation_stage import GestationStage
from foalwatch.utils.datetime_tz import DEFAULT_TZ, local_today, to_calendar_date

DateLike = date | datetime | str

# Pre-foaling monitoring thresholds (elapsed days)
TEMPERATURE_MONITORING_START = 310
INTENSIVE_MONITORING_START = 320
CRITICAL_MONITORING_START = 330


def lookup_stage(elapsed_days: int) -> GestationStage:
    """Map elapsed days to a stage.

    Negative values (reference before conception) report EARLY; anything
    past the nominal due day stays PRE_FOALING, overdue is a separate flag.
    """
    for stage, _first, last in STAGE_TABLE:
        if last is None or elapsed_days <= last:
            return stage
    return GestationStage.PRE_FOALING


def compute_status(
    conception_date: DateLike,
    reference_date: DateLike | None = None,
    *,
    tz: tzinfo | None = None,
) -> PregnancyStatus:
    conceived, today = _resolve_dates(conception_date, reference_date, tz or DEFAULT_TZ)

    # Both sides are calendar dates, so this is already whole days
    elapsed = (today - conceived).days
    progress = min(100.0, max(0.0, elapsed / TOTAL_GESTATION_DAYS * 100))

    return PregnancyStatus(
        conception_date=conceived,
        reference_date=today,
        elapsed_days=elapsed,
        stage=lookup_stage(elapsed),
        due_date=conceived + timedelta(days=TOTAL_GESTATION_DAYS),
        progress_percent=progress,
        days_remaining=TOTAL_GESTATION_DAYS - elapsed,
        is_overdue=elapsed > TOTAL_GESTATION_DAYS,
    )


def upcoming_milestones(elapsed_days: int, milestone_table: Iterable[Milestone]) -> list[Milestone]:
    """Milestones still ahead, soonest first."""
    return sorted((m for m in milestone_table if m.day > elapsed_days), key=lambda m: m.day)


def completed_milestones(elapsed_days: int, milestone_table: Iterable[Milestone]) -> list[Milestone]:
    """Milestones already reached, most recent first. The boundary day counts as reached."""
    return sorted(
        (m for m in milestone_table if m.day <= elapsed_days),
        key=lambda m: m.day,
        reverse=True,
    )


def due_date_window(
    conception_date: DateLike,
    reference_date: DateLike | None = None,
    *,
    tz: tzinfo | None = None,
) -> DueDateWindow:
    conceived, today = _resolve_dates(conception_date, reference_date, tz or DEFAULT_TZ)
    expected = conceived + timedelta(days=TOTAL_GESTATION_DAYS)
    earliest = conceived + timedelta(days=EARLIEST_FOALING_DAY)
    latest = conceived + timedelta(days=LATEST_FOALING_DAY)
    return DueDateWindow(
        expected_due_date=expected,
        earliest_due_date=earliest,
        latest_due_date=latest,
        days_until_due=(expected - today).days,
        is_in_due_window=earliest <= today <= latest,
    )


def monitoring_schedule(elapsed_days: int) -> MonitoringSchedule:
    if elapsed_days >= CRITICAL_MONITORING_START:
        return MonitoringSchedule(
            check_frequency_hours=2,
            temperature_check=True,
            behavior_check=True,
            udder_check=True,
            vulva_check=True,
            priority="Critical",
            is_critical_period=True,
        )
    if elapsed_days >= INTENSIVE_MONITORING_START:
        return MonitoringSchedule(
            check_frequency_hours=6,
            temperature_check=True,
            behavior_check=True,
            udder_check=True,
            vulva_check=True,
            priority="High",
        )
    if elapsed_days >= TEMPERATURE_MONITORING_START:
        return MonitoringSchedule(
            check_frequency_hours=24,
            temperature_check=True,
            behavior_check=True,
            udder_check=True,
            vulva_check=False,
            priority="Medium",
        )
    return MonitoringSchedule(
        check_frequency_hours=24,
        temperature_check=False,
        behavior_check=True,
        udder_check=False,
        vulva_check=False,
        priority="Normal",
    )


def stage_guidelines(elapsed_days: int) -> StageGuidelines:
    """Care guidelines for the current stage.

    The static stage table is extended with the checks the monitoring
    schedule asks for at this point of gestation.
    """
    base = STAGE_GUIDELINES[lookup_stage(elapsed_days)]
    schedule = monitoring_schedule(elapsed_days)
    extra: list[str] = []
    if schedule.temperature_check:
        extra.append(f"Check temperature every {schedule.check_frequency_hours} hours")
    if schedule.udder_check:
        extra.append("Monitor udder development for signs of waxing")
    if schedule.vulva_check:
        extra.append("Check vulva for relaxation and color changes")
    if not extra:
        return base
    return replace(base, monitoring=base.monitoring + tuple(extra))


def pre_foaling_signs(elapsed_days: int) -> list[PreFoalingSign]:
    """Signs to watch for once foaling gets close; empty earlier in gestation."""
    if elapsed_days < PRE_FOALING_SIGNS_START:
        return []
    return list(PRE_FOALING_SIGNS)


def _resolve_dates(
    conception_date: DateLike, reference_date: DateLike | None, tz: tzinfo
) -> tuple[date, date]:
    conceived = to_calendar_date(conception_date, field="conception_date", tz=tz)
    if conceived > MAX_CONCEPTION_DATE:
        raise InvalidDateError(
            f"conception_date must be on or before {MAX_CONCEPTION_DATE.isoformat()}",
            details={"field": "conception_date", "value": conceived.isoformat()},
        )
    if reference_date is None:
        return conceived, local_today(tz)
    return conceived, to_calendar_date(reference_date, field="reference_date", tz=tz)
