from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta, tzinfo
from typing import Any, Mapping

from foalwatch.domain.errors import InvalidDateError
from foalwatch.domain.value_objects.gestation_stage import GestationStage
from foalwatch.utils.datetime_tz import DEFAULT_TZ, to_calendar_date

# Average equine gestation
TOTAL_GESTATION_DAYS = 340

# Normal foaling window around the nominal due day
EARLIEST_FOALING_DAY = 320
LATEST_FOALING_DAY = 370

# Later conceptions would push the foaling window past date.max
MAX_CONCEPTION_DATE = date.max - timedelta(days=LATEST_FOALING_DAY)

# (stage, first day, last day); the last stage is open ended
STAGE_TABLE: tuple[tuple[GestationStage, int, int | None], ...] = (
    (GestationStage.EARLY, 0, 114),
    (GestationStage.MID, 115, 225),
    (GestationStage.LATE, 226, 310),
    (GestationStage.PRE_FOALING, 311, None),
)

_CONCEPTION_KEYS = ("conceptionDate", "conception_date", "lastBreedingDate", "last_breeding_date")
_REFERENCE_KEYS = ("referenceDate", "reference_date")


@dataclass(frozen=True, slots=True)
class Milestone:
    day: int
    label: str


DEFAULT_MILESTONES: tuple[Milestone, ...] = (
    Milestone(day=30, label="Heartbeat detectable"),
    Milestone(day=60, label="Fetus development begins"),
    Milestone(day=150, label="Mid-term checkup recommended"),
    Milestone(day=270, label="Begin foaling preparations"),
    Milestone(day=320, label="Foaling imminent"),
)


@dataclass(frozen=True, slots=True)
class PregnancyRecord:
    conception_date: date
    reference_date: date | None = None

    @classmethod
    def from_payload(
        cls, payload: Mapping[str, Any], *, tz: tzinfo | None = None
    ) -> PregnancyRecord:
        """Validate an untyped payload (e.g. fetched JSON) into a record."""
        tz = tz or DEFAULT_TZ
        if not isinstance(payload, Mapping):
            raise InvalidDateError("Pregnancy payload must be an object")
        conception_raw = _first_present(payload, _CONCEPTION_KEYS)
        if conception_raw is None:
            raise InvalidDateError(
                "conception date is required",
                details={"field": "conception_date", "accepted_keys": list(_CONCEPTION_KEYS)},
            )
        reference_raw = _first_present(payload, _REFERENCE_KEYS)
        return cls(
            conception_date=to_calendar_date(conception_raw, field="conception_date", tz=tz),
            reference_date=(
                to_calendar_date(reference_raw, field="reference_date", tz=tz)
                if reference_raw is not None
                else None
            ),
        )


@dataclass(frozen=True, slots=True)
class PregnancyStatus:
    conception_date: date
    reference_date: date
    elapsed_days: int
    stage: GestationStage
    due_date: date
    progress_percent: float
    days_remaining: int
    is_overdue: bool

    @property
    def days_overdue(self) -> int:
        return max(0, self.elapsed_days - TOTAL_GESTATION_DAYS)

    @property
    def weeks_elapsed(self) -> int:
        return _whole_weeks(self.elapsed_days)

    @property
    def weeks_remaining(self) -> int:
        return _whole_weeks(self.days_remaining)

    @property
    def is_before_conception(self) -> bool:
        # Usually a data-entry mistake upstream
        return self.elapsed_days < 0


@dataclass(frozen=True, slots=True)
class DueDateWindow:
    expected_due_date: date
    earliest_due_date: date
    latest_due_date: date
    days_until_due: int
    is_in_due_window: bool


@dataclass(frozen=True, slots=True)
class MonitoringSchedule:
    check_frequency_hours: int
    temperature_check: bool
    behavior_check: bool
    udder_check: bool
    vulva_check: bool
    priority: str
    is_critical_period: bool = False


def _first_present(payload: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _whole_weeks(days: int) -> int:
    # Truncate toward zero so -13 days reads as -1 week, not -2
    return int(days / 7)
