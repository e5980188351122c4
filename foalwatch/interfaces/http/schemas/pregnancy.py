from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from foalwatch.domain.value_objects.gestation_stage import GestationStage


class MilestoneSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: int
    label: str = Field(min_length=1)


class PregnancySummaryRequest(BaseModel):
    # Dates stay untyped here; the domain parser owns the invalid_date error
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    conception_date: Any = Field(default=None, alias="conceptionDate")
    last_breeding_date: Any = Field(default=None, alias="lastBreedingDate")
    reference_date: Any = Field(default=None, alias="referenceDate")
    milestones: list[MilestoneSchema] | None = None
    upcoming_limit: int | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "conception_date": self.conception_date,
            "last_breeding_date": self.last_breeding_date,
            "reference_date": self.reference_date,
        }


class PregnancyStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    conception_date: date
    reference_date: date
    elapsed_days: int
    stage: GestationStage
    due_date: date
    progress_percent: float
    days_remaining: int
    is_overdue: bool
    days_overdue: int
    weeks_elapsed: int
    weeks_remaining: int


class DueDateWindowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    expected_due_date: date
    earliest_due_date: date
    latest_due_date: date
    days_until_due: int
    is_in_due_window: bool


class MonitoringScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    check_frequency_hours: int
    temperature_check: bool
    behavior_check: bool
    udder_check: bool
    vulva_check: bool
    priority: str
    is_critical_period: bool


class StageGuidelinesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    stage: GestationStage
    day_range: str
    monitoring: list[str]
    nutrition: list[str]
    exercise: list[str]
    risks: list[str]
    preparation: list[str]


class PreFoalingSignResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    description: str
    urgency: int
    time_to_foal: str


class MilestonesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    upcoming: list[MilestoneSchema]
    completed: list[MilestoneSchema]


class PregnancySummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    status: PregnancyStatusResponse
    due_window: DueDateWindowResponse
    monitoring: MonitoringScheduleResponse
    upcoming: list[MilestoneSchema]
    completed: list[MilestoneSchema]
    guidelines: StageGuidelinesResponse
    pre_foaling_signs: list[PreFoalingSignResponse]
