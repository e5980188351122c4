from __future__ import annotations

from datetime import date

import pytest

from foalwatch.domain.errors import InvalidDateError
from foalwatch.domain.models.pregnancy import PregnancyRecord


@pytest.mark.parametrize(
    "key", ["conceptionDate", "conception_date", "lastBreedingDate", "last_breeding_date"]
)
def test_from_payload_accepts_known_keys(key: str):
    record = PregnancyRecord.from_payload({key: "2024-01-01", "referenceDate": "2024-06-01"})
    assert record.conception_date == date(2024, 1, 1)
    assert record.reference_date == date(2024, 6, 1)


def test_conception_key_wins_over_breeding_key():
    record = PregnancyRecord.from_payload(
        {"conception_date": "2024-01-01", "last_breeding_date": "2023-12-20"}
    )
    assert record.conception_date == date(2024, 1, 1)
    assert record.reference_date is None


def test_missing_conception_date_is_rejected():
    with pytest.raises(InvalidDateError) as exc_info:
        PregnancyRecord.from_payload({"name": "Stella", "isPregnant": True})
    assert exc_info.value.details["field"] == "conception_date"


def test_malformed_reference_date_is_rejected():
    with pytest.raises(InvalidDateError) as exc_info:
        PregnancyRecord.from_payload({"conceptionDate": "2024-01-01", "referenceDate": 17})
    assert exc_info.value.details["field"] == "reference_date"


def test_non_mapping_payload_is_rejected():
    with pytest.raises(InvalidDateError):
        PregnancyRecord.from_payload(["2024-01-01"])  # type: ignore[arg-type]
