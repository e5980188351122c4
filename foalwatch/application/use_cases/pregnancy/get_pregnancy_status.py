from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Any, Mapping

from foalwatch.application.errors import InvalidDateInput
from foalwatch.domain.errors import InvalidDateError
from foalwatch.domain.models.pregnancy import PregnancyRecord, PregnancyStatus
from foalwatch.domain.services import pregnancy_calculator

logger = logging.getLogger(__name__)


def execute(
    payload: Mapping[str, Any] | PregnancyRecord,
    *,
    tz: tzinfo | None = None,
) -> PregnancyStatus:
    try:
        if isinstance(payload, PregnancyRecord):
            record = payload
        else:
            record = PregnancyRecord.from_payload(payload, tz=tz)
        status = pregnancy_calculator.compute_status(
            record.conception_date, record.reference_date, tz=tz
        )
    except InvalidDateError as exc:
        raise InvalidDateInput(exc.message, details=exc.details) from exc
    if status.is_before_conception:
        logger.warning(
            "Reference date %s precedes conception date %s (elapsed_days=%d)",
            status.reference_date.isoformat(),
            status.conception_date.isoformat(),
            status.elapsed_days,
        )
    return status
