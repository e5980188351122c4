from __future__ import annotations

from typing import Any, Mapping


class InvalidDateError(ValueError):
    """A supplied value is not a usable calendar date."""

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details is not None else None

    @property
    def field(self) -> str | None:
        return self.details.get("field") if self.details else None
