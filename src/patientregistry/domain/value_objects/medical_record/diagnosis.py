"""Diagnosis value object."""

from dataclasses import dataclass
from datetime import datetime

from ...errors import ValidationError
from ....core.utils.datetime_utils import to_utc_datetime


@dataclass(frozen=True)
class Diagnosis:
    """A dated diagnosis entry in a medical record.

    ``date`` accepts a date, a datetime or an ISO-8601 string and is stored
    as an aware UTC datetime. datetime objects are immutable, so the value
    handed out by the attribute can never be used to alter this diagnosis.
    """

    description: str
    date: datetime

    def __post_init__(self) -> None:
        if not self.description:
            raise ValidationError("Diagnosis description is required")

        normalized = to_utc_datetime(self.date)
        if normalized is None:
            raise ValidationError("Invalid diagnosis date", {"date": repr(self.date)})
        object.__setattr__(self, "date", normalized)
