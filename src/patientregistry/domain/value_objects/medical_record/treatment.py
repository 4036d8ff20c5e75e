"""Treatment value object."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...errors import ValidationError
from ....core.utils.datetime_utils import get_current_timestamp, to_utc_datetime


@dataclass(frozen=True)
class Treatment:
    """A treatment with a start date and an optional end date.

    Both dates are stored as aware UTC datetimes. A treatment without an end
    date is open-ended and therefore always active.
    """

    description: str
    start_date: datetime
    end_date: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.description:
            raise ValidationError("Treatment description is required")

        start = to_utc_datetime(self.start_date)
        if start is None:
            raise ValidationError(
                "Invalid treatment start date", {"start_date": repr(self.start_date)}
            )

        end = None
        if self.end_date is not None:
            end = to_utc_datetime(self.end_date)
            if end is None:
                raise ValidationError(
                    "Invalid treatment end date", {"end_date": repr(self.end_date)}
                )
            if end < start:
                raise ValidationError("End date cannot be before start date")

        object.__setattr__(self, "start_date", start)
        object.__setattr__(self, "end_date", end)

    def is_active(self, now: Optional[datetime] = None) -> bool:
        """Whether the treatment is still running at ``now`` (default: current UTC time)."""
        if self.end_date is None:
            return True
        current = to_utc_datetime(now) if now is not None else get_current_timestamp()
        return current <= self.end_date
