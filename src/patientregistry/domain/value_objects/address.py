"""
Address value object for patient demographics.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..errors import ValidationError


@dataclass(frozen=True)
class Address:
    """Immutable postal address value object."""

    street: str
    number: int
    city: str
    state: str
    zip_code: str

    def __post_init__(self) -> None:
        """Validate address components."""
        if not self.street or not self.city or not self.state or not self.zip_code:
            raise ValidationError("Address fields cannot be empty")

        # bool is an int subclass; True is not a house number
        if (
            not isinstance(self.number, int)
            or isinstance(self.number, bool)
            or self.number <= 0
        ):
            raise ValidationError(
                "Number must be a positive integer", {"number": self.number}
            )

    def __eq__(self, other: Any) -> bool:
        """Structural equality over all fields."""
        if not isinstance(other, Address):
            return False
        return (
            self.street == other.street
            and self.number == other.number
            and self.city == other.city
            and self.state == other.state
            and self.zip_code == other.zip_code
        )

    def __hash__(self) -> int:
        """Hash for use in sets and dictionaries."""
        return hash((self.street, self.number, self.city, self.state, self.zip_code))

    def __str__(self) -> str:
        return f"{self.street}, {self.number} - {self.city}/{self.state} {self.zip_code}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert address to dictionary representation."""
        return {
            "street": self.street,
            "number": self.number,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
        }
