"""Emergency contact value object."""

from dataclasses import dataclass
from typing import Any, Dict

from ..errors import ValidationError


@dataclass(frozen=True)
class EmergencyContact:
    """Immutable value object for a patient's emergency contact."""

    name: str
    phone: str

    def __post_init__(self) -> None:
        if not self.name or not self.phone:
            raise ValidationError("Emergency contact must have a name and phone number")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, EmergencyContact):
            return False
        return self.name == other.name and self.phone == other.phone

    def __hash__(self) -> int:
        return hash((self.name, self.phone))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {"name": self.name, "phone": self.phone}
