"""Medication value object."""

from dataclasses import dataclass

from ...errors import ValidationError


@dataclass(frozen=True)
class Medication:
    """A prescribed medication. Instructions may be empty."""

    name: str
    dosage: str
    instructions: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Medication name is required")
        if not self.dosage:
            raise ValidationError("Medication dosage is required")
