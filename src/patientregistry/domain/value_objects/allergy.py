"""Allergy value object."""

from dataclasses import dataclass
from typing import Any

from ..errors import ValidationError


@dataclass(frozen=True)
class Allergy:
    """Immutable allergy, identified by its name."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Allergy name is required")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Allergy):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name
