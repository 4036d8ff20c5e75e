"""Medical record aggregate owned by a patient."""

from datetime import datetime
from typing import Iterable, List, Optional, Type, TypeVar

from .diagnosis import Diagnosis
from .medication import Medication
from .treatment import Treatment

E = TypeVar("E")


def _checked_copy(items: Optional[Iterable[E]], expected: Type[E], label: str) -> List[E]:
    entries = list(items or [])
    for entry in entries:
        if not isinstance(entry, expected):
            raise TypeError(f"Invalid {label} object.")
    return entries


class MedicalRecord:
    """Append-only collections of diagnoses, medications and treatments.

    The accessors hand out fresh lists, so callers cannot reorder or drop
    entries. The entries themselves are immutable value objects.
    """

    def __init__(
        self,
        diagnoses: Optional[Iterable[Diagnosis]] = None,
        medications: Optional[Iterable[Medication]] = None,
        treatments: Optional[Iterable[Treatment]] = None,
    ) -> None:
        self._diagnoses = _checked_copy(diagnoses, Diagnosis, "diagnosis")
        self._medications = _checked_copy(medications, Medication, "medication")
        self._treatments = _checked_copy(treatments, Treatment, "treatment")

    @property
    def diagnoses(self) -> List[Diagnosis]:
        return list(self._diagnoses)

    @property
    def medications(self) -> List[Medication]:
        return list(self._medications)

    @property
    def treatments(self) -> List[Treatment]:
        return list(self._treatments)

    def add_diagnosis(self, diagnosis: Diagnosis) -> None:
        if not isinstance(diagnosis, Diagnosis):
            raise TypeError("Invalid diagnosis object.")
        self._diagnoses.append(diagnosis)

    def add_medication(self, medication: Medication) -> None:
        if not isinstance(medication, Medication):
            raise TypeError("Invalid medication object.")
        self._medications.append(medication)

    def add_treatment(self, treatment: Treatment) -> None:
        if not isinstance(treatment, Treatment):
            raise TypeError("Invalid treatment object.")
        self._treatments.append(treatment)

    def get_active_treatments(self, now: Optional[datetime] = None) -> List[Treatment]:
        """Treatments active at ``now``, in the order they were added."""
        return [treatment for treatment in self._treatments if treatment.is_active(now)]

    def __len__(self) -> int:
        return len(self._diagnoses) + len(self._medications) + len(self._treatments)

    def __repr__(self) -> str:
        return (
            f"MedicalRecord(diagnoses={len(self._diagnoses)}, "
            f"medications={len(self._medications)}, treatments={len(self._treatments)})"
        )
