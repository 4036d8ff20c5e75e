"""
Patient repository interface for data access abstraction.
"""

from abc import abstractmethod
from typing import List

from ....domain.entities.patient import Patient
from .repository import Repository


class PatientRepository(Repository[Patient]):
    """Abstract repository for patient data access."""

    @abstractmethod
    def add_patient(self, patient: Patient) -> int:
        """Assign the next identity to a patient, store it and return the identity."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> List[Patient]:
        """Find patients whose name matches exactly (case-sensitive)."""
        pass

    @abstractmethod
    def find_by_blood_type(self, blood_type: str) -> List[Patient]:
        """Find patients whose blood type matches exactly (case-sensitive)."""
        pass

    @abstractmethod
    def reset_current_id(self) -> None:
        """Restart identity generation without touching stored data."""
        pass
