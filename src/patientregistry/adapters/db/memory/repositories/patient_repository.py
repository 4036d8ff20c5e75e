"""
In-memory implementation of PatientRepository.
"""

from typing import List, Optional

from patientregistry.adapters.db.memory.repositories.in_memory_repository import (
    InMemoryRepository,
)
from patientregistry.application.ports.repositories.patient_repo import PatientRepository
from patientregistry.core.structured_logger import get_logger
from patientregistry.domain.entities.patient import Patient, _assign_identity
from patientregistry.domain.errors import AlreadyExistsError

logger = get_logger(__name__)


class InMemoryPatientRepository(PatientRepository):
    """In-memory PatientRepository that issues sequential identities.

    Wraps an ``InMemoryRepository[Patient]``. Like the store it wraps, it is
    not thread-safe.
    """

    def __init__(self, start_id: int = 1) -> None:
        self._store: InMemoryRepository[Patient] = InMemoryRepository(Patient)
        self._start_id = start_id
        self._current_id = start_id

    def add(self, key: int, patient: Patient) -> int:
        """Insert a patient that already carries its identity (e.g. a restore)."""
        if not isinstance(patient, Patient):
            raise TypeError("Can only add Patient instances")
        return self._store.add(key, patient)

    def add_patient(self, patient: Patient) -> int:
        if not isinstance(patient, Patient):
            raise TypeError("Can only add Patient instances")

        patient_id = self._current_id
        self._current_id += 1
        _assign_identity(patient, patient_id)
        try:
            self._store.add(patient_id, patient)
        except AlreadyExistsError:
            # The id stays consumed; only the rejected patient gives it back
            _assign_identity(patient, None)
            raise

        logger.debug("Assigned patient identity", patient_id=patient_id)
        return patient_id

    def find_by_id(self, key: int) -> Optional[Patient]:
        return self._store.find_by_id(key)

    def find_all(self) -> List[Patient]:
        return self._store.find_all()

    def update(self, key: int, patient: Patient) -> None:
        self._store.update(key, patient)

    def delete(self, key: int) -> None:
        self._store.delete(key)

    def clear(self) -> None:
        self._store.clear()

    def find_by_name(self, name: str) -> List[Patient]:
        return [patient for patient in self.find_all() if patient.name == name]

    def find_by_blood_type(self, blood_type: str) -> List[Patient]:
        return [patient for patient in self.find_all() if patient.blood_type == blood_type]

    def reset_current_id(self) -> None:
        self._current_id = self._start_id
