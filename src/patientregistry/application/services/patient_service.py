"""Patient service orchestrating registry operations over a PatientRepository."""

import copy
from typing import Any, List, Mapping, Optional

from ...core.structured_logger import get_logger
from ...domain.entities.patient import Patient
from ...domain.errors import PatientNotFoundError, PersistenceError
from ...domain.value_objects.medical_record import (
    Diagnosis,
    MedicalRecord,
    Medication,
    Treatment,
)
from ..ports.repositories.patient_repo import PatientRepository

logger = get_logger(__name__)

# Fields a partial update may touch; each goes through the entity's setter.
UPDATABLE_FIELDS = ("name", "phone", "email", "emergency_contact", "address")


class PatientService:
    """Thin orchestration layer with existence checks before mutation."""

    def __init__(self, patient_repository: PatientRepository):
        if patient_repository is None:
            raise ValueError("PatientRepository is required")
        self._patient_repository = patient_repository

    def add_patient(self, patient_data: Mapping[str, Any]) -> Patient:
        """Register a new patient from a data bag and return the stored entity."""
        patient = Patient.from_data(patient_data)
        patient_id = self._patient_repository.add_patient(patient)
        saved_patient = self._patient_repository.find_by_id(patient_id)

        if saved_patient is None:
            logger.error("Patient missing right after insert", patient_id=patient_id)
            raise PersistenceError("Failed to save patient", {"patient_id": patient_id})

        logger.info("Patient registered", patient_id=patient_id)
        return saved_patient

    def find_all_patients(self) -> List[Patient]:
        return self._patient_repository.find_all()

    def find_patient_by_id(self, patient_id: int) -> Optional[Patient]:
        return self._patient_repository.find_by_id(patient_id)

    def update_patient(self, patient_id: int, updated_data: Mapping[str, Any]) -> Patient:
        """Apply the truthy fields of ``updated_data``; everything else is left as is.

        All changes are validated before any is applied, so a rejected update
        leaves the stored patient untouched.
        """
        patient = self._get_existing(patient_id)

        changes = {
            field_name: updated_data.get(field_name)
            for field_name in UPDATABLE_FIELDS
            if updated_data.get(field_name)
        }

        # Dry run on a shallow copy; the setters are the validators
        draft = copy.copy(patient)
        for field_name, value in changes.items():
            setattr(draft, field_name, value)

        for field_name, value in changes.items():
            setattr(patient, field_name, value)

        self._patient_repository.update(patient_id, patient)

        logger.info("Patient updated", patient_id=patient_id, fields=list(changes))
        return patient

    def delete_patient(self, patient_id: int) -> Patient:
        """Delete a patient and return the removed entity."""
        patient = self._get_existing(patient_id)
        self._patient_repository.delete(patient_id)

        logger.info("Patient deleted", patient_id=patient_id)
        return patient

    def find_patient_by_name(self, name: str) -> List[Patient]:
        return self._patient_repository.find_by_name(name)

    def find_patient_by_blood_type(self, blood_type: str) -> List[Patient]:
        return self._patient_repository.find_by_blood_type(blood_type)

    # Medical record operations work on the patient's live record.

    def get_medical_record(self, patient_id: int) -> MedicalRecord:
        return self._get_existing(patient_id).medical_record

    def add_diagnosis(self, patient_id: int, diagnosis: Diagnosis) -> MedicalRecord:
        record = self.get_medical_record(patient_id)
        record.add_diagnosis(diagnosis)
        logger.info("Diagnosis recorded", patient_id=patient_id)
        return record

    def add_medication(self, patient_id: int, medication: Medication) -> MedicalRecord:
        record = self.get_medical_record(patient_id)
        record.add_medication(medication)
        logger.info("Medication recorded", patient_id=patient_id)
        return record

    def add_treatment(self, patient_id: int, treatment: Treatment) -> MedicalRecord:
        record = self.get_medical_record(patient_id)
        record.add_treatment(treatment)
        logger.info("Treatment recorded", patient_id=patient_id)
        return record

    def get_active_treatments(self, patient_id: int) -> List[Treatment]:
        return self.get_medical_record(patient_id).get_active_treatments()

    def _get_existing(self, patient_id: int) -> Patient:
        patient = self._patient_repository.find_by_id(patient_id)
        if patient is None:
            raise PatientNotFoundError(patient_id)
        return patient
