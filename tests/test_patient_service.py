"""
PatientService tests.
"""

from datetime import date

import pytest

from patientregistry.application.services import PatientService
from patientregistry.domain.enums import ErrorKind
from patientregistry.domain.errors import NotFoundError, PersistenceError, ValidationError
from patientregistry.domain.value_objects import (
    Address,
    Diagnosis,
    EmergencyContact,
    Medication,
    Treatment,
)


def test_requires_repository():
    with pytest.raises(ValueError, match="PatientRepository is required"):
        PatientService(None)


def test_end_to_end_scenario(service, patient_data):
    patient_data.update(
        identification_document="123", name="Ana", email="a@x.com", birth_date="2000-01-01"
    )

    created = service.add_patient(patient_data)
    assert created.id == 1

    updated = service.update_patient(1, {"name": "Ana Maria"})
    assert updated.name == "Ana Maria"
    assert updated.email == "a@x.com"

    deleted = service.delete_patient(1)
    assert deleted is created
    assert service.find_patient_by_id(1) is None


def test_add_patient_propagates_validation(service, patient_data):
    patient_data["name"] = ""

    with pytest.raises(ValidationError, match="Name is required"):
        service.add_patient(patient_data)
    assert service.find_all_patients() == []


def test_add_patient_detects_inconsistent_repository(forgetful_repository, patient_data):
    service = PatientService(forgetful_repository)

    with pytest.raises(PersistenceError, match="Failed to save patient") as exc_info:
        service.add_patient(patient_data)
    assert exc_info.value.kind is ErrorKind.PERSISTENCE


def test_find_all_and_by_id(service, patient_data):
    first = service.add_patient(patient_data)
    second = service.add_patient({**patient_data, "name": "Maria"})

    assert service.find_all_patients() == [first, second]
    assert service.find_patient_by_id(2) is second
    assert service.find_patient_by_id(3) is None


def test_update_missing_patient(service):
    with pytest.raises(NotFoundError, match="Patient not Found!") as exc_info:
        service.update_patient(999, {"name": "X"})
    assert exc_info.value.kind is ErrorKind.NOT_FOUND


def test_delete_missing_patient(service):
    with pytest.raises(NotFoundError, match="Patient not Found!"):
        service.delete_patient(999)


def test_update_applies_only_present_fields(service, patient_data):
    patient = service.add_patient(patient_data)
    new_address = Address("Avenida Paulista", 1000, "São Paulo", "SP", "01310-100")
    new_contact = EmergencyContact("Ana Costa", "+55 11 98888-8888")

    service.update_patient(
        patient.id,
        {
            "phone": "+55 11 90000-0000",
            "address": new_address,
            "emergency_contact": new_contact,
            "email": "",
            "name": None,
            "blood_type": "AB-",
        },
    )

    assert patient.phone == "+55 11 90000-0000"
    assert patient.address == new_address
    assert patient.emergency_contact == new_contact
    assert patient.email == patient_data["email"]
    assert patient.name == patient_data["name"]
    assert patient.blood_type == "O+"


def test_update_goes_through_entity_validation(service, patient_data):
    patient = service.add_patient(patient_data)

    with pytest.raises(ValidationError, match="Invalid address"):
        service.update_patient(patient.id, {"address": {"street": "Rua A"}})


def test_rejected_update_changes_nothing(service, patient_data):
    patient = service.add_patient(patient_data)

    with pytest.raises(ValidationError, match="Invalid address"):
        service.update_patient(
            patient.id,
            {"name": "Changed", "phone": "+55 11 90000-0000", "address": {"street": "Rua A"}},
        )

    stored = service.find_patient_by_id(patient.id)
    assert stored.name == patient_data["name"]
    assert stored.phone == patient_data["phone"]
    assert stored.address == patient_data["address"]


def test_search_delegation(service, patient_data):
    ana = service.add_patient({**patient_data, "name": "Ana", "blood_type": "A+"})
    service.add_patient({**patient_data, "name": "Bruno", "blood_type": "B+"})

    assert service.find_patient_by_name("Ana") == [ana]
    assert service.find_patient_by_name("ana") == []
    assert service.find_patient_by_blood_type("A+") == [ana]


def test_medical_record_operations(service, patient_data):
    patient = service.add_patient(patient_data)
    diagnosis = Diagnosis("Hypertension", date(2024, 1, 1))
    medication = Medication("Losartan", "50mg", "")
    finished = Treatment("Diet", date(2020, 1, 1), date(2020, 2, 1))
    ongoing = Treatment("Exercise", date(2024, 1, 1))

    service.add_diagnosis(patient.id, diagnosis)
    service.add_medication(patient.id, medication)
    service.add_treatment(patient.id, finished)
    record = service.add_treatment(patient.id, ongoing)

    assert record is patient.medical_record
    assert record.diagnoses == [diagnosis]
    assert record.medications == [medication]
    assert service.get_active_treatments(patient.id) == [ongoing]


def test_medical_record_of_missing_patient(service):
    with pytest.raises(NotFoundError, match="Patient not Found!"):
        service.get_medical_record(1)
    with pytest.raises(NotFoundError):
        service.add_diagnosis(1, Diagnosis("Flu", date(2024, 1, 1)))
