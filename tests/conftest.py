"""
Shared fixtures for the patient registry tests.
"""

import pytest
from fastapi.testclient import TestClient

from patientregistry.adapters.db.memory.repositories import InMemoryPatientRepository
from patientregistry.api.deps import get_patient_repository
from patientregistry.app import app
from patientregistry.application.services import PatientService
from patientregistry.domain.entities import Patient
from patientregistry.domain.value_objects import Address, EmergencyContact


class ForgetfulRepository(InMemoryPatientRepository):
    """Repository whose reads never see what was written."""

    def find_by_id(self, key):
        return None


@pytest.fixture
def forgetful_repository():
    return ForgetfulRepository()


@pytest.fixture
def address():
    return Address("Rua das Flores", 123, "São Paulo", "SP", "01234-567")


@pytest.fixture
def emergency_contact():
    return EmergencyContact("Maria Silva", "+55 11 99999-9999")


@pytest.fixture
def patient_data(address, emergency_contact):
    """Valid registration data bag."""
    return {
        "identification_document": "123.456.789-00",
        "name": "João da Silva",
        "birth_date": "1990-05-15T00:00:00.000Z",
        "gender": "Masculino",
        "blood_type": "O+",
        "address": address,
        "phone": "+55 11 98765-4321",
        "email": "joao.silva@email.com",
        "emergency_contact": emergency_contact,
    }


@pytest.fixture
def patient(patient_data):
    return Patient(**patient_data)


@pytest.fixture
def repository():
    return InMemoryPatientRepository()


@pytest.fixture
def service(repository):
    return PatientService(repository)


@pytest.fixture
def client():
    """Test client backed by a fresh repository for each test."""
    repository = InMemoryPatientRepository()
    app.dependency_overrides[get_patient_repository] = lambda: repository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def patient_payload():
    """Valid JSON body for POST /patients/."""
    return {
        "identification_document": "123",
        "name": "Ana",
        "birth_date": "2000-01-01",
        "gender": "F",
        "blood_type": "A+",
        "address": {
            "street": "Avenida Paulista",
            "number": 1000,
            "city": "São Paulo",
            "state": "SP",
            "zip_code": "01310-100",
        },
        "phone": "+55 11 91234-5678",
        "email": "a@x.com",
        "emergency_contact": {"name": "Carlos", "phone": "+55 11 98888-8888"},
    }
