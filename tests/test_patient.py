"""
Patient entity tests.
"""

from datetime import date, datetime, timezone

import pytest

from patientregistry.domain.entities import Patient
from patientregistry.domain.entities.patient import _assign_identity
from patientregistry.domain.errors import ValidationError
from patientregistry.domain.value_objects import Address, Diagnosis, EmergencyContact


class TestConstruction:
    def test_valid_patient(self, patient):
        assert patient.name == "João da Silva"
        assert patient.identification_document == "123.456.789-00"
        assert patient.email == "joao.silva@email.com"
        assert patient.phone == "+55 11 98765-4321"
        assert patient.gender == "Masculino"
        assert patient.blood_type == "O+"

    def test_birth_date_string_is_parsed(self, patient):
        assert patient.birth_date == date(1990, 5, 15)

    def test_birth_date_accepts_date_and_datetime(self, patient_data):
        patient_data["birth_date"] = datetime(1990, 5, 15, tzinfo=timezone.utc)
        assert Patient(**patient_data).birth_date == date(1990, 5, 15)

        patient_data["birth_date"] = date(1990, 5, 15)
        assert Patient(**patient_data).birth_date == date(1990, 5, 15)

    def test_birth_date_keeps_the_written_day(self, patient_data):
        patient_data["birth_date"] = "2000-01-01T08:00:00+09:00"
        assert Patient(**patient_data).birth_date == date(2000, 1, 1)

        patient_data["birth_date"] = "1999-12-31T20:00:00-05:00"
        assert Patient(**patient_data).birth_date == date(1999, 12, 31)

    def test_invalid_birth_date(self, patient_data):
        patient_data["birth_date"] = "15/05/1990"
        with pytest.raises(ValidationError, match="Invalid birth date"):
            Patient(**patient_data)

    def test_starts_with_empty_medical_record(self, patient):
        assert patient.medical_record.diagnoses == []
        assert patient.medical_record.medications == []
        assert patient.medical_record.treatments == []

    @pytest.mark.parametrize(
        "field,message",
        [
            ("identification_document", "Identification document is required"),
            ("name", "Name is required"),
            ("email", "Email is required"),
        ],
    )
    def test_required_fields(self, patient_data, field, message):
        patient_data[field] = ""
        with pytest.raises(ValidationError, match=message):
            Patient(**patient_data)

    def test_first_missing_field_is_reported(self, patient_data):
        patient_data["name"] = ""
        patient_data["email"] = ""
        with pytest.raises(ValidationError, match="Name is required"):
            Patient(**patient_data)

    def test_failed_construction_leaves_nothing_behind(self, patient_data):
        patient_data["name"] = ""
        created = None
        with pytest.raises(ValidationError) as exc_info:
            created = Patient(**patient_data)
        assert created is None
        assert exc_info.value.message == "Name is required"

    def test_from_data_ignores_unknown_keys(self, patient_data):
        patient = Patient.from_data({**patient_data, "nickname": "Jão"})
        assert patient.name == "João da Silva"

    def test_from_data_with_missing_keys_reports_first_required(self):
        with pytest.raises(ValidationError, match="Identification document is required"):
            Patient.from_data({"name": "Ana"})

    def test_wrong_typed_address_rejected_at_construction(self, patient_data):
        patient_data["address"] = {"street": "Rua A"}
        with pytest.raises(ValidationError, match="Invalid address"):
            Patient(**patient_data)


class TestIdentity:
    def test_id_is_unset_before_persistence(self, patient):
        assert patient.id is None

    def test_assign_identity(self, patient):
        _assign_identity(patient, 7)
        assert patient.id == 7

    def test_second_assignment_overwrites(self, patient):
        _assign_identity(patient, 7)
        _assign_identity(patient, 9)
        assert patient.id == 9

    def test_id_has_no_public_setter(self, patient):
        with pytest.raises(AttributeError):
            patient.id = 3


class TestSetters:
    def test_update_name(self, patient):
        patient.name = "Pedro Santos"
        assert patient.name == "Pedro Santos"

    @pytest.mark.parametrize(
        "field,message",
        [
            ("name", "Name cannot be empty"),
            ("phone", "Phone cannot be empty"),
            ("email", "Email cannot be empty"),
        ],
    )
    def test_empty_values_rejected(self, patient, field, message):
        before = getattr(patient, field)
        with pytest.raises(ValidationError, match=message):
            setattr(patient, field, "")
        assert getattr(patient, field) == before

    def test_update_phone_and_email(self, patient):
        patient.phone = "+55 11 91234-5678"
        patient.email = "novo.email@example.com"
        assert patient.phone == "+55 11 91234-5678"
        assert patient.email == "novo.email@example.com"

    def test_update_address(self, patient):
        patient.address = Address("Avenida Paulista", 1000, "São Paulo", "SP", "01310-100")
        assert patient.address.street == "Avenida Paulista"
        assert patient.address.number == 1000

    def test_address_lookalike_rejected(self, patient, address):
        class FakeAddress:
            street = "Invalid"

        with pytest.raises(ValidationError, match="Invalid address"):
            patient.address = FakeAddress()
        with pytest.raises(ValidationError, match="Invalid address"):
            patient.address = address.to_dict()
        assert patient.address == address

    def test_update_emergency_contact(self, patient):
        patient.emergency_contact = EmergencyContact("Ana Costa", "+55 11 98888-8888")
        assert patient.emergency_contact.name == "Ana Costa"
        assert patient.emergency_contact.phone == "+55 11 98888-8888"

    def test_emergency_contact_lookalike_rejected(self, patient, emergency_contact):
        with pytest.raises(ValidationError, match="Invalid emergency contact"):
            patient.emergency_contact = {"name": "Invalid"}
        assert patient.emergency_contact == emergency_contact

    def test_immutable_fields_have_no_setter(self, patient):
        for field in ("identification_document", "birth_date", "gender", "blood_type", "medical_record"):
            with pytest.raises(AttributeError):
                setattr(patient, field, "x")


class TestMedicalRecordSharing:
    def test_medical_record_is_the_live_instance(self, patient):
        record = patient.medical_record
        record.add_diagnosis(Diagnosis("Diabetes", date.today()))

        assert patient.medical_record is record
        assert len(patient.medical_record.diagnoses) == 1


class TestAge:
    def test_birthday_already_happened(self, patient_data):
        patient_data["birth_date"] = date(1994, 1, 1)
        assert Patient(**patient_data).get_age(today=date(2024, 6, 1)) == 30

    def test_birthday_is_today(self, patient_data):
        patient_data["birth_date"] = date(1994, 6, 1)
        assert Patient(**patient_data).get_age(today=date(2024, 6, 1)) == 30

    def test_birthday_tomorrow(self, patient_data):
        patient_data["birth_date"] = date(1994, 6, 2)
        assert Patient(**patient_data).get_age(today=date(2024, 6, 1)) == 29

    def test_birthday_later_month(self, patient_data):
        patient_data["birth_date"] = date(1994, 12, 31)
        assert Patient(**patient_data).get_age(today=date(2024, 6, 1)) == 29

    def test_defaults_to_today(self, patient_data):
        today = date.today()
        patient_data["birth_date"] = date(today.year - 30, 1, 1)
        assert Patient(**patient_data).get_age() == 30

    def test_future_birth_date_is_negative(self, patient_data):
        patient_data["birth_date"] = date(2030, 1, 1)
        assert Patient(**patient_data).get_age(today=date(2024, 6, 1)) == -6
