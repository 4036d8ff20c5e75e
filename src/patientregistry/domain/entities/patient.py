"""Patient domain entity, the aggregate root of the registry."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from ...core.utils.datetime_utils import get_age_from_birthdate, to_calendar_date
from ..errors import ValidationError
from ..value_objects.address import Address
from ..value_objects.emergency_contact import EmergencyContact
from ..value_objects.medical_record import MedicalRecord


class Patient:
    """Patient domain entity.

    ``id`` is issued by the repository on insertion and is None until then;
    ``identification_document`` is the business identifier supplied by the
    caller. Demographic fields that may change (name, phone, email, address,
    emergency contact) are guarded by validating setters.

    ``medical_record`` is shared by reference: whoever reads it receives the
    live record and may append to it directly. The patient owns its lifetime
    and never replaces it.
    """

    def __init__(
        self,
        identification_document: Optional[str] = None,
        name: Optional[str] = None,
        birth_date: Union[str, date, datetime, None] = None,
        gender: Optional[str] = None,
        blood_type: Optional[str] = None,
        address: Optional[Address] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        emergency_contact: Optional[EmergencyContact] = None,
    ) -> None:
        if not identification_document:
            raise ValidationError("Identification document is required")
        if not name:
            raise ValidationError("Name is required")
        if not email:
            raise ValidationError("Email is required")

        parsed_birth_date = to_calendar_date(birth_date)
        if parsed_birth_date is None:
            raise ValidationError("Invalid birth date", {"birth_date": repr(birth_date)})
        if address is not None and not isinstance(address, Address):
            raise ValidationError("Invalid address")
        if emergency_contact is not None and not isinstance(emergency_contact, EmergencyContact):
            raise ValidationError("Invalid emergency contact")

        self._id: Optional[int] = None
        self._identification_document = identification_document
        self._name = name
        self._birth_date = parsed_birth_date
        self._gender = gender
        self._blood_type = blood_type
        self._address = address
        self._phone = phone
        self._email = email
        self._emergency_contact = emergency_contact
        self._medical_record = MedicalRecord()

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> "Patient":
        """Build a patient from a registration data bag; unknown keys are ignored."""
        return cls(
            identification_document=data.get("identification_document"),
            name=data.get("name"),
            birth_date=data.get("birth_date"),
            gender=data.get("gender"),
            blood_type=data.get("blood_type"),
            address=data.get("address"),
            phone=data.get("phone"),
            email=data.get("email"),
            emergency_contact=data.get("emergency_contact"),
        )

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def identification_document(self) -> str:
        return self._identification_document

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, new_name: str) -> None:
        if not new_name:
            raise ValidationError("Name cannot be empty")
        self._name = new_name

    @property
    def birth_date(self) -> date:
        return self._birth_date

    @property
    def gender(self) -> Optional[str]:
        return self._gender

    @property
    def blood_type(self) -> Optional[str]:
        return self._blood_type

    @property
    def address(self) -> Optional[Address]:
        return self._address

    @address.setter
    def address(self, new_address: Address) -> None:
        if not isinstance(new_address, Address):
            raise ValidationError("Invalid address")
        self._address = new_address

    @property
    def phone(self) -> Optional[str]:
        return self._phone

    @phone.setter
    def phone(self, new_phone: str) -> None:
        if not new_phone:
            raise ValidationError("Phone cannot be empty")
        self._phone = new_phone

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, new_email: str) -> None:
        if not new_email:
            raise ValidationError("Email cannot be empty")
        self._email = new_email

    @property
    def emergency_contact(self) -> Optional[EmergencyContact]:
        return self._emergency_contact

    @emergency_contact.setter
    def emergency_contact(self, new_contact: EmergencyContact) -> None:
        if not isinstance(new_contact, EmergencyContact):
            raise ValidationError("Invalid emergency contact")
        self._emergency_contact = new_contact

    @property
    def medical_record(self) -> MedicalRecord:
        return self._medical_record

    def get_age(self, today: Optional[date] = None) -> int:
        """Age in whole years as of ``today`` (default: the current local date).

        A birth date later than ``today`` yields a negative age.
        """
        return get_age_from_birthdate(self._birth_date, today)

    def __repr__(self) -> str:
        return f"Patient(id={self._id!r}, name={self._name!r})"


def _assign_identity(patient: Patient, patient_id: Optional[int]) -> None:
    """Set the repository-issued identity of ``patient``.

    Reserved for the persistence layer; it is not part of Patient's public
    interface. A second call overwrites the first; None clears the identity.
    """
    patient._id = patient_id
