"""
Pydantic schemas for patient-related API endpoints.

Request schemas only check JSON shape; business rules are left to the domain
objects they are converted into, so the API reports the same validation
messages as the service layer.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ...domain.entities.patient import Patient
from ...domain.value_objects import (
    Address,
    Diagnosis,
    EmergencyContact,
    MedicalRecord,
    Medication,
    Treatment,
)


class AddressSchema(BaseModel):
    """Postal address."""

    street: str = Field("", description="Street name")
    number: int = Field(..., description="House number (positive)")
    city: str = Field("", description="City")
    state: str = Field("", description="State")
    zip_code: str = Field("", description="Postal code")

    def to_domain(self) -> Address:
        return Address(
            street=self.street,
            number=self.number,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
        )

    @classmethod
    def from_domain(cls, address: Address) -> "AddressSchema":
        return cls(**address.to_dict())


class EmergencyContactSchema(BaseModel):
    """Emergency contact."""

    name: str = Field("", description="Contact name")
    phone: str = Field("", description="Contact phone")

    def to_domain(self) -> EmergencyContact:
        return EmergencyContact(name=self.name, phone=self.phone)

    @classmethod
    def from_domain(cls, contact: EmergencyContact) -> "EmergencyContactSchema":
        return cls(**contact.to_dict())


class CreatePatientRequest(BaseModel):
    """Request schema for patient registration."""

    identification_document: str = Field("", description="Business identifier (e.g. national ID)")
    name: str = Field("", description="Full name")
    birth_date: str = Field("", description="Birth date, ISO-8601")
    gender: Optional[str] = Field(None, description="Gender")
    blood_type: Optional[str] = Field(None, description="Blood type, e.g. O+")
    address: Optional[AddressSchema] = None
    phone: Optional[str] = Field(None, description="Phone number")
    email: str = Field("", description="Email address")
    emergency_contact: Optional[EmergencyContactSchema] = None

    def to_patient_data(self) -> Dict[str, Any]:
        """Convert into the data bag accepted by PatientService.add_patient."""
        data = self.model_dump(exclude={"address", "emergency_contact"})
        data["address"] = self.address.to_domain() if self.address else None
        data["emergency_contact"] = (
            self.emergency_contact.to_domain() if self.emergency_contact else None
        )
        return data


class UpdatePatientRequest(BaseModel):
    """Partial update; omitted or empty fields are left untouched."""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    emergency_contact: Optional[EmergencyContactSchema] = None
    address: Optional[AddressSchema] = None

    def to_update_data(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "phone": self.phone, "email": self.email}
        if self.emergency_contact is not None:
            data["emergency_contact"] = self.emergency_contact.to_domain()
        if self.address is not None:
            data["address"] = self.address.to_domain()
        return data


class PatientResponse(BaseModel):
    """Patient representation returned by the API."""

    id: Optional[int]
    identification_document: str
    name: str
    birth_date: date
    age: int
    gender: Optional[str] = None
    blood_type: Optional[str] = None
    address: Optional[AddressSchema] = None
    phone: Optional[str] = None
    email: str
    emergency_contact: Optional[EmergencyContactSchema] = None

    @classmethod
    def from_entity(cls, patient: Patient) -> "PatientResponse":
        return cls(
            id=patient.id,
            identification_document=patient.identification_document,
            name=patient.name,
            birth_date=patient.birth_date,
            age=patient.get_age(),
            gender=patient.gender,
            blood_type=patient.blood_type,
            address=AddressSchema.from_domain(patient.address) if patient.address else None,
            phone=patient.phone,
            email=patient.email,
            emergency_contact=(
                EmergencyContactSchema.from_domain(patient.emergency_contact)
                if patient.emergency_contact
                else None
            ),
        )


# ============================================================================
# MEDICAL RECORD SCHEMAS
# ============================================================================


class DiagnosisRequest(BaseModel):
    description: str = ""
    date: str = Field("", description="Diagnosis date, ISO-8601")

    def to_domain(self) -> Diagnosis:
        return Diagnosis(description=self.description, date=self.date)


class MedicationRequest(BaseModel):
    name: str = ""
    dosage: str = ""
    instructions: str = ""

    def to_domain(self) -> Medication:
        return Medication(name=self.name, dosage=self.dosage, instructions=self.instructions)


class TreatmentRequest(BaseModel):
    description: str = ""
    start_date: str = Field("", description="Start date, ISO-8601")
    end_date: Optional[str] = Field(None, description="End date, ISO-8601; omit if open-ended")

    def to_domain(self) -> Treatment:
        return Treatment(
            description=self.description,
            start_date=self.start_date,
            end_date=self.end_date or None,
        )


class DiagnosisSchema(BaseModel):
    description: str
    date: datetime


class MedicationSchema(BaseModel):
    name: str
    dosage: str
    instructions: str


class TreatmentSchema(BaseModel):
    description: str
    start_date: datetime
    end_date: Optional[datetime] = None
    active: bool

    @classmethod
    def from_domain(cls, treatment: Treatment) -> "TreatmentSchema":
        return cls(
            description=treatment.description,
            start_date=treatment.start_date,
            end_date=treatment.end_date,
            active=treatment.is_active(),
        )


class MedicalRecordResponse(BaseModel):
    diagnoses: List[DiagnosisSchema]
    medications: List[MedicationSchema]
    treatments: List[TreatmentSchema]

    @classmethod
    def from_domain(cls, record: MedicalRecord) -> "MedicalRecordResponse":
        return cls(
            diagnoses=[
                DiagnosisSchema(description=d.description, date=d.date)
                for d in record.diagnoses
            ],
            medications=[
                MedicationSchema(name=m.name, dosage=m.dosage, instructions=m.instructions)
                for m in record.medications
            ],
            treatments=[TreatmentSchema.from_domain(t) for t in record.treatments],
        )
