"""
API schemas package.
"""

from .common import ErrorResponse, HealthResponse
from .patient import (
    AddressSchema,
    CreatePatientRequest,
    DiagnosisRequest,
    EmergencyContactSchema,
    MedicalRecordResponse,
    MedicationRequest,
    PatientResponse,
    TreatmentRequest,
    TreatmentSchema,
    UpdatePatientRequest,
)

__all__ = [
    "AddressSchema",
    "CreatePatientRequest",
    "DiagnosisRequest",
    "EmergencyContactSchema",
    "ErrorResponse",
    "HealthResponse",
    "MedicalRecordResponse",
    "MedicationRequest",
    "PatientResponse",
    "TreatmentRequest",
    "TreatmentSchema",
    "UpdatePatientRequest",
]
