"""
Value objects package for domain layer.
"""

from .address import Address
from .allergy import Allergy
from .emergency_contact import EmergencyContact
from .medical_record import Diagnosis, MedicalRecord, Medication, Treatment

__all__ = [
    "Address",
    "Allergy",
    "EmergencyContact",
    "Diagnosis",
    "MedicalRecord",
    "Medication",
    "Treatment",
]
