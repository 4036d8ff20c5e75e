"""
Medical record value objects.
"""

from .diagnosis import Diagnosis
from .medical_record import MedicalRecord
from .medication import Medication
from .treatment import Treatment

__all__ = [
    "Diagnosis",
    "MedicalRecord",
    "Medication",
    "Treatment",
]
