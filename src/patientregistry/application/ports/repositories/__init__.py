"""
Repository ports.
"""

from .patient_repo import PatientRepository
from .repository import Repository

__all__ = [
    "PatientRepository",
    "Repository",
]
