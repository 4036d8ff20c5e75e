"""
In-memory repository adapters.
"""

from .in_memory_repository import InMemoryRepository
from .patient_repository import InMemoryPatientRepository

__all__ = [
    "InMemoryRepository",
    "InMemoryPatientRepository",
]
