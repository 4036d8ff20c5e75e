"""FastAPI dependency providers."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..adapters.db.memory.repositories.patient_repository import InMemoryPatientRepository
from ..application.ports.repositories.patient_repo import PatientRepository
from ..application.services.patient_service import PatientService
from ..core.config import get_settings


@lru_cache()
def get_patient_repository() -> PatientRepository:
    """Get the process-wide patient repository instance."""
    settings = get_settings()
    return InMemoryPatientRepository(start_id=settings.registry.start_id)


def get_patient_service(
    patient_repository: Annotated[PatientRepository, Depends(get_patient_repository)],
) -> PatientService:
    """Get a patient service bound to the shared repository."""
    return PatientService(patient_repository)


PatientServiceDep = Annotated[PatientService, Depends(get_patient_service)]
