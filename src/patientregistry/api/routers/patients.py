"""Patient-related API endpoints.

Handlers call the synchronous PatientService directly. Domain errors are not
caught here; the application-level exception handlers turn them into
responses.
"""

import logging
from typing import List

from fastapi import APIRouter, status

from ...domain.errors import NotFoundError
from ..deps import PatientServiceDep
from ..schemas.common import ErrorResponse
from ..schemas.patient import (
    CreatePatientRequest,
    DiagnosisRequest,
    MedicalRecordResponse,
    MedicationRequest,
    PatientResponse,
    TreatmentRequest,
    TreatmentSchema,
    UpdatePatientRequest,
)

router = APIRouter(prefix="/patients")
logger = logging.getLogger("patientregistry")

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Patient not found"}}
BAD_REQUEST_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid input"}}


@router.post(
    "/",
    response_model=PatientResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Patients"],
    summary="Register a new patient",
    responses={**BAD_REQUEST_RESPONSE},
)
async def create_patient(request: CreatePatientRequest, service: PatientServiceDep):
    patient = service.add_patient(request.to_patient_data())
    return PatientResponse.from_entity(patient)


@router.get("/", response_model=List[PatientResponse], tags=["Patients"])
async def list_patients(service: PatientServiceDep):
    return [PatientResponse.from_entity(p) for p in service.find_all_patients()]


@router.get(
    "/search/name/{name}",
    response_model=List[PatientResponse],
    tags=["Patients"],
    responses={**NOT_FOUND_RESPONSE},
)
async def search_by_name(name: str, service: PatientServiceDep):
    patients = service.find_patient_by_name(name)
    if not patients:
        raise NotFoundError("No patients found with the given name", {"name": name})
    return [PatientResponse.from_entity(p) for p in patients]


@router.get(
    "/search/blood-type/{blood_type}",
    response_model=List[PatientResponse],
    tags=["Patients"],
    responses={**NOT_FOUND_RESPONSE},
)
async def search_by_blood_type(blood_type: str, service: PatientServiceDep):
    patients = service.find_patient_by_blood_type(blood_type)
    if not patients:
        raise NotFoundError(
            "No patients found with the given blood type", {"blood_type": blood_type}
        )
    return [PatientResponse.from_entity(p) for p in patients]


@router.get(
    "/{patient_id}",
    response_model=PatientResponse,
    tags=["Patients"],
    responses={**NOT_FOUND_RESPONSE},
)
async def get_patient(patient_id: int, service: PatientServiceDep):
    patient = service.find_patient_by_id(patient_id)
    if patient is None:
        raise NotFoundError("Patient not found", {"patient_id": patient_id})
    return PatientResponse.from_entity(patient)


@router.put(
    "/{patient_id}",
    response_model=PatientResponse,
    tags=["Patients"],
    summary="Update name, phone, email, address or emergency contact",
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def update_patient(
    patient_id: int, request: UpdatePatientRequest, service: PatientServiceDep
):
    patient = service.update_patient(patient_id, request.to_update_data())
    return PatientResponse.from_entity(patient)


@router.delete(
    "/{patient_id}",
    response_model=PatientResponse,
    tags=["Patients"],
    responses={**NOT_FOUND_RESPONSE},
)
async def delete_patient(patient_id: int, service: PatientServiceDep):
    patient = service.delete_patient(patient_id)
    logger.info(f"Deleted patient {patient_id}")
    return PatientResponse.from_entity(patient)


# ----------------------------------------------------------------------------
# Medical record
# ----------------------------------------------------------------------------


@router.get(
    "/{patient_id}/medical-record",
    response_model=MedicalRecordResponse,
    tags=["Medical Record"],
    responses={**NOT_FOUND_RESPONSE},
)
async def get_medical_record(patient_id: int, service: PatientServiceDep):
    return MedicalRecordResponse.from_domain(service.get_medical_record(patient_id))


@router.post(
    "/{patient_id}/medical-record/diagnoses",
    response_model=MedicalRecordResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Medical Record"],
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def add_diagnosis(patient_id: int, request: DiagnosisRequest, service: PatientServiceDep):
    record = service.add_diagnosis(patient_id, request.to_domain())
    return MedicalRecordResponse.from_domain(record)


@router.post(
    "/{patient_id}/medical-record/medications",
    response_model=MedicalRecordResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Medical Record"],
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def add_medication(patient_id: int, request: MedicationRequest, service: PatientServiceDep):
    record = service.add_medication(patient_id, request.to_domain())
    return MedicalRecordResponse.from_domain(record)


@router.post(
    "/{patient_id}/medical-record/treatments",
    response_model=MedicalRecordResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Medical Record"],
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def add_treatment(patient_id: int, request: TreatmentRequest, service: PatientServiceDep):
    record = service.add_treatment(patient_id, request.to_domain())
    return MedicalRecordResponse.from_domain(record)


@router.get(
    "/{patient_id}/medical-record/active-treatments",
    response_model=List[TreatmentSchema],
    tags=["Medical Record"],
    responses={**NOT_FOUND_RESPONSE},
)
async def get_active_treatments(patient_id: int, service: PatientServiceDep):
    return [TreatmentSchema.from_domain(t) for t in service.get_active_treatments(patient_id)]
