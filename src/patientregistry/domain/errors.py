"""
Domain-specific error types for business rule violations.
"""

from typing import Any, Dict, Optional

from .enums.error_kind import ErrorKind


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.DOMAIN

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(DomainError):
    """A value object or entity invariant was violated."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", details)


class NotFoundError(DomainError):
    """No entity is stored under the requested key."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "NOT_FOUND", details)


class AlreadyExistsError(DomainError):
    """An entity is already stored under the requested key."""

    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "ALREADY_EXISTS", details)


class PersistenceError(DomainError):
    """The repository did not return what was just written to it."""

    kind = ErrorKind.PERSISTENCE

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "PERSISTENCE_ERROR", details)


class PatientNotFoundError(NotFoundError):
    """Patient not found."""

    def __init__(self, patient_id: int) -> None:
        super().__init__("Patient not Found!", {"patient_id": patient_id})
