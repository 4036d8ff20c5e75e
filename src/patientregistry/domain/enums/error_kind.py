"""
Error kind discriminant shared by all domain errors.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of domain failure, independent of the message text."""
    DOMAIN = "domain"
    VALIDATION = "validation"          # Bad input or broken invariant
    NOT_FOUND = "not_found"            # Missing key on lookup/update/delete
    ALREADY_EXISTS = "already_exists"  # Duplicate key on insert
    PERSISTENCE = "persistence"        # Store round-trip was inconsistent
