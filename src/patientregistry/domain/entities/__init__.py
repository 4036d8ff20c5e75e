"""
Domain entities package.
"""

from .patient import Patient

__all__ = [
    "Patient",
]
