"""
Patient Registry: in-memory patient registration service

A clean architecture-based backend exposing patient records, their
medical history and demographic updates over a small HTTP API.
"""

__version__ = "0.1.0"
__description__ = "In-memory patient registry service"
