"""Entities for medical view domain."""

from .medical_view import MedicalView

__all__ = ["MedicalView"]
