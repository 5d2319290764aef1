"""Orchestrators for medical view."""

from .view_assembler import MedicalViewAssembler

__all__ = ["MedicalViewAssembler"]
