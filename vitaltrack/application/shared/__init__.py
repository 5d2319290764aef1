"""Shared application ports."""

from .id_generator import IdGenerator

__all__ = ["IdGenerator"]
