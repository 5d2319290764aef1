"""Queries for user profiles."""

from .get_profile import GetProfileHandler, GetProfileQuery

__all__ = ["GetProfileQuery", "GetProfileHandler"]
