"""Entities for user profile domain."""

from .user_profile import UserProfile

__all__ = ["UserProfile"]
