"""Factories for user profile domain."""

from .profile_factory import UserProfileFactory

__all__ = ["UserProfileFactory"]
