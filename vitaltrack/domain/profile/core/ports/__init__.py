"""Ports for user profile domain."""

from .repository import IUserProfileRepository

__all__ = ["IUserProfileRepository"]
