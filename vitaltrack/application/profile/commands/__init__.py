"""Commands for user profiles."""

from .create_profile import CreateProfileCommand, CreateProfileHandler
from .delete_profile import DeleteProfileCommand, DeleteProfileHandler
from .update_profile import UpdateProfileCommand, UpdateProfileHandler

__all__ = [
    "CreateProfileCommand",
    "CreateProfileHandler",
    "UpdateProfileCommand",
    "UpdateProfileHandler",
    "DeleteProfileCommand",
    "DeleteProfileHandler",
]
