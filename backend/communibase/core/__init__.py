"""Business rules shared by Communibase entities."""

from .guard_service import RegistrationGuardService

__all__ = [
    "RegistrationGuardService",
]
