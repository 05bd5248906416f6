from __future__ import annotations

from .repositories import UserRegistrationRepository
from .services import RegistrationService


def build_registration_service() -> RegistrationService:
    return RegistrationService(users=UserRegistrationRepository())
