from __future__ import annotations

from django.db import IntegrityError, transaction

from apps.api.exceptions import InvalidRequestError
from apps.common import get_logger
from apps.common.repository import GenericRepository
from apps.users.models import User
from .services import EMAIL_TAKEN

logger = get_logger(__name__).bind(component="auth", layer="repository")



class UserRegistrationRepository(GenericRepository[User]):
    def __init__(self) -> None:
        super().__init__(User)

    def email_exists(self, email: str) -> bool:
        return self.exists(email__iexact=email)

    def create_user(self, *, name: str, email: str, password: str) -> User:
        # ``password`` arrives already hashed.
        user = self.model(name=name, email=email, password=password)
        try:
            with transaction.atomic():
                user.save()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email.
            logger.warning("User insert collided with existing account", email=email)
            raise InvalidRequestError(EMAIL_TAKEN, details={"email": email})
        return user
