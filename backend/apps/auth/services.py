from __future__ import annotations

from typing import Any, Callable, Dict

from django.contrib.auth.hashers import make_password
from rest_framework_simplejwt.tokens import RefreshToken

from apps.api.exceptions import InvalidRequestError
from apps.common import get_logger
from apps.users.validators import normalize_email, validate_name, validate_password
from .protocols import UserRegistrationRepositoryProtocol

logger = get_logger(__name__).bind(component="auth", service="RegistrationService")

EMAIL_TAKEN = "Email already taken"


def issue_tokens(user) -> Dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"access": str(refresh.access_token), "refresh": str(refresh)}


class RegistrationService:
    """
    Creates accounts. Input is validated here rather than in model hooks, and
    the password is hashed by the injected ``password_hasher`` before it
    reaches the repository.
    """

    def __init__(
        self,
        users: UserRegistrationRepositoryProtocol,
        password_hasher: Callable[[str], str] = make_password,
        token_issuer: Callable[[Any], Dict[str, str]] = issue_tokens,
    ):
        self.users = users
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.logger = logger

    def register(self, data: Dict[str, Any]) -> Dict[str, Any]:
        name = validate_name(data.get("name"))
        email = normalize_email(data.get("email"))
        password = validate_password(data.get("password"))
        self.logger.debug("Received registration request", email=email)
        if self.users.email_exists(email):
            self.logger.info("Registration rejected: email already exists", email=email)
            raise InvalidRequestError(EMAIL_TAKEN, details={"email": email})
        user = self.users.create_user(
            name=name, email=email, password=self.password_hasher(password)
        )
        self.logger.info("User registered successfully", user_id=user.id, email=user.email)
        return {"user": user, "tokens": self.token_issuer(user)}
