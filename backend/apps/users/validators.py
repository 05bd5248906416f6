import re
from typing import Optional

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email as django_validate_email
from rest_framework import serializers

_HAS_LETTER = re.compile(r"[A-Za-z]")
_HAS_DIGIT = re.compile(r"\d")

PASSWORD_MIN_LENGTH = 8
ADDRESS_MAX_LENGTH = 500


def validate_name(value: str) -> str:
    if value is None or not value.strip():
        raise serializers.ValidationError("Name is required.")
    return value.strip()


def normalize_email(value: str) -> str:
    """
    Trim and lowercase an email address, rejecting anything that is not a
    syntactically valid address.
    """
    if value is None:
        raise serializers.ValidationError("Email is required.")
    normalized = value.strip().lower()
    try:
        django_validate_email(normalized)
    except DjangoValidationError:
        raise serializers.ValidationError("Invalid email")
    return normalized


def validate_password(value: str) -> str:
    """
    Passwords need at least eight characters, including one letter and one
    number.
    """
    if value is None:
        raise serializers.ValidationError("Password is required.")
    if len(value) < PASSWORD_MIN_LENGTH:
        raise serializers.ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long."
        )
    if not _HAS_DIGIT.search(value) or not _HAS_LETTER.search(value):
        raise serializers.ValidationError(
            "Password must contain at least one letter and one number"
        )
    return value


def validate_address(value: str, *, sentinel: Optional[str] = None) -> str:
    if value is None or not value.strip():
        raise serializers.ValidationError("Address is required.")
    trimmed = value.strip()
    if len(trimmed) > ADDRESS_MAX_LENGTH:
        raise serializers.ValidationError(
            f"Address must be at most {ADDRESS_MAX_LENGTH} characters long."
        )
    if trimmed == (sentinel if sentinel is not None else settings.DEFAULT_ADDRESS):
        raise serializers.ValidationError("Address must not be the placeholder value.")
    return trimmed
