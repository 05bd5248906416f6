from decimal import Decimal

from django.conf import settings
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


def default_wallet_money() -> Decimal:
    return Decimal(str(settings.DEFAULT_WALLET_MONEY))


def default_address() -> str:
    return settings.DEFAULT_ADDRESS


class UserManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("Email is required")
        user = self.model(email=self.normalize_email(email).lower(), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    # Accounts log in with their email; username is not used.
    username = None
    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    wallet_money = models.DecimalField(
        max_digits=12, decimal_places=2, default=default_wallet_money
    )
    address = models.CharField(max_length=500, default=default_address)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    objects = UserManager()

    def has_set_non_default_address(self) -> bool:
        return self.address != settings.DEFAULT_ADDRESS

    def __str__(self):
        return self.email
