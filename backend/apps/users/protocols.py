from __future__ import annotations

from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.users.models import User


class UserRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["User"]: ...

    def get_by_email(self, email: str) -> Optional["User"]: ...

    def lock_by_email(self, email: str) -> Optional["User"]: ...

    def save_wallet(self, user: "User") -> "User": ...

    def save_address(self, user: "User") -> "User": ...
