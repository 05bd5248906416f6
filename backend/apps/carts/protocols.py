from __future__ import annotations

from typing import Iterable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from apps.carts.dtos import CartDTO, CartItemDTO
    from apps.catalog.models import Product
    from apps.users.models import User


class CartRepositoryProtocol(Protocol):
    def get_by_email(self, email: str) -> Optional["CartDTO"]:
        ...

    def create(
        self, *, email: str, items: Iterable["CartItemDTO"], payment_option: str
    ) -> Optional["CartDTO"]:
        ...

    def save(self, cart: "CartDTO") -> Optional["CartDTO"]:
        ...


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional["Product"]:
        ...


class AccountRepositoryProtocol(Protocol):
    def lock_by_email(self, email: str) -> Optional["User"]:
        ...

    def save_wallet(self, user: "User") -> "User":
        ...
