from __future__ import annotations

from apps.catalog.repositories import ProductRepository
from apps.users.repositories import UserRepository

from .mappers import CartItemMapper, CartMapper
from .repositories import CartRepository
from .services import CartService


def build_cart_service() -> CartService:
    cart_mapper = CartMapper(CartItemMapper())
    return CartService(
        carts=CartRepository(cart_mapper),
        products=ProductRepository(),
        accounts=UserRepository(),
    )
