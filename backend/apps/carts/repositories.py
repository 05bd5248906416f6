from typing import Iterable, Optional

from django.db import IntegrityError, transaction

from apps.common import get_logger
from apps.common.repository import GenericRepository
from .dtos import CartDTO, CartItemDTO
from .mappers import CartMapper
from .models import Cart, CartItem

logger = get_logger(__name__).bind(component="carts", layer="repository")


class CartRepository(GenericRepository[Cart]):
    """Stores each cart as a whole document: the row plus its ordered item rows."""

    def __init__(self, mapper: Optional[CartMapper] = None):
        super().__init__(Cart)
        self.mapper = mapper or CartMapper()

    def _base_queryset(self):
        return self.model.objects.prefetch_related("cart_items")

    def get_by_email(self, email: str) -> Optional[CartDTO]:
        cart = self._base_queryset().filter(email=email).first()
        return self.mapper.to_dto(cart) if cart else None

    def create(
        self, *, email: str, items: Iterable[CartItemDTO] = (), payment_option: str
    ) -> Optional[CartDTO]:
        try:
            with transaction.atomic():
                cart = self.model.objects.create(email=email, payment_option=payment_option)
                self._write_items(cart, items)
        except IntegrityError:
            # Another request created the cart first; hand back that one.
            logger.warning("Cart insert collided with existing cart", email=email)
        return self.get_by_email(email)

    def save(self, cart: CartDTO) -> Optional[CartDTO]:
        with transaction.atomic():
            row = self.model.objects.select_for_update().filter(email=cart.email).first()
            if row is None:
                logger.warning("Cart save failed: row missing", email=cart.email)
                return None
            row.payment_option = cart.payment_option
            row.save(update_fields=["payment_option", "updated_at"])
            CartItem.objects.filter(cart=row).delete()
            self._write_items(row, cart.items)
        return self.get_by_email(cart.email)

    def _write_items(self, cart: Cart, items: Iterable[CartItemDTO]) -> None:
        rows = [
            CartItem(cart=cart, **self.mapper.item_mapper.to_fields(item, position))
            for position, item in enumerate(items)
        ]
        if rows:
            CartItem.objects.bulk_create(rows)
