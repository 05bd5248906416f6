from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from .dtos import CartDTO, CartItemDTO, ProductSnapshotDTO
from .models import Cart, CartItem


class ProductSnapshotMapper:
    @staticmethod
    def from_product(product) -> ProductSnapshotDTO:
        """Copy the catalog fields a cart line keeps once the product is added."""
        return ProductSnapshotDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            rating=int(product.rating or 0),
            cost=Decimal(str(product.cost)),
            image=product.image or "",
        )


class CartItemMapper:
    def to_dto(self, item: CartItem) -> CartItemDTO:
        snapshot = ProductSnapshotDTO(
            id=item.product_id,
            name=item.name,
            category=item.category,
            rating=item.rating,
            cost=Decimal(str(item.cost)),
            image=item.image,
        )
        return CartItemDTO(product=snapshot, quantity=item.quantity)

    def many_to_dto(self, items: Iterable[CartItem]) -> List[CartItemDTO]:
        return [self.to_dto(i) for i in items]

    def to_fields(self, item: CartItemDTO, position: int) -> Dict[str, Any]:
        product = item.product
        return {
            "position": position,
            "product_id": product.id,
            "name": product.name,
            "category": product.category,
            "rating": product.rating,
            "cost": product.cost,
            "image": product.image,
            "quantity": item.quantity,
        }


class CartMapper:
    def __init__(self, item_mapper: Optional[CartItemMapper] = None) -> None:
        self.item_mapper = item_mapper or CartItemMapper()

    def to_dto(self, cart: Cart) -> CartDTO:
        items = self.item_mapper.many_to_dto(cart.cart_items.all())
        return CartDTO(
            id=cart.id,
            email=cart.email,
            payment_option=cart.payment_option,
            items=items,
        )
