from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass
class ProductSnapshotDTO:
    id: int
    name: str
    category: str
    rating: int
    cost: Decimal
    image: str


@dataclass
class CartItemDTO:
    product: ProductSnapshotDTO
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.product.cost * self.quantity


@dataclass
class CartDTO:
    id: Optional[int]
    email: str
    payment_option: str
    items: List[CartItemDTO] = field(default_factory=list)

    def find_item(self, product_id: int) -> Optional[CartItemDTO]:
        for item in self.items:
            if item.product.id == product_id:
                return item
        return None

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0"))


@dataclass(frozen=True)
class CartItemUpdated:
    cart: CartDTO


@dataclass(frozen=True)
class CartItemRemoved:
    pass
