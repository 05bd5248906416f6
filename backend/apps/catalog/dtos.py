from dataclasses import dataclass
from decimal import Decimal


@dataclass
class ProductDTO:
    id: int
    name: str
    category: str
    cost: Decimal
    rating: int
    image: str
