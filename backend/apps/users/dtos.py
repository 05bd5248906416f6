from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .models import User


@dataclass
class UserDTO:
    id: int
    name: str
    email: str
    wallet_money: Decimal
    address: str
    date_joined: Optional[str]


def user_to_dto(u: User) -> UserDTO:
    joined = getattr(u, "date_joined", None)
    return UserDTO(
        id=u.id,
        name=u.name,
        email=u.email,
        wallet_money=Decimal(str(u.wallet_money)),
        address=u.address,
        date_joined=joined.isoformat() if joined is not None else None,
    )
