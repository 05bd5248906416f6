from apps.common.repository import GenericRepository
from .models import User


class UserRepository(GenericRepository[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_email(self, email: str):
        return self.model.objects.filter(email=email).first()

    def lock_by_email(self, email: str):
        """Row-locked fetch; must run inside ``transaction.atomic()``."""
        return self.model.objects.select_for_update().filter(email=email).first()

    def save_wallet(self, user: User) -> User:
        user.save(update_fields=["wallet_money"])
        return user

    def save_address(self, user: User) -> User:
        user.save(update_fields=["address"])
        return user
