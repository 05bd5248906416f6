from __future__ import annotations

from typing import Dict, Optional

from rest_framework import status

from apps.api.exceptions import ApplicationError, NotFoundError
from apps.common import get_logger
from .dtos import UserDTO, user_to_dto
from .protocols import UserRepositoryProtocol
from .validators import validate_address

logger = get_logger(__name__).bind(component="users", layer="service")


class UserService:
    def __init__(self, users: UserRepositoryProtocol):
        self.users = users
        self.logger = logger.bind(service="UserService")

    def _load_owned(self, user_id: int, actor_id: Optional[int]):
        user = self.users.get(id=user_id)
        if not user:
            self.logger.info("User not found", user_id=user_id, actor_id=actor_id)
            raise NotFoundError("User not found", details={"userId": str(user_id)})
        if actor_id is None or user.id != actor_id:
            self.logger.warning(
                "User access forbidden", user_id=user_id, actor_id=actor_id
            )
            raise ApplicationError(
                "FORBIDDEN",
                "User not authorized to access this resource",
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return user

    def get_user(self, user_id: int, *, actor_id: Optional[int]) -> UserDTO:
        self.logger.debug("Fetching user", user_id=user_id, actor_id=actor_id)
        return user_to_dto(self._load_owned(user_id, actor_id))

    def get_address(self, user_id: int, *, actor_id: Optional[int]) -> Dict[str, str]:
        user = self._load_owned(user_id, actor_id)
        return {"address": user.address}

    def set_address(
        self, user_id: int, address: str, *, actor_id: Optional[int]
    ) -> Dict[str, str]:
        user = self._load_owned(user_id, actor_id)
        user.address = validate_address(address)
        self.users.save_address(user)
        self.logger.info("User address updated", user_id=user_id)
        return {"address": user.address}
