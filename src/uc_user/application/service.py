"""UserApplicationService: thin composition layer.

Turns the repository's None outcome into UserNotFoundError and domain
objects into response schemas. StoreError passes through untouched.
"""

from src.uc_common.errors import UserNotFoundError
from src.uc_user.application.cached_repository import CachedUserRepository
from src.uc_user.application.schemas import UserResponse


class UserApplicationService:
    def __init__(self, repo: CachedUserRepository) -> None:
        self._repo = repo

    async def list_users(self) -> list[UserResponse]:
        users = await self._repo.list_all()
        return [UserResponse.from_domain(u) for u in users]

    async def get_user(self, user_id: int) -> UserResponse:
        user = await self._repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserResponse.from_domain(user)

    async def create_user(self, name: str, email: str) -> UserResponse:
        user = await self._repo.create(name, email)
        return UserResponse.from_domain(user)

    async def update_user(self, user_id: int, name: str, email: str) -> UserResponse:
        user = await self._repo.update(user_id, name, email)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserResponse.from_domain(user)

    async def delete_user(self, user_id: int) -> int:
        deleted_id = await self._repo.delete(user_id)
        if deleted_id is None:
            raise UserNotFoundError(user_id)
        return deleted_id
