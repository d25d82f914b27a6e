"""Store Protocol: dependency inversion for testability.

Unit tests inject a fake that conforms to this Protocol.
Infrastructure layer provides the PostgreSQL implementation.

Not-found is reported as None; infrastructure failure raises StoreError.
"""

from typing import Protocol

from src.uc_user.domain.models import User


class UserStoreProtocol(Protocol):
    async def list_all(self) -> list[User]: ...

    async def get_by_id(self, user_id: int) -> User | None: ...

    async def insert(self, name: str, email: str) -> User: ...

    async def update(self, user_id: int, name: str, email: str) -> User | None: ...

    async def delete_by_id(self, user_id: int) -> int | None: ...
