"""UserStore: PostgreSQL implementation of UserStoreProtocol.

All queries use raw text() SQL (no ORM). Every operation opens its own
session; writes run inside `session.begin()` so the row change is committed
before the call returns. A write that touches 0 rows means the id does not
exist and is reported as None.
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.uc_common.errors import StoreError
from src.uc_user.domain.models import User

T = TypeVar("T")

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_LIST_USERS_SQL = text("""
    SELECT id, name, email
    FROM users
    ORDER BY id
""")

_GET_USER_SQL = text("""
    SELECT id, name, email
    FROM users
    WHERE id = :user_id
""")

_INSERT_USER_SQL = text("""
    INSERT INTO users (name, email)
    VALUES (:name, :email)
    RETURNING id, name, email
""")

_UPDATE_USER_SQL = text("""
    UPDATE users
    SET name = :name,
        email = :email
    WHERE id = :user_id
    RETURNING id, name, email
""")

_DELETE_USER_SQL = text("""
    DELETE FROM users
    WHERE id = :user_id
    RETURNING id
""")

# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------

def _row_to_user(row: object) -> User:
    return User(
        id=row.id,  # type: ignore[attr-defined]
        name=row.name,  # type: ignore[attr-defined]
        email=row.email,  # type: ignore[attr-defined]
    )


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class UserStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def _read(self, op: str, fn: Callable[[AsyncSession], Awaitable[T]]) -> T:
        try:
            async with self._session_factory() as session:
                return await fn(session)
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"{op} failed: {exc}") from exc

    async def _write(self, op: str, fn: Callable[[AsyncSession], Awaitable[T]]) -> T:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    return await fn(session)
        except (SQLAlchemyError, OSError) as exc:
            raise StoreError(f"{op} failed: {exc}") from exc

    async def list_all(self) -> list[User]:
        async def run(session: AsyncSession) -> list[User]:
            result = await session.execute(_LIST_USERS_SQL)
            return [_row_to_user(row) for row in result.fetchall()]

        return await self._read("list_all", run)

    async def get_by_id(self, user_id: int) -> User | None:
        async def run(session: AsyncSession) -> User | None:
            result = await session.execute(_GET_USER_SQL, {"user_id": user_id})
            row = result.fetchone()
            return _row_to_user(row) if row else None

        return await self._read("get_by_id", run)

    async def insert(self, name: str, email: str) -> User:
        async def run(session: AsyncSession) -> User:
            result = await session.execute(
                _INSERT_USER_SQL, {"name": name, "email": email}
            )
            return _row_to_user(result.fetchone())

        return await self._write("insert", run)

    async def update(self, user_id: int, name: str, email: str) -> User | None:
        async def run(session: AsyncSession) -> User | None:
            result = await session.execute(
                _UPDATE_USER_SQL,
                {"user_id": user_id, "name": name, "email": email},
            )
            row = result.fetchone()
            return _row_to_user(row) if row else None

        return await self._write("update", run)

    async def delete_by_id(self, user_id: int) -> int | None:
        async def run(session: AsyncSession) -> int | None:
            result = await session.execute(_DELETE_USER_SQL, {"user_id": user_id})
            row = result.fetchone()
            return row.id if row else None

        return await self._write("delete_by_id", run)
