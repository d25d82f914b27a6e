# tests/unit/test_user_persistence.py
"""Unit tests for UserStore using a MagicMock session factory."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.uc_common.errors import StoreError
from src.uc_user.domain.models import User
from src.uc_user.infrastructure.persistence import UserStore


def _make_user_row(id: int = 1, name: str = "Ann", email: str = "ann@example.com"):
    row = MagicMock()
    row.id = id
    row.name = name
    row.email = email
    return row


def _async_cm(value=None) -> MagicMock:
    cm = MagicMock()
    cm.__aenter__ = AsyncMock(return_value=value)
    cm.__aexit__ = AsyncMock(return_value=False)
    return cm


@pytest.fixture
def session() -> MagicMock:
    session = MagicMock()
    session.begin = MagicMock(return_value=_async_cm())
    return session


@pytest.fixture
def session_factory(session: MagicMock) -> MagicMock:
    return MagicMock(return_value=_async_cm(session))


def _result(fetchone=None, fetchall=None) -> MagicMock:
    result = MagicMock()
    result.fetchone.return_value = fetchone
    result.fetchall.return_value = fetchall or []
    return result


class TestReads:
    async def test_list_all_maps_rows_in_order(self, session, session_factory):
        session.execute = AsyncMock(return_value=_result(fetchall=[
            _make_user_row(1, "Ann"), _make_user_row(2, "Bob", "bob@example.com"),
        ]))

        users = await UserStore(session_factory).list_all()

        assert users == [
            User(id=1, name="Ann", email="ann@example.com"),
            User(id=2, name="Bob", email="bob@example.com"),
        ]
        assert "ORDER BY id" in str(session.execute.call_args.args[0])

    async def test_reads_do_not_open_a_transaction(self, session, session_factory):
        session.execute = AsyncMock(return_value=_result(fetchone=_make_user_row()))

        await UserStore(session_factory).get_by_id(1)

        session.begin.assert_not_called()

    async def test_get_by_id_found(self, session, session_factory):
        session.execute = AsyncMock(return_value=_result(fetchone=_make_user_row(7)))

        user = await UserStore(session_factory).get_by_id(7)

        assert user == User(id=7, name="Ann", email="ann@example.com")
        assert session.execute.call_args.args[1] == {"user_id": 7}

    async def test_get_by_id_missing(self, session, session_factory):
        session.execute = AsyncMock(return_value=_result(fetchone=None))
        assert await UserStore(session_factory).get_by_id(7) is None


class TestWrites:
    async def test_insert_returns_assigned_id(self, session, session_factory):
        session.execute = AsyncMock(return_value=_result(fetchone=_make_user_row(3)))

        user = await UserStore(session_factory).insert("Ann", "ann@example.com")

        assert user.id == 3
        session.begin.assert_called_once()
        assert session.execute.call_args.args[1] == {"name": "Ann", "email": "ann@example.com"}

    async def test_update_returns_post_state(self, session, session_factory):
        session.execute = AsyncMock(
            return_value=_result(fetchone=_make_user_row(3, "Anna", "anna@example.com"))
        )

        user = await UserStore(session_factory).update(3, "Anna", "anna@example.com")

        assert user == User(id=3, name="Anna", email="anna@example.com")
        session.begin.assert_called_once()

    async def test_update_missing_returns_none(self, session, session_factory):
        session.execute = AsyncMock(return_value=_result(fetchone=None))
        assert await UserStore(session_factory).update(3, "A", "a@x.com") is None

    async def test_delete_returns_id(self, session, session_factory):
        session.execute = AsyncMock(return_value=_result(fetchone=_make_user_row(5)))
        assert await UserStore(session_factory).delete_by_id(5) == 5

    async def test_delete_missing_returns_none(self, session, session_factory):
        session.execute = AsyncMock(return_value=_result(fetchone=None))
        assert await UserStore(session_factory).delete_by_id(5) is None


class TestFailures:
    async def test_sqlalchemy_error_becomes_store_error(self, session, session_factory):
        session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("server closed"))
        )

        with pytest.raises(StoreError) as exc_info:
            await UserStore(session_factory).list_all()

        assert exc_info.value.http_status == 500
        assert "list_all" in exc_info.value.message

    async def test_connection_refused_becomes_store_error(self, session_factory):
        session_factory.return_value.__aenter__ = AsyncMock(
            side_effect=ConnectionRefusedError("refused")
        )

        with pytest.raises(StoreError):
            await UserStore(session_factory).insert("Ann", "ann@example.com")
