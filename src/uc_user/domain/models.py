"""Domain model for users: pure dataclass plus its cache serialization."""

from dataclasses import dataclass

from pydantic import TypeAdapter


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str


_USER_ADAPTER = TypeAdapter(User)
_USER_LIST_ADAPTER = TypeAdapter(list[User])


def dump_user(user: User) -> bytes:
    return _USER_ADAPTER.dump_json(user)


def load_user(data: bytes) -> User:
    """Raises pydantic.ValidationError on malformed input."""
    return _USER_ADAPTER.validate_json(data)


def dump_users(users: list[User]) -> bytes:
    return _USER_LIST_ADAPTER.dump_json(users)


def load_users(data: bytes) -> list[User]:
    return _USER_LIST_ADAPTER.validate_json(data)
