"""FastAPI dependencies for the users API.

The repository is built once by the application lifespan and kept on
app.state; tests swap it through app.dependency_overrides.

Usage in a router:
    @router.get("/{user_id}")
    async def get_user(service: Annotated[UserApplicationService, Depends(get_user_service)]):
        ...
"""

from typing import Annotated

from fastapi import Depends, Request

from src.uc_user.application.cached_repository import CachedUserRepository
from src.uc_user.application.service import UserApplicationService


def get_user_repository(request: Request) -> CachedUserRepository:
    return request.app.state.user_repository


def get_user_service(
    repo: Annotated[CachedUserRepository, Depends(get_user_repository)],
) -> UserApplicationService:
    return UserApplicationService(repo)
