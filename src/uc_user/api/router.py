"""Users REST endpoints.

GET    /users/           : all users, ordered by id
GET    /users/{user_id}  : one user
POST   /users/           : create, 201
PUT    /users/{user_id}  : replace name and email
DELETE /users/{user_id}  : delete, 204 with empty body

Success bodies are bare records; errors are rendered by the AppError and
validation handlers in src/main.py.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from src.uc_user.api.dependencies import get_user_service
from src.uc_user.application.schemas import UserResponse, UserWriteRequest
from src.uc_user.application.service import UserApplicationService

router = APIRouter(prefix="/users", tags=["users"])

ServiceDep = Annotated[UserApplicationService, Depends(get_user_service)]
# users.id is a SERIAL (int4) column
UserId = Annotated[int, Path(ge=1, le=2_147_483_647)]


@router.get("", include_in_schema=False)
@router.get("/", response_model=list[UserResponse])
async def list_users(service: ServiceDep) -> list[UserResponse]:
    return await service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UserId, service: ServiceDep) -> UserResponse:
    return await service.get_user(user_id)


@router.post("", status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("/", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def create_user(body: UserWriteRequest, service: ServiceDep) -> UserResponse:
    return await service.create_user(body.name, body.email)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UserId, body: UserWriteRequest, service: ServiceDep
) -> UserResponse:
    return await service.update_user(user_id, body.name, body.email)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: UserId, service: ServiceDep) -> Response:
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
