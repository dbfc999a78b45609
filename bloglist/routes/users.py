"""
Bloglist Backend — User Route Handlers
=======================================

    GET  /api/users   200  list (id, username, name)
    POST /api/users   201  | 400 short/missing password, short or taken username

Both also answer on "/api/users/" without a redirect.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.database import get_db_session
from bloglist.models.user import User
from bloglist.schemas.common import ErrorResponse
from bloglist.schemas.user import UserCreate, UserResponse
from bloglist.security import password_hasher
from bloglist.services.user_service import UserService
from bloglist.store import DocumentStore

router = APIRouter(prefix="/api/users", tags=["Users"])


def get_user_service(db: AsyncSession = Depends(get_db_session)) -> UserService:
    return UserService(DocumentStore(db, User), password_hasher)


@router.get("/", response_model=List[UserResponse], include_in_schema=False)
@router.get("", response_model=List[UserResponse], summary="List all users")
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserResponse]:
    return await service.list_users()


@router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid or duplicate user", "model": ErrorResponse}},
    summary="Register a user",
)
async def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return await service.create_user(payload)
