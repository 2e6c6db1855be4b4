"""User record CRUD endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from app.core.constants import MAX_RECORD_ID
from app.core.database import get_db
from app.schemas.common import ErrorResponse
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

_not_found = {404: {"model": ErrorResponse}}

UserIdPath = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]


@router.get("", response_model=list[UserRead])
async def list_users(db: Session = Depends(get_db)):
    return UserService.list_users(db)


@router.get("/{user_id}", response_model=UserRead, responses=_not_found)
async def show_user(user_id: UserIdPath, db: Session = Depends(get_db)):
    return UserService.get_user(db, user_id)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return UserService.create_user(db, email=payload.email, password=payload.password)


@router.api_route(
    "/{user_id}",
    methods=["PATCH", "PUT"],
    response_model=UserRead,
    responses={**_not_found, 409: {"model": ErrorResponse}},
)
async def update_user(user_id: UserIdPath, payload: UserUpdate, db: Session = Depends(get_db)):
    return UserService.update_user(db, user_id, payload.model_dump(exclude_none=True))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_not_found)
async def delete_user(user_id: UserIdPath, db: Session = Depends(get_db)):
    UserService.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
