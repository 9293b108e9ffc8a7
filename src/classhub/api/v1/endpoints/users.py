# src/classhub/api/v1/endpoints/users.py
"""User registration and management endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Response, status

from classhub.api.v1.dependencies import SessionDep
from classhub.core.exceptions import ServiceError
from classhub.models import User
from classhub.schemas.user import UserCreate, UserNameResponse, UserResponse
from classhub.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserCreate, db: SessionDep) -> User:
    """Register a new user and count them in their class."""
    try:
        return user_service.register_user(db, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.get("/", response_model=list[UserResponse])
def list_users(
    db: SessionDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
) -> list[User]:
    """List registered users."""
    return list(user_service.get_users(db, skip=skip, limit=limit))


@router.get("/{user_id}/name", response_model=UserNameResponse)
def get_user_name(user_id: str, db: SessionDep) -> UserNameResponse:
    """Look up a user's display name."""
    try:
        name = user_service.get_user_name(db, user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return UserNameResponse(user_id=user_id, name=name)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_user(user_id: str, db: SessionDep) -> Response:
    """Delete a user and remove them from their class count."""
    try:
        user_service.delete_user(db, user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
