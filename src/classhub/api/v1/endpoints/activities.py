# src/classhub/api/v1/endpoints/activities.py
"""Activity endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status

from classhub.api.v1.dependencies import SessionDep
from classhub.core.exceptions import ServiceError
from classhub.models import Activity
from classhub.schemas.activity import ActivityCreate, ActivityResponse, ActivityStatusUpdate
from classhub.services import activity_service

router = APIRouter(prefix="/activities", tags=["activities"])


@router.post("/", response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
def create_activity(payload: ActivityCreate, db: SessionDep) -> Activity:
    """Create a new activity."""
    try:
        return activity_service.create_activity(db, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.get("/", response_model=list[ActivityResponse])
def list_activities(db: SessionDep) -> list[Activity]:
    """List activities that have not been deleted."""
    return list(activity_service.list_activities(db))


@router.put("/{activity_id}/status", response_model=ActivityResponse)
def change_activity_status(
    activity_id: int,
    payload: ActivityStatusUpdate,
    db: SessionDep,
) -> Activity:
    """Move an activity to another lifecycle state."""
    try:
        return activity_service.change_activity_status(db, activity_id, payload.status)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.delete(
    "/{activity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_activity(activity_id: int, db: SessionDep) -> Response:
    """Soft-delete an activity."""
    try:
        activity_service.delete_activity(db, activity_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
