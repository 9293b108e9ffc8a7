# src/classhub/api/v1/endpoints/signups.py
"""Signup endpoints: join and withdraw from activities."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response, status

from classhub.api.v1.dependencies import AdmissionDep, SessionDep
from classhub.core.exceptions import CapacityError, ServiceError
from classhub.models import Signup
from classhub.schemas.signup import SignupRequest, SignupResponse
from classhub.services.signup_service import list_signups as query_signups

router = APIRouter(prefix="/signups", tags=["signups"])


@router.post("/", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def create_signup(
    payload: SignupRequest,
    db: SessionDep,
    controller: AdmissionDep,
) -> Signup:
    """Sign a user up for an activity, subject to the admission rules."""
    try:
        return controller.admit(db, payload.activity_id, payload.user_id)
    except CapacityError as e:
        raise HTTPException(
            status_code=e.status_code,
            detail={"message": e.message, "max_people": e.limit, "signed_up": e.current},
        ) from e
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.get("/", response_model=list[SignupResponse])
def list_signups(
    db: SessionDep,
    activity_id: int | None = None,
    user_id: str | None = None,
) -> list[Signup]:
    """List signups, optionally filtered by activity and/or user."""
    return list(query_signups(db, activity_id=activity_id, user_id=user_id))


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_signup(
    payload: SignupRequest,
    db: SessionDep,
    controller: AdmissionDep,
) -> Response:
    """Withdraw from an activity. Succeeds even when there is nothing to remove."""
    try:
        controller.withdraw(db, payload.activity_id, payload.user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
