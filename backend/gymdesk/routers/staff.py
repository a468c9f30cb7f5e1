from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gymdesk.auth.deps import get_current_user
from gymdesk.auth.guards import require_gym, require_staff
from gymdesk.core.db import get_db
from gymdesk.models import User
from gymdesk.schemas import StaffCreateIn, StaffOut, StaffUpdateIn
from gymdesk.services import staff as staff_service

router = APIRouter(tags=["staff"])


@router.get("/gyms/{gym_id}/staff", response_model=list[StaffOut])
def list_staff(
    gym_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return staff_service.list_staff(db, gym_id=gym_id)


@router.post("/gyms/{gym_id}/staff", response_model=StaffOut, status_code=status.HTTP_201_CREATED)
def create_staff(
    gym_id: int,
    payload: StaffCreateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return staff_service.create_staff(db, gym_id=gym_id, data=payload.model_dump())


@router.get("/staff/{staff_id}", response_model=StaffOut)
def get_staff(
    staff_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return require_staff(db, staff_id=staff_id, user=user)


@router.put("/staff/{staff_id}", response_model=StaffOut)
def update_staff(
    staff_id: int,
    payload: StaffUpdateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    staff = require_staff(db, staff_id=staff_id, user=user)
    return staff_service.update_staff(db, staff, payload.changes())


@router.delete("/staff/{staff_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_staff(
    staff_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_staff(db, staff_id=staff_id, user=user)
    staff_service.delete_staff(db, staff_id)
