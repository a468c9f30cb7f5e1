from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from gymdesk.auth.deps import get_current_user
from gymdesk.auth.guards import require_gym
from gymdesk.core.db import get_db
from gymdesk.models import User
from gymdesk.schemas import DashboardOut, GymCreateIn, GymOut, GymUpdateIn, RevenuePointOut
from gymdesk.services import dashboard as dashboard_service
from gymdesk.services import gyms as gyms_service

router = APIRouter(prefix="/gyms", tags=["gyms"])


@router.get("", response_model=list[GymOut])
def list_my_gyms(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return gyms_service.list_gyms(db, user_id=user.id)


@router.post("", response_model=GymOut, status_code=status.HTTP_201_CREATED)
def create_gym(
    payload: GymCreateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return gyms_service.create_gym(db, user_id=user.id, data=payload.model_dump())


@router.get("/{gym_id}", response_model=GymOut)
def get_gym(
    gym_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return require_gym(db, gym_id=gym_id, user=user)


@router.put("/{gym_id}", response_model=GymOut)
def update_gym(
    gym_id: int,
    payload: GymUpdateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    gym = require_gym(db, gym_id=gym_id, user=user)
    return gyms_service.update_gym(db, gym, payload.changes())


@router.delete("/{gym_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_gym(
    gym_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    gyms_service.delete_gym(db, gym_id)


# ---------- Dashboard ----------

@router.get("/{gym_id}/dashboard", response_model=DashboardOut)
def get_dashboard(
    gym_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return dashboard_service.get_dashboard(db, gym_id=gym_id)


@router.get("/{gym_id}/revenue", response_model=list[RevenuePointOut])
def get_revenue(
    gym_id: int,
    period: str = Query("monthly", pattern="^(monthly|yearly)$"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return dashboard_service.get_revenue_overview(db, gym_id=gym_id, period=period)
