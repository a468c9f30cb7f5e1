from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gymdesk.auth.deps import get_current_user
from gymdesk.auth.guards import require_gym, require_plan
from gymdesk.core.db import get_db
from gymdesk.models import User
from gymdesk.schemas import PlanCreateIn, PlanOut, PlanUpdateIn
from gymdesk.services import plans as plans_service

router = APIRouter(tags=["plans"])


@router.get("/gyms/{gym_id}/plans", response_model=list[PlanOut])
def list_plans(
    gym_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return plans_service.list_plans(db, gym_id=gym_id)


@router.post("/gyms/{gym_id}/plans", response_model=PlanOut, status_code=status.HTTP_201_CREATED)
def create_plan(
    gym_id: int,
    payload: PlanCreateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return plans_service.create_plan(db, gym_id=gym_id, data=payload.model_dump())


@router.get("/plans/{plan_id}", response_model=PlanOut)
def get_plan(
    plan_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return require_plan(db, plan_id=plan_id, user=user)


@router.put("/plans/{plan_id}", response_model=PlanOut)
def update_plan(
    plan_id: int,
    payload: PlanUpdateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    plan = require_plan(db, plan_id=plan_id, user=user)
    return plans_service.update_plan(db, plan, payload.changes())


@router.delete("/plans/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_plan(
    plan_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_plan(db, plan_id=plan_id, user=user)
    plans_service.delete_plan(db, plan_id)
