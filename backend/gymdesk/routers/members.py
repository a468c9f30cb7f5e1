from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from gymdesk.auth.deps import get_current_user
from gymdesk.auth.guards import require_gym, require_member
from gymdesk.core.db import get_db
from gymdesk.models import User
from gymdesk.schemas import MemberCreateIn, MemberOut, MemberUpdateIn
from gymdesk.services import members as members_service

router = APIRouter(tags=["members"])


@router.get("/gyms/{gym_id}/members", response_model=list[MemberOut])
def list_members(
    gym_id: int,
    active: bool | None = Query(default=None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return members_service.list_members(db, gym_id=gym_id, active=active)


@router.post("/gyms/{gym_id}/members", response_model=MemberOut, status_code=status.HTTP_201_CREATED)
def create_member(
    gym_id: int,
    payload: MemberCreateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return members_service.create_member(db, gym_id=gym_id, data=payload.model_dump())


@router.get("/members/{member_id}", response_model=MemberOut)
def get_member(
    member_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return require_member(db, member_id=member_id, user=user)


@router.put("/members/{member_id}", response_model=MemberOut)
def update_member(
    member_id: int,
    payload: MemberUpdateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    member = require_member(db, member_id=member_id, user=user)
    return members_service.update_member(db, member, payload.changes())


@router.delete("/members/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_member(
    member_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_member(db, member_id=member_id, user=user)
    members_service.delete_member(db, member_id)
