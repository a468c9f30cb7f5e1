from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from gymdesk.auth.deps import get_current_user
from gymdesk.auth.guards import require_gym, require_member, require_membership
from gymdesk.core.db import get_db
from gymdesk.models import User
from gymdesk.schemas import MembershipCreateIn, MembershipOut, MembershipUpdateIn
from gymdesk.services import memberships as memberships_service

router = APIRouter(tags=["memberships"])


@router.get("/gyms/{gym_id}/memberships", response_model=list[MembershipOut])
def list_gym_memberships(
    gym_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return memberships_service.list_memberships_for_gym(db, gym_id=gym_id)


@router.get("/gyms/{gym_id}/memberships/expiring", response_model=list[MembershipOut])
def list_expiring_memberships(
    gym_id: int,
    days: int = Query(7, ge=0, le=366),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return memberships_service.get_expiring_memberships(db, gym_id=gym_id, days=days)


@router.get("/members/{member_id}/memberships", response_model=list[MembershipOut])
def list_member_memberships(
    member_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_member(db, member_id=member_id, user=user)
    return memberships_service.list_memberships_for_member(db, member_id=member_id)


@router.post("/members/{member_id}/memberships", response_model=MembershipOut, status_code=status.HTTP_201_CREATED)
def create_membership(
    member_id: int,
    payload: MembershipCreateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    member = require_member(db, member_id=member_id, user=user)
    return memberships_service.create_membership(db, member=member, data=payload.model_dump())


@router.get("/memberships/{membership_id}", response_model=MembershipOut)
def get_membership(
    membership_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return require_membership(db, membership_id=membership_id, user=user)


@router.put("/memberships/{membership_id}", response_model=MembershipOut)
def update_membership(
    membership_id: int,
    payload: MembershipUpdateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    membership = require_membership(db, membership_id=membership_id, user=user)
    return memberships_service.update_membership(db, membership, payload.changes())


@router.delete("/memberships/{membership_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_membership(
    membership_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_membership(db, membership_id=membership_id, user=user)
    memberships_service.delete_membership(db, membership_id)
