from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from gymdesk.auth.deps import get_current_user
from gymdesk.auth.guards import require_gym, require_member, require_payment
from gymdesk.core.db import get_db
from gymdesk.models import User
from gymdesk.schemas import PaymentCreateIn, PaymentOut, PaymentUpdateIn
from gymdesk.services import payments as payments_service

router = APIRouter(tags=["payments"])


@router.get("/gyms/{gym_id}/payments", response_model=list[PaymentOut])
def list_gym_payments(
    gym_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_gym(db, gym_id=gym_id, user=user)
    return payments_service.list_payments_for_gym(db, gym_id=gym_id)


@router.get("/members/{member_id}/payments", response_model=list[PaymentOut])
def list_member_payments(
    member_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_member(db, member_id=member_id, user=user)
    return payments_service.list_payments_for_member(db, member_id=member_id)


@router.post("/members/{member_id}/payments", response_model=PaymentOut, status_code=status.HTTP_201_CREATED)
def record_payment(
    member_id: int,
    payload: PaymentCreateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    member = require_member(db, member_id=member_id, user=user)
    return payments_service.create_payment(db, member=member, data=payload.model_dump())


@router.get("/payments/{payment_id}", response_model=PaymentOut)
def get_payment(
    payment_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return require_payment(db, payment_id=payment_id, user=user)


@router.put("/payments/{payment_id}", response_model=PaymentOut)
def update_payment(
    payment_id: int,
    payload: PaymentUpdateIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    payment = require_payment(db, payment_id=payment_id, user=user)
    return payments_service.update_payment(db, payment, payload.changes())


@router.delete("/payments/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment(
    payment_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    require_payment(db, payment_id=payment_id, user=user)
    payments_service.delete_payment(db, payment_id)
