from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gymdesk.auth.passwords import hash_password, verify_password
from gymdesk.models import User

log = logging.getLogger("gymdesk.users")

USERNAME_TAKEN = "Username already exists"


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.execute(select(User).where(User.username == username)).scalar_one_or_none()


def create_user(
    db: Session,
    *,
    username: str,
    password: str,
    name: str,
    email: str,
    phone: str | None = None,
    role: str = "owner",
) -> User:
    user = User(
        username=username,
        password=hash_password(password),
        name=name,
        email=email,
        phone=phone,
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race on the unique username index
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=USERNAME_TAKEN)
    db.refresh(user)
    log.info("user registered id=%s username=%s", user.id, user.username)
    return user


def authenticate(db: Session, *, username: str, password: str) -> User | None:
    user = get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password):
        log.warning("login failed username=%s", username)
        return None
    return user
