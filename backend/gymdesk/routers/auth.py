from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from gymdesk.auth.deps import ACCESS_COOKIE, get_current_user, get_jwt_config
from gymdesk.auth.session_tokens import issue_session_token
from gymdesk.core.config import settings
from gymdesk.core.db import get_db
from gymdesk.models import User
from gymdesk.schemas import LoginIn, RegisterIn, UserOut
from gymdesk.services import users as users_service

router = APIRouter(tags=["auth"])


def _set_session_cookie(response: Response, user: User) -> None:
    token = issue_session_token(get_jwt_config(), user.id)
    response.set_cookie(
        key=ACCESS_COOKIE,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        domain=settings.COOKIE_DOMAIN,
        path="/",
        max_age=settings.ACCESS_TOKEN_TTL_SECONDS,
    )


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterIn, response: Response, db: Session = Depends(get_db)):
    if users_service.get_user_by_username(db, payload.username) is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=users_service.USERNAME_TAKEN)

    user = users_service.create_user(
        db,
        username=payload.username,
        password=payload.password,
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
    )
    _set_session_cookie(response, user)
    return user


@router.post("/login", response_model=UserOut)
def login(payload: LoginIn, response: Response, db: Session = Depends(get_db)):
    user = users_service.authenticate(db, username=payload.username, password=payload.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    _set_session_cookie(response, user)
    return user


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(response: Response):
    response.delete_cookie(key=ACCESS_COOKIE, domain=settings.COOKIE_DOMAIN, path="/")


@router.get("/user", response_model=UserOut)
def current_user(user: User = Depends(get_current_user)):
    return user
