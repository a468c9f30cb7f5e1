"""Signed session tokens carried in the access cookie."""

from __future__ import annotations

import time
from dataclasses import dataclass

import jwt  # PyJWT

ALGORITHM = "HS256"
TOKEN_TYPE = "session"


class SessionTokenError(Exception):
    """Token is missing a claim, expired, tampered with, or not ours."""


@dataclass(frozen=True)
class JwtConfig:
    secret: str
    issuer: str
    audience: str
    ttl_seconds: int


def issue_session_token(cfg: JwtConfig, user_id: int, *, now: int | None = None) -> str:
    issued_at = int(time.time()) if now is None else now
    claims = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + cfg.ttl_seconds,
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "typ": TOKEN_TYPE,
    }
    return jwt.encode(claims, cfg.secret, algorithm=ALGORITHM)


def read_session_token(cfg: JwtConfig, token: str) -> int:
    """Verify the token and return the user id it was issued for."""
    try:
        claims = jwt.decode(
            token,
            cfg.secret,
            algorithms=[ALGORITHM],
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={"require": ["exp", "iat", "iss", "aud", "sub"]},
        )
    except jwt.PyJWTError as e:
        raise SessionTokenError(str(e)) from e

    if claims.get("typ") != TOKEN_TYPE:
        raise SessionTokenError("not a session token")
    try:
        return int(claims["sub"])
    except ValueError as e:
        raise SessionTokenError("malformed subject") from e
