import time

import jwt
import pytest

from gymdesk.auth.passwords import hash_password, verify_password
from gymdesk.auth.session_tokens import JwtConfig, SessionTokenError, issue_session_token, read_session_token

CFG = JwtConfig(secret="s3cret", issuer="gymdesk-api", audience="gymdesk-web", ttl_seconds=60)


def test_password_hash_roundtrip():
    hashed = hash_password("owner123")
    assert hashed != "owner123"
    assert verify_password("owner123", hashed)
    assert not verify_password("owner124", hashed)


def test_verify_against_malformed_hash():
    assert verify_password("owner123", "not-a-bcrypt-hash") is False


def test_session_token_roundtrip():
    assert read_session_token(CFG, issue_session_token(CFG, 42)) == 42


def test_token_from_other_audience_is_rejected():
    other = JwtConfig(secret="s3cret", issuer="gymdesk-api", audience="someone-else", ttl_seconds=60)
    with pytest.raises(SessionTokenError):
        read_session_token(CFG, issue_session_token(other, 1))


def test_expired_token_is_rejected():
    issued = int(time.time()) - 3600
    with pytest.raises(SessionTokenError):
        read_session_token(CFG, issue_session_token(CFG, 1, now=issued))


def test_foreign_token_type_is_rejected():
    now = int(time.time())
    token = jwt.encode(
        {"sub": "1", "iat": now, "exp": now + 60, "iss": CFG.issuer, "aud": CFG.audience, "typ": "refresh"},
        CFG.secret,
        algorithm="HS256",
    )
    with pytest.raises(SessionTokenError):
        read_session_token(CFG, token)
