from datetime import datetime, timedelta, timezone

from jose import jwt

from cinema.core.config import settings
from cinema.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    create_refresh_token,
    verify_token,
    verify_refresh_token,
    access_token_lifetime_ms,
    generate_otp,
)


def test_password_hash_round_trip():
    hashed = get_password_hash("hunter22")
    assert hashed != "hunter22"
    assert verify_password("hunter22", hashed)
    assert not verify_password("hunter23", hashed)


def test_access_and_refresh_tokens_are_not_interchangeable():
    access = create_access_token("alice")
    refresh = create_refresh_token("alice")

    assert verify_token(access) == "alice"
    assert verify_refresh_token(refresh) == "alice"
    assert verify_token(refresh) is None
    assert verify_refresh_token(access) is None


def test_tampered_and_expired_tokens_are_rejected():
    token = create_access_token("alice")
    assert verify_token(token + "x") is None

    expired = jwt.encode(
        {"sub": "alice", "type": "access", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )
    assert verify_token(expired) is None

    foreign = jwt.encode({"sub": "alice", "type": "access"}, "another-key", algorithm=settings.ALGORITHM)
    assert verify_token(foreign) is None


def test_access_token_lifetime_in_milliseconds():
    assert access_token_lifetime_ms() == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60_000


def test_generate_otp_is_numeric_and_sized():
    code = generate_otp()
    assert len(code) == settings.OTP_LENGTH
    assert code.isdigit()

    assert len(generate_otp(8)) == 8
    # Leading zeros are kept
    assert all(len(generate_otp(4)) == 4 for _ in range(200))
