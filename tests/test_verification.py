import asyncio
from datetime import timedelta

import pytest

from cinema.domain.clock import utcnow
from cinema.domain.enums import VerificationChannel
from cinema.infrastructure.orm import UserModel, VerificationModel
from cinema.infrastructure.repositories.verification_repository_impl import VerificationRepositoryImpl

from conftest import register


pytestmark = pytest.mark.anyio("asyncio")


def pending_codes(db, username, channel):
    user = db.query(UserModel).filter(UserModel.username == username).one()
    return db.query(VerificationModel).filter(
        VerificationModel.user_id == user.id,
        VerificationModel.channel == channel,
        VerificationModel.used.is_(False),
    ).all()


async def test_verify_email_marks_code_used_and_sets_flag(api_client, notifier, db):
    payload = await register(api_client, "alice")
    code = notifier.last_code(payload["email"], VerificationChannel.EMAIL)

    resp = await api_client.post("/api/auth/verify/email", json={"username": "alice", "code": code})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Email verified successfully"

    user = db.query(UserModel).filter(UserModel.username == "alice").one()
    assert user.email_verified
    assert not user.mobile_verified
    assert pending_codes(db, "alice", VerificationChannel.EMAIL) == []

    used = db.query(VerificationModel).filter(VerificationModel.code == code).one()
    assert used.used


async def test_code_cannot_be_reused(api_client, notifier):
    payload = await register(api_client, "alice")
    code = notifier.last_code(payload["mobile_number"], VerificationChannel.MOBILE)

    first = await api_client.post("/api/auth/verify/mobile", json={"username": "alice", "code": code})
    second = await api_client.post("/api/auth/verify/mobile", json={"username": "alice", "code": code})

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json() == {
        "detail": "Invalid or expired verification code",
        "error": "InvalidVerification",
        "expired": False,
    }


async def test_code_is_bound_to_its_channel(api_client, notifier):
    payload = await register(api_client, "alice")
    email_code = notifier.last_code(payload["email"], VerificationChannel.EMAIL)
    mobile_code = notifier.last_code(payload["mobile_number"], VerificationChannel.MOBILE)
    if email_code == mobile_code:
        pytest.skip("both channels drew the same code")

    resp = await api_client.post("/api/auth/verify/mobile", json={"username": "alice", "code": email_code})
    assert resp.status_code == 400


async def test_wrong_code_and_unknown_user(api_client, notifier):
    payload = await register(api_client, "alice")
    code = notifier.last_code(payload["email"], VerificationChannel.EMAIL)
    wrong = "0" * len(code) if code != "0" * len(code) else "1" * len(code)

    resp = await api_client.post("/api/auth/verify/email", json={"username": "alice", "code": wrong})
    assert resp.status_code == 400

    resp = await api_client.post("/api/auth/verify/email", json={"username": "nobody", "code": code})
    assert resp.status_code == 404
    assert resp.json()["error"] == "NotFound"


async def test_expired_code_is_deleted_and_resend_recovers(api_client, notifier, db):
    payload = await register(api_client, "alice")
    code = notifier.last_code(payload["email"], VerificationChannel.EMAIL)

    db.query(VerificationModel).filter(VerificationModel.code == code).update(
        {"expires_at": utcnow() - timedelta(minutes=1)}
    )
    db.commit()

    resp = await api_client.post("/api/auth/verify/email", json={"username": "alice", "code": code})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Verification code has expired"
    assert resp.json()["expired"] is True
    db.expire_all()
    assert pending_codes(db, "alice", VerificationChannel.EMAIL) == []

    resend = await api_client.post("/api/auth/resend-otp", json={"username": "alice", "type": "email"})
    assert resend.status_code == 200
    assert resend.json()["message"] == "Verification email sent successfully"

    fresh = pending_codes(db, "alice", VerificationChannel.EMAIL)
    assert len(fresh) == 1
    assert fresh[0].expires_at > utcnow()

    new_code = notifier.last_code(payload["email"], VerificationChannel.EMAIL)
    resp = await api_client.post("/api/auth/verify/email", json={"username": "alice", "code": new_code})
    assert resp.status_code == 200


async def test_resend_supersedes_pending_code(api_client, notifier, db):
    payload = await register(api_client, "alice")
    old = pending_codes(db, "alice", VerificationChannel.MOBILE)[0]

    for _ in range(3):
        resp = await api_client.post("/api/auth/resend-otp", json={"username": "alice", "type": "mobile"})
        assert resp.status_code == 200
        assert resp.json()["message"] == "Verification SMS sent successfully"

    db.expire_all()
    codes = pending_codes(db, "alice", VerificationChannel.MOBILE)
    assert len(codes) == 1
    assert codes[0].id != old.id
    assert codes[0].code == notifier.last_code(payload["mobile_number"], VerificationChannel.MOBILE)


async def test_resend_type_is_case_insensitive_and_defaults_to_mobile(api_client, notifier):
    payload = await register(api_client, "alice")
    notifier.sent.clear()

    await api_client.post("/api/auth/resend-otp", json={"username": "alice", "type": "EMAIL"})
    await api_client.post("/api/auth/resend-otp", json={"username": "alice", "type": "sms"})

    assert [e["channel"] for e in notifier.sent] == [VerificationChannel.EMAIL, VerificationChannel.MOBILE]
    assert notifier.sent[1]["destination"] == payload["mobile_number"]


async def test_resend_for_unknown_user(api_client):
    resp = await api_client.post("/api/auth/resend-otp", json={"username": "nobody", "type": "email"})
    assert resp.status_code == 404


async def test_concurrent_resends_leave_one_pending_code(api_client, db):
    await register(api_client, "alice")

    responses = await asyncio.gather(*[
        api_client.post("/api/auth/resend-otp", json={"username": "alice", "type": "email"})
        for _ in range(5)
    ])

    assert all(r.status_code == 200 for r in responses)
    db.expire_all()
    assert len(pending_codes(db, "alice", VerificationChannel.EMAIL)) == 1


async def test_resend_retries_when_another_code_lands_after_the_delete(api_client, notifier, db, monkeypatch):
    payload = await register(api_client, "alice")
    original_delete = VerificationRepositoryImpl.delete_unused
    calls = []

    async def delete_skipping_first(self, user_id, channel):
        calls.append(channel)
        if len(calls) == 1:
            return 0
        return await original_delete(self, user_id, channel)

    monkeypatch.setattr(VerificationRepositoryImpl, "delete_unused", delete_skipping_first)

    resp = await api_client.post("/api/auth/resend-otp", json={"username": "alice", "type": "email"})
    assert resp.status_code == 200
    assert len(calls) == 2

    db.expire_all()
    codes = pending_codes(db, "alice", VerificationChannel.EMAIL)
    assert len(codes) == 1
    assert codes[0].code == notifier.last_code(payload["email"], VerificationChannel.EMAIL)


async def test_resend_reports_conflict_when_pending_code_keeps_reappearing(api_client, notifier, db, monkeypatch):
    await register(api_client, "alice")
    before = pending_codes(db, "alice", VerificationChannel.EMAIL)[0].code
    notifier.sent.clear()

    async def delete_nothing(self, user_id, channel):
        return 0

    monkeypatch.setattr(VerificationRepositoryImpl, "delete_unused", delete_nothing)

    resp = await api_client.post("/api/auth/resend-otp", json={"username": "alice", "type": "email"})
    assert resp.status_code == 409
    assert resp.json()["error"] == "AlreadyExists"
    assert notifier.sent == []

    db.expire_all()
    codes = pending_codes(db, "alice", VerificationChannel.EMAIL)
    assert [c.code for c in codes] == [before]


async def test_code_consumed_by_another_request_is_rejected(api_client, notifier, db, monkeypatch):
    payload = await register(api_client, "alice")
    code = notifier.last_code(payload["email"], VerificationChannel.EMAIL)
    original_find = VerificationRepositoryImpl.find_unused

    async def find_then_consume_elsewhere(self, user_id, channel, code):
        verification = await original_find(self, user_id, channel, code)
        db.query(VerificationModel).filter(VerificationModel.id == verification.id.value).update({"used": True})
        db.commit()
        return verification

    monkeypatch.setattr(VerificationRepositoryImpl, "find_unused", find_then_consume_elsewhere)

    resp = await api_client.post("/api/auth/verify/email", json={"username": "alice", "code": code})
    assert resp.status_code == 400
    assert resp.json() == {
        "detail": "Invalid or expired verification code",
        "error": "InvalidVerification",
        "expired": False,
    }

    db.expire_all()
    user = db.query(UserModel).filter(UserModel.username == "alice").one()
    assert not user.email_verified
