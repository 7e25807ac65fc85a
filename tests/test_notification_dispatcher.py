import logging

import pytest

from cinema.domain.enums import VerificationChannel
from cinema.infrastructure.external_services.email_service import EmailService, EmailDeliveryError
from cinema.infrastructure.external_services.notification_dispatcher import NotificationDispatcher
from cinema.infrastructure.external_services.sms_service import SmsService


pytestmark = pytest.mark.anyio("asyncio")


class FakeEmailService:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    async def send_verification_code(self, to_email, code, expires_in_minutes):
        if self.fail:
            raise EmailDeliveryError("smtp down")
        self.sent.append((to_email, code, expires_in_minutes))


class FakeSmsService:
    def __init__(self):
        self.sent = []

    async def send_verification_code(self, mobile_number, code, expires_in_minutes):
        self.sent.append((mobile_number, code, expires_in_minutes))


async def test_routes_codes_by_channel():
    email, sms = FakeEmailService(), FakeSmsService()
    dispatcher = NotificationDispatcher(email_service=email, sms_service=sms)

    dispatcher.notify(VerificationChannel.EMAIL, "a@example.com", "123456", 10)
    dispatcher.notify(VerificationChannel.MOBILE, "+15550000001", "654321", 10)
    assert dispatcher.pending == 2

    await dispatcher.drain()

    assert dispatcher.pending == 0
    assert email.sent == [("a@example.com", "123456", 10)]
    assert sms.sent == [("+15550000001", "654321", 10)]


async def test_delivery_failure_is_logged_not_raised(caplog):
    dispatcher = NotificationDispatcher(email_service=FakeEmailService(fail=True), sms_service=FakeSmsService())

    with caplog.at_level(logging.ERROR):
        dispatcher.notify(VerificationChannel.EMAIL, "a@example.com", "123456", 10)
        await dispatcher.drain()

    assert "Failed to deliver EMAIL verification code" in caplog.text


async def test_sms_stand_in_logs_code(caplog):
    with caplog.at_level(logging.INFO):
        await SmsService().send_verification_code("+15550000001", "424242", 10)
    assert "424242" in caplog.text


async def test_disabled_email_service_skips_smtp(caplog):
    service = EmailService()
    assert not service.enabled

    with caplog.at_level(logging.INFO):
        await service.send_verification_code("a@example.com", "123456", 10)
    assert "Email delivery disabled" in caplog.text


async def test_verification_email_content(monkeypatch):
    service = EmailService()
    captured = {}

    async def fake_send_email(to_email, subject, text_content, html_content=None):
        captured.update(to=to_email, subject=subject, text=text_content)

    monkeypatch.setattr(service, "send_email", fake_send_email)
    await service.send_verification_code("a@example.com", "123456", 10)

    assert captured["subject"] == "Email Verification Code"
    assert captured["text"] == "Your verification code is: 123456\nThis code will expire in 10 minutes."
