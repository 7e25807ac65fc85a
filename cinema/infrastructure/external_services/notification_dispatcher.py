"""Fire-and-forget delivery of verification codes"""

import asyncio
import logging
from typing import Optional, Set

from ...domain.enums import VerificationChannel
from .email_service import EmailService
from .sms_service import SmsService


logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Schedules code delivery as background tasks.

    Callers never wait on delivery and never see its failures: errors are
    logged and the user recovers through a resend. References to running
    tasks are kept so they are not garbage-collected mid-flight and so
    shutdown (and tests) can wait for them.
    """

    def __init__(self, email_service: Optional[EmailService] = None, sms_service: Optional[SmsService] = None):
        self.email_service = email_service or EmailService()
        self.sms_service = sms_service or SmsService()
        self._tasks: Set[asyncio.Task] = set()

    def notify(self, channel: VerificationChannel, destination: str, code: str, expires_in_minutes: int) -> None:
        task = asyncio.create_task(self._deliver(channel, destination, code, expires_in_minutes))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _deliver(self, channel: VerificationChannel, destination: str, code: str, expires_in_minutes: int) -> None:
        try:
            if channel == VerificationChannel.EMAIL:
                await self.email_service.send_verification_code(destination, code, expires_in_minutes)
            else:
                await self.sms_service.send_verification_code(destination, code, expires_in_minutes)
        except Exception as e:
            logger.error("Failed to deliver %s verification code to %s: %s", channel.value, destination, e)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every in-flight delivery"""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))


notification_dispatcher = NotificationDispatcher()
