"""Verification code use cases"""

import logging

from ...domain.enums import VerificationChannel
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher
from ...core.exceptions import NotFound, InvalidVerification
from .send_verification import SendVerificationUseCase


logger = logging.getLogger(__name__)


class VerifyCodeUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, username: str, code: str, channel: VerificationChannel) -> bool:
        """Consume a matching code and mark the channel verified"""
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_username(username)
            if not user:
                raise NotFound("User not found")

            verification = await self.unit_of_work.verifications.find_unused(user.id, channel, code)
            if not verification:
                raise InvalidVerification("Invalid or expired verification code")

            if verification.is_expired:
                await self.unit_of_work.verifications.delete(verification)
                await self.unit_of_work.commit()
                logger.info("Rejected expired %s code for user %s", channel.value, username)
                raise InvalidVerification("Verification code has expired", expired=True)

            verification.consume()
            if not await self.unit_of_work.verifications.mark_used(verification):
                logger.info("Lost race consuming %s code for user %s", channel.value, username)
                raise InvalidVerification("Invalid or expired verification code")

            user.mark_verified(channel)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

            for event in user.get_events():
                logger.info("Domain event: %s", event)
            return True


class ResendVerificationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, notifier: NotificationDispatcher):
        self.unit_of_work = unit_of_work
        self.notifier = notifier

    async def execute(self, username: str, channel: VerificationChannel) -> None:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_username(username)
        if not user:
            raise NotFound("User not found")

        await SendVerificationUseCase(self.unit_of_work, self.notifier).execute(user, channel)
