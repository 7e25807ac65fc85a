"""Send verification code use case"""

import logging
from datetime import timedelta

from ...domain.entities.user import User
from ...domain.entities.verification import VerificationCode
from ...domain.enums import VerificationChannel
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher
from ...core.config import settings
from ...core.exceptions import AlreadyExists
from ...core.locks import verification_locks
from ...core.security import generate_otp


logger = logging.getLogger(__name__)


class SendVerificationUseCase:
    """Replace any pending code for the channel and hand the new one to the notifier"""

    def __init__(self, unit_of_work: IUnitOfWork, notifier: NotificationDispatcher):
        self.unit_of_work = unit_of_work
        self.notifier = notifier

    async def execute(self, user: User, channel: VerificationChannel) -> VerificationCode:
        async with verification_locks.hold((user.id.value, channel)):
            try:
                verification = await self._replace_pending(user, channel)
            except AlreadyExists:
                # Another process stored its code between our delete and insert
                logger.warning("Pending %s code for %s changed underneath us, retrying", channel.value, user.username)
                verification = await self._replace_pending(user, channel)

        destination = user.email if channel == VerificationChannel.EMAIL else user.mobile_number
        self.notifier.notify(channel, destination, verification.code, settings.OTP_EXPIRE_MINUTES)

        logger.info("Issued %s verification code for user %s", channel.value, user.username)
        return verification

    async def _replace_pending(self, user: User, channel: VerificationChannel) -> VerificationCode:
        async with self.unit_of_work:
            removed = await self.unit_of_work.verifications.delete_unused(user.id, channel)
            if removed:
                logger.debug("Superseded %d pending %s code(s) for %s", removed, channel.value, user.username)

            verification = VerificationCode.issue(
                user_id=user.id,
                channel=channel,
                code=generate_otp(),
                ttl=timedelta(minutes=settings.OTP_EXPIRE_MINUTES)
            )
            verification = await self.unit_of_work.verifications.add(verification)
            await self.unit_of_work.commit()
        return verification
