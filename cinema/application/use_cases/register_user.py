"""Register user use case"""

import logging

from ...domain.entities.user import User
from ...domain.enums import VerificationChannel
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher
from ...application.dtos.user_dtos import CreateUserDto
from ...core.exceptions import AlreadyExists
from ...core.security import get_password_hash
from .send_verification import SendVerificationUseCase


logger = logging.getLogger(__name__)


class RegisterUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, notifier: NotificationDispatcher):
        self.unit_of_work = unit_of_work
        self.notifier = notifier

    async def execute(self, request: CreateUserDto) -> User:
        async with self.unit_of_work:
            # First conflict wins: username, then email, then mobile number
            if await self.unit_of_work.users.exists_by_username(request.username):
                raise AlreadyExists("Username is already taken")
            if await self.unit_of_work.users.exists_by_email(request.email):
                raise AlreadyExists("Email is already in use")
            if await self.unit_of_work.users.exists_by_mobile_number(request.mobile_number):
                raise AlreadyExists("Mobile number is already in use")

            # Create user entity
            user = User.create(
                username=request.username,
                email=request.email,
                mobile_number=request.mobile_number,
                password=get_password_hash(request.password),
                full_name=request.full_name
            )

            # Save user
            user = await self.unit_of_work.users.add(user)
            await self.unit_of_work.commit()

        for event in user.get_events():
            logger.info("Domain event: %s", event)

        # The account stays committed whatever happens to its codes
        send_verification = SendVerificationUseCase(self.unit_of_work, self.notifier)
        for channel in VerificationChannel:
            try:
                await send_verification.execute(user, channel)
            except Exception:
                logger.exception("Could not issue %s verification code for %s", channel.value, user.username)

        logger.info("Registered user %s", user.username)
        return user
