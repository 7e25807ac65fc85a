"""Login user use case"""

import logging

from ...domain.enums import VerificationChannel
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import LoginUserDto, SessionBundleDto
from ...core.exceptions import InvalidCredentials, UnverifiedAccount
from ...core.security import (
    verify_password, create_access_token, create_refresh_token, access_token_lifetime_ms
)


logger = logging.getLogger(__name__)


_UNVERIFIED_MESSAGES = {
    VerificationChannel.EMAIL: "Email needs to be verified",
    VerificationChannel.MOBILE: "Mobile number needs to be verified",
}


class LoginUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: LoginUserDto) -> SessionBundleDto:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_username(request.username)

            # Unknown user, wrong password and disabled account look the same
            if not user or not verify_password(request.password, user.hashed_password):
                raise InvalidCredentials("Invalid username or password")
            if not user.active:
                raise InvalidCredentials("Invalid username or password")

            pending = user.unverified_channels
            if pending:
                if len(pending) > 1:
                    message = "Both email and mobile number need to be verified"
                else:
                    message = _UNVERIFIED_MESSAGES[pending[0]]
                raise UnverifiedAccount([c.value for c in pending], message)

            # Update last login
            user.record_login()
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        logger.info("User %s logged in", user.username)

        return SessionBundleDto(
            token=create_access_token(user.username),
            refresh_token=create_refresh_token(user.username),
            token_type="Bearer",
            expires_in=access_token_lifetime_ms(),
            username=user.username,
            email_verified=user.email_verified,
            mobile_verified=user.mobile_verified
        )
