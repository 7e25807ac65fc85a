"""Refresh and logout use cases"""

import logging
from typing import Optional

from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.user_dtos import AccessTokenDto
from ...core.exceptions import InvalidToken
from ...core.security import verify_refresh_token, create_access_token


logger = logging.getLogger(__name__)


class RefreshTokenUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, refresh_token: str) -> AccessTokenDto:
        username = verify_refresh_token(refresh_token)
        if not username:
            raise InvalidToken("Invalid refresh token")

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_username(username)
        if not user or not user.active:
            raise InvalidToken("Invalid refresh token")

        # The refresh token itself is not rotated
        return AccessTokenDto(access_token=create_access_token(user.username), token_type="Bearer")


class LogoutUserUseCase:
    """Tokens are stateless; logging out only acknowledges the request"""

    async def execute(self, refresh_token: Optional[str] = None) -> None:
        username = verify_refresh_token(refresh_token) if refresh_token else None
        logger.info("Logout requested for %s", username or "anonymous session")
