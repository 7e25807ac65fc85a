"""Verification code repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.verification import VerificationCode
from ..enums import VerificationChannel
from ..value_objects.entity_ids import UserId


class IVerificationRepository(ABC):

    @abstractmethod
    async def find_unused(
        self, user_id: UserId, channel: VerificationChannel, code: str
    ) -> Optional[VerificationCode]:
        """Unused code matching user, channel and code exactly"""
        pass

    @abstractmethod
    async def delete_unused(self, user_id: UserId, channel: VerificationChannel) -> int:
        """Delete pending codes for the pair, returning how many were removed"""
        pass

    @abstractmethod
    async def add(self, verification: VerificationCode) -> VerificationCode:
        pass

    @abstractmethod
    async def mark_used(self, verification: VerificationCode) -> bool:
        """Flip the stored code to used unless another request already did"""
        pass

    @abstractmethod
    async def delete(self, verification: VerificationCode) -> None:
        pass
