"""One-time verification code entity"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from ..clock import utcnow
from ..value_objects.entity_ids import UserId, VerificationId
from ..enums import VerificationChannel


@dataclass
class VerificationCode:
    id: Optional[VerificationId]
    user_id: UserId
    channel: VerificationChannel
    code: str
    expires_at: datetime
    used: bool = False
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def issue(
        cls,
        user_id: UserId,
        channel: VerificationChannel,
        code: str,
        ttl: timedelta
    ) -> 'VerificationCode':
        """Factory method for a fresh, unused code"""
        now = utcnow()
        return cls(
            id=None,
            user_id=user_id,
            channel=channel,
            code=code,
            expires_at=now + ttl,
            used=False,
            created_at=now
        )

    @property
    def is_expired(self) -> bool:
        return utcnow() > self.expires_at

    def consume(self) -> None:
        """Business logic: mark the code as used"""
        if self.used:
            raise ValueError("Verification code already used")
        if self.is_expired:
            raise ValueError("Verification code has expired")
        self.used = True
