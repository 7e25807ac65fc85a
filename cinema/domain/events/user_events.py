"""User domain events"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..enums import VerificationChannel
from ..value_objects.entity_ids import UserId


@dataclass(frozen=True)
class UserRegistered:
    username: str
    registered_at: datetime


@dataclass(frozen=True)
class UserChannelVerified:
    user_id: Optional[UserId]
    channel: VerificationChannel
    verified_at: datetime
