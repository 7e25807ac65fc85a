"""User entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Set

from ..clock import utcnow
from ..value_objects.entity_ids import UserId
from ..enums import RoleName, VerificationChannel
from ..events.user_events import UserRegistered, UserChannelVerified


@dataclass
class User:
    id: Optional[UserId]
    username: str
    email: str
    mobile_number: str
    hashed_password: str
    full_name: Optional[str] = None
    email_verified: bool = False
    mobile_verified: bool = False
    active: bool = True
    roles: Set[RoleName] = field(default_factory=set)

    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    last_login_at: Optional[datetime] = None

    # Domain events
    _events: List = field(default_factory=list, init=False)

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        mobile_number: str,
        password: str,
        full_name: Optional[str] = None
    ) -> 'User':
        """Factory method to create a new, unverified user"""
        now = utcnow()
        user = cls(
            id=None,  # assigned by the repository
            username=username,
            email=email,
            mobile_number=mobile_number,
            hashed_password=password,
            full_name=full_name,
            email_verified=False,
            mobile_verified=False,
            active=True,
            roles={RoleName.USER},
            created_at=now,
            updated_at=now
        )
        user._events.append(UserRegistered(username=username, registered_at=now))
        return user

    def mark_verified(self, channel: VerificationChannel) -> None:
        """Business logic: flip the verification flag for a channel"""
        if channel == VerificationChannel.EMAIL:
            self.email_verified = True
        else:
            self.mobile_verified = True
        self.updated_at = utcnow()

        self._events.append(UserChannelVerified(
            user_id=self.id,
            channel=channel,
            verified_at=self.updated_at
        ))

    def is_verified(self, channel: VerificationChannel) -> bool:
        if channel == VerificationChannel.EMAIL:
            return self.email_verified
        return self.mobile_verified

    @property
    def unverified_channels(self) -> List[VerificationChannel]:
        return [c for c in VerificationChannel if not self.is_verified(c)]

    @property
    def is_fully_verified(self) -> bool:
        return self.email_verified and self.mobile_verified

    def record_login(self) -> None:
        """Record user login"""
        self.last_login_at = utcnow()
        self.updated_at = self.last_login_at

    def has_any_role(self, *roles: RoleName) -> bool:
        return any(role in self.roles for role in roles)

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events
