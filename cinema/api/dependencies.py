"""API dependencies for DDD architecture"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from ..core.exceptions import InvalidToken
from ..core.security import verify_token
from ..db.database import get_db
from ..domain.entities.user import User
from ..domain.enums import RoleName
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from ..infrastructure.external_services.notification_dispatcher import (
    NotificationDispatcher, notification_dispatcher
)
from ..infrastructure.external_services.payment_service import PaymentService


# auto_error is off so a missing header is a 401 like any other bad token
security = HTTPBearer(auto_error=False)


def get_unit_of_work(db: Session = Depends(get_db)) -> IUnitOfWork:
    """Get unit of work"""
    return UnitOfWorkImpl(db)


def get_notifier() -> NotificationDispatcher:
    """Get the process-wide notification dispatcher"""
    return notification_dispatcher


def get_payment_service() -> PaymentService:
    """Get payment service"""
    return PaymentService()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
) -> User:
    """Get current authenticated user"""
    if credentials is None:
        raise InvalidToken("Not authenticated")

    username = verify_token(credentials.credentials)
    if not username:
        raise InvalidToken("Invalid token")

    async with unit_of_work:
        user = await unit_of_work.users.get_by_username(username)

    if not user or not user.active:
        raise InvalidToken("User not found")
    return user


def require_roles(*roles: RoleName):
    """Build a dependency that admits users holding any of the given roles"""

    async def checker(current_user: User = Depends(get_current_user)) -> User:
        if not current_user.has_any_role(*roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied"
            )
        return current_user

    return checker


get_catalog_editor = require_roles(RoleName.ADMIN, RoleName.MODERATOR)
get_current_admin_user = require_roles(RoleName.ADMIN)
