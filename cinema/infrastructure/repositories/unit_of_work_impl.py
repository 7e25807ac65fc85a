"""Unit of Work implementation with proper async support"""

from sqlalchemy.orm import Session

from ...domain.repositories.unit_of_work import IUnitOfWork
from .user_repository_impl import UserRepositoryImpl, RoleRepositoryImpl
from .verification_repository_impl import VerificationRepositoryImpl
from .purchase_repository_impl import PurchaseRepositoryImpl
from .movie_repository_impl import MovieRepositoryImpl


class UnitOfWorkImpl(IUnitOfWork):

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepositoryImpl(session)
        self.roles = RoleRepositoryImpl(session)
        self.verifications = VerificationRepositoryImpl(session)
        self.purchases = PurchaseRepositoryImpl(session)
        self.movies = MovieRepositoryImpl(session)
        self._committed = False

    async def __aenter__(self):
        # The same unit of work may open several consecutive scopes
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            await self.rollback()
        elif not self._committed:
            await self.commit()

    async def commit(self) -> None:
        """Commit transaction"""
        try:
            self.session.commit()
            self._committed = True
        except Exception:
            self.rollback_sync()
            raise

    async def rollback(self) -> None:
        """Rollback transaction"""
        self.rollback_sync()

    def rollback_sync(self) -> None:
        """Synchronous rollback helper"""
        self.session.rollback()
