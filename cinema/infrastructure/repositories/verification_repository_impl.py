"""Verification code repository implementation"""

from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...domain.repositories.verification_repository import IVerificationRepository
from ...domain.entities.verification import VerificationCode
from ...domain.value_objects.entity_ids import UserId, VerificationId
from ...domain.enums import VerificationChannel
from ...core.exceptions import AlreadyExists
from ..orm.verification_model import VerificationModel


class VerificationRepositoryImpl(IVerificationRepository):

    def __init__(self, session: Session):
        self.session = session

    def _unused_query(self, user_id: UserId, channel: VerificationChannel):
        return self.session.query(VerificationModel).filter(
            VerificationModel.user_id == user_id.value,
            VerificationModel.channel == channel,
            VerificationModel.used.is_(False)
        )

    async def find_unused(
        self, user_id: UserId, channel: VerificationChannel, code: str
    ) -> Optional[VerificationCode]:
        model = self._unused_query(user_id, channel).filter(VerificationModel.code == code).first()
        return self._map_to_entity(model) if model else None

    async def delete_unused(self, user_id: UserId, channel: VerificationChannel) -> int:
        deleted = self._unused_query(user_id, channel).delete(synchronize_session=False)
        self.session.flush()
        return deleted

    async def add(self, verification: VerificationCode) -> VerificationCode:
        model = VerificationModel(
            user_id=verification.user_id.value,
            channel=verification.channel,
            code=verification.code,
            expires_at=verification.expires_at,
            used=verification.used,
            created_at=verification.created_at
        )
        self.session.add(model)
        try:
            self.session.flush()
        except IntegrityError:
            raise AlreadyExists("A verification code for this channel is already pending")

        verification.id = VerificationId(model.id)
        return verification

    async def mark_used(self, verification: VerificationCode) -> bool:
        consumed = self.session.query(VerificationModel).filter(
            VerificationModel.id == verification.id.value,
            VerificationModel.used.is_(False)
        ).update({"used": True}, synchronize_session=False)
        self.session.flush()
        return consumed == 1

    async def delete(self, verification: VerificationCode) -> None:
        model = self.session.get(VerificationModel, verification.id.value)
        if model:
            self.session.delete(model)
            self.session.flush()

    def _map_to_entity(self, model: VerificationModel) -> VerificationCode:
        return VerificationCode(
            id=VerificationId(model.id),
            user_id=UserId(model.user_id),
            channel=VerificationChannel(model.channel),
            code=model.code,
            expires_at=model.expires_at,
            used=model.used,
            created_at=model.created_at
        )
