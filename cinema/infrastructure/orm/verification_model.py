"""Verification code ORM model"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Index, Enum as SQLEnum, false
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import VerificationChannel


class VerificationModel(Base):
    __tablename__ = "verifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    channel = Column(SQLEnum(VerificationChannel, native_enum=False, length=10), nullable=False)
    code = Column(String(12), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    used = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    user = relationship("UserModel", back_populates="verifications")

    __table_args__ = (
        # At most one pending code per user and channel
        Index(
            "uq_verifications_pending",
            "user_id", "channel",
            unique=True,
            sqlite_where=used == false(),
            postgresql_where=used == false(),
        ),
        Index("idx_verifications_lookup", "user_id", "channel", "code"),
    )

    def __repr__(self):
        return f"<VerificationModel(id={self.id}, user_id={self.user_id}, channel={self.channel}, used={self.used})>"
