"""Purchase ORM Model"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Numeric, Index, Enum as SQLEnum, text
from sqlalchemy.orm import relationship

from ...db.models import Base
from ...domain.enums import PurchaseStatus, PaymentMethod


class PurchaseModel(Base):
    __tablename__ = 'purchases'

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    movie_id = Column(Integer, ForeignKey('movies.id'), nullable=False, index=True)

    # Payment details
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), default='USD', nullable=False)
    payment_method = Column(SQLEnum(PaymentMethod, native_enum=False, length=20), nullable=False)
    transaction_id = Column(String(64), unique=True, nullable=True)
    status = Column(SQLEnum(PurchaseStatus, native_enum=False, length=20), default=PurchaseStatus.PENDING, nullable=False, index=True)

    # Timestamps
    purchase_date = Column(DateTime, nullable=False)
    completed_date = Column(DateTime, nullable=True)

    # Relationships
    user = relationship('UserModel', back_populates='purchases')
    movie = relationship('MovieModel', lazy='joined')

    __table_args__ = (
        # One completed purchase per user and movie
        Index(
            'uq_purchases_completed',
            'user_id', 'movie_id',
            unique=True,
            sqlite_where=text("status = 'COMPLETED'"),
            postgresql_where=text("status = 'COMPLETED'"),
        ),
    )
