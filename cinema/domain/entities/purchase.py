"""Purchase entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List

from ..clock import utcnow
from ..value_objects.money import Money
from ..value_objects.entity_ids import PurchaseId, UserId, MovieId
from ..enums import PurchaseStatus, PaymentMethod
from ..events.purchase_events import PurchaseCompleted


@dataclass
class Purchase:
    id: Optional[PurchaseId]
    user_id: UserId
    movie_id: MovieId
    amount: Money
    payment_method: PaymentMethod
    status: PurchaseStatus = PurchaseStatus.PENDING
    transaction_id: Optional[str] = None
    movie_title: Optional[str] = None

    purchase_date: datetime = field(default_factory=utcnow)
    completed_date: Optional[datetime] = None

    # Domain events
    _events: List = field(default_factory=list, init=False)

    @classmethod
    def start(
        cls,
        user_id: UserId,
        movie_id: MovieId,
        amount: Money,
        payment_method: PaymentMethod,
        movie_title: Optional[str] = None
    ) -> 'Purchase':
        return cls(
            id=None,
            user_id=user_id,
            movie_id=movie_id,
            amount=amount,
            payment_method=payment_method,
            status=PurchaseStatus.PENDING,
            movie_title=movie_title,
            purchase_date=utcnow()
        )

    def complete(self, transaction_id: str) -> None:
        """Business logic: payment captured"""
        if self.status != PurchaseStatus.PENDING:
            raise ValueError(f"Cannot complete purchase with status: {self.status.value}")

        self.status = PurchaseStatus.COMPLETED
        self.transaction_id = transaction_id
        # Simulated payments settle immediately
        self.completed_date = self.purchase_date

        self._events.append(PurchaseCompleted(
            user_id=self.user_id,
            movie_id=self.movie_id,
            amount=self.amount,
            transaction_id=transaction_id
        ))

    @property
    def is_completed(self) -> bool:
        return self.status == PurchaseStatus.COMPLETED

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events
