"""Purchase repository implementation using SQLAlchemy ORM"""

from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...domain.entities.purchase import Purchase
from ...domain.repositories.purchase_repository import IPurchaseRepository
from ...domain.value_objects.entity_ids import PurchaseId, UserId, MovieId
from ...domain.value_objects.money import Money
from ...domain.enums import PurchaseStatus, PaymentMethod
from ...core.exceptions import AlreadyPurchased
from ..orm.purchase_model import PurchaseModel


class PurchaseRepositoryImpl(IPurchaseRepository):
    """Repository implementation for Purchase aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_user_id(self, user_id: UserId) -> List[Purchase]:
        """Get purchases by user ID, newest first"""
        models = self.session.query(PurchaseModel).filter(
            PurchaseModel.user_id == user_id.value
        ).order_by(PurchaseModel.purchase_date.desc(), PurchaseModel.id.desc()).all()
        return [self._map_to_entity(model) for model in models]

    async def get_by_user_and_movie(self, user_id: UserId, movie_id: MovieId) -> List[Purchase]:
        models = self.session.query(PurchaseModel).filter(
            PurchaseModel.user_id == user_id.value,
            PurchaseModel.movie_id == movie_id.value
        ).all()
        return [self._map_to_entity(model) for model in models]

    async def add(self, purchase: Purchase) -> Purchase:
        """Add a new purchase"""
        model = PurchaseModel(
            user_id=purchase.user_id.value,
            movie_id=purchase.movie_id.value,
            amount=purchase.amount.amount,
            currency=purchase.amount.currency,
            payment_method=purchase.payment_method,
            transaction_id=purchase.transaction_id,
            status=purchase.status,
            purchase_date=purchase.purchase_date,
            completed_date=purchase.completed_date
        )
        self.session.add(model)
        try:
            self.session.flush()
        except IntegrityError:
            raise AlreadyPurchased()

        purchase.id = PurchaseId(model.id)
        return purchase

    def _map_to_entity(self, model: PurchaseModel) -> Purchase:
        """Map ORM model to domain entity"""
        return Purchase(
            id=PurchaseId(model.id),
            user_id=UserId(model.user_id),
            movie_id=MovieId(model.movie_id),
            amount=Money(model.amount, model.currency),
            payment_method=PaymentMethod(model.payment_method),
            status=PurchaseStatus(model.status),
            transaction_id=model.transaction_id,
            movie_title=model.movie.title if model.movie else None,
            purchase_date=model.purchase_date,
            completed_date=model.completed_date
        )
