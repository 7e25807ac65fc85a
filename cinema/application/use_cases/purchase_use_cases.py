"""Purchase use cases"""

import logging
from typing import List, Optional, Dict

from ...domain.entities.purchase import Purchase
from ...domain.enums import PaymentMethod
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import UserId, MovieId
from ...domain.value_objects.money import Money
from ...infrastructure.external_services.payment_service import PaymentService
from ...core.config import settings
from ...core.exceptions import NotFound, PaymentBlocked, AlreadyPurchased
from ...core.locks import purchase_locks


logger = logging.getLogger(__name__)


class PurchaseMovieUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, payment_service: PaymentService):
        self.unit_of_work = unit_of_work
        self.payment_service = payment_service

    async def execute(
        self,
        user_id: UserId,
        movie_id: MovieId,
        payment_method: PaymentMethod,
        payment_details: Optional[Dict] = None
    ) -> Purchase:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise NotFound("User not found")

            movie = await self.unit_of_work.movies.get_by_id(movie_id)
            if not movie:
                raise NotFound(f"Movie not found with id: {movie_id.value}")

            if not user.is_fully_verified:
                raise PaymentBlocked("Both email and mobile number must be verified to make purchases")

        async with purchase_locks.hold((user_id.value, movie_id.value)):
            async with self.unit_of_work:
                existing = await self.unit_of_work.purchases.get_by_user_and_movie(user_id, movie_id)
                if any(p.is_completed for p in existing):
                    raise AlreadyPurchased("You have already purchased this movie")

                amount = Money(amount=settings.MOVIE_PRICE)
                transaction_id = await self.payment_service.charge(amount, payment_method, payment_details)

                purchase = Purchase.start(
                    user_id=user_id,
                    movie_id=movie_id,
                    amount=amount,
                    payment_method=payment_method,
                    movie_title=movie.title
                )
                purchase.complete(transaction_id)

                # Raises AlreadyPurchased if another process won the race
                purchase = await self.unit_of_work.purchases.add(purchase)
                await self.unit_of_work.commit()

        for event in purchase.get_events():
            logger.info("Domain event: %s", event)
        logger.info("User %s purchased movie %s", user.username, movie_id.value)
        return purchase


class ListPurchasesUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId) -> List[Purchase]:
        async with self.unit_of_work:
            return await self.unit_of_work.purchases.get_by_user_id(user_id)


class ListPaymentMethodsUseCase:

    def __init__(self, payment_service: PaymentService):
        self.payment_service = payment_service

    async def execute(self) -> List[Dict]:
        return self.payment_service.get_payment_methods()
