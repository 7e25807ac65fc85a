"""Purchase domain events"""

from dataclasses import dataclass

from ..value_objects.money import Money
from ..value_objects.entity_ids import UserId, MovieId


@dataclass(frozen=True)
class PurchaseCompleted:
    user_id: UserId
    movie_id: MovieId
    amount: Money
    transaction_id: str
