"""Purchase repository interface"""

from abc import ABC, abstractmethod
from typing import List

from ..entities.purchase import Purchase
from ..value_objects.entity_ids import UserId, MovieId


class IPurchaseRepository(ABC):

    @abstractmethod
    async def get_by_user_id(self, user_id: UserId) -> List[Purchase]:
        pass

    @abstractmethod
    async def get_by_user_and_movie(self, user_id: UserId, movie_id: MovieId) -> List[Purchase]:
        pass

    @abstractmethod
    async def add(self, purchase: Purchase) -> Purchase:
        pass
