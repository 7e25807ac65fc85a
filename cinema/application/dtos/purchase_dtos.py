"""Purchase DTOs for API requests and responses"""

from pydantic import BaseModel, Field
from typing import Optional, Dict
from datetime import datetime
from decimal import Decimal

from ...domain.enums import PaymentMethod, PurchaseStatus


class PurchaseCreateDTO(BaseModel):
    """Request DTO for buying a movie"""
    movie_id: int = Field(..., gt=0)
    payment_method: PaymentMethod

    # Payment details, passed to the processor and never persisted
    card_number: Optional[str] = Field(default=None, repr=False)
    card_expiry: Optional[str] = Field(default=None, repr=False)
    card_cvv: Optional[str] = Field(default=None, repr=False)
    card_holder_name: Optional[str] = None

    def payment_details(self) -> Dict[str, Optional[str]]:
        return {
            "card_number": self.card_number,
            "card_expiry": self.card_expiry,
            "card_cvv": self.card_cvv,
            "card_holder_name": self.card_holder_name,
        }


class PurchaseResponseDTO(BaseModel):
    """Response DTO for purchase data"""
    id: int
    user_id: int
    movie_id: int
    movie_title: Optional[str] = None
    amount: Decimal
    currency: str
    payment_method: PaymentMethod
    transaction_id: Optional[str] = None
    status: PurchaseStatus
    purchase_date: datetime
    completed_date: Optional[datetime] = None

    @classmethod
    def from_entity(cls, purchase):
        """Convert domain entity to DTO"""
        return cls(
            id=purchase.id.value,
            user_id=purchase.user_id.value,
            movie_id=purchase.movie_id.value,
            movie_title=purchase.movie_title,
            amount=purchase.amount.amount,
            currency=purchase.amount.currency,
            payment_method=purchase.payment_method,
            transaction_id=purchase.transaction_id,
            status=purchase.status,
            purchase_date=purchase.purchase_date,
            completed_date=purchase.completed_date
        )


class PaymentMethodDTO(BaseModel):
    code: str
    name: str
    description: str
    enabled: bool
