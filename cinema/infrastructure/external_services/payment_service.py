"""Simulated payment processor"""

import logging
import uuid
from typing import Dict, List, Optional

from ...domain.enums import PaymentMethod
from ...domain.value_objects.money import Money


logger = logging.getLogger(__name__)


AVAILABLE_PAYMENT_METHODS: List[Dict] = [
    {
        "code": PaymentMethod.CREDIT_CARD.value,
        "name": "Credit Card",
        "description": "Pay with Visa, Mastercard, or American Express",
        "enabled": True,
    },
    {
        "code": PaymentMethod.DEBIT_CARD.value,
        "name": "Debit Card",
        "description": "Pay with your bank debit card",
        "enabled": True,
    },
    {
        "code": PaymentMethod.PAYPAL.value,
        "name": "PayPal",
        "description": "Pay with your PayPal account",
        "enabled": True,
    },
]


class PaymentService:
    """Stands in for a gateway: every charge succeeds with a fresh transaction ID"""

    async def charge(self, amount: Money, payment_method: PaymentMethod, payment_details: Optional[Dict] = None) -> str:
        # Card details are accepted for API compatibility and never stored or logged
        logger.info("Processing payment of %s with method: %s", amount, payment_method.value)

        transaction_id = str(uuid.uuid4())
        logger.info("Payment processed successfully. Transaction ID: %s", transaction_id)
        return transaction_id

    def get_payment_methods(self) -> List[Dict]:
        return [dict(method) for method in AVAILABLE_PAYMENT_METHODS]
