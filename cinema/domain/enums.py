"""
Domain Enums - Business domain enumerations
"""

from enum import Enum


class RoleName(str, Enum):
    USER = "ROLE_USER"
    MODERATOR = "ROLE_MODERATOR"
    ADMIN = "ROLE_ADMIN"


class VerificationChannel(str, Enum):
    EMAIL = "EMAIL"
    MOBILE = "MOBILE"

    @classmethod
    def from_request(cls, value: str) -> "VerificationChannel":
        """Anything that is not "email" selects the mobile channel"""
        return cls.EMAIL if value.strip().lower() == "email" else cls.MOBILE


class PurchaseStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    PAYPAL = "PAYPAL"
    APPLE_PAY = "APPLE_PAY"
    GOOGLE_PAY = "GOOGLE_PAY"
