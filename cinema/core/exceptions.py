"""Domain exceptions raised by the use cases and translated at the API boundary"""

from typing import Optional, List


class DomainError(Exception):
    """Base class for workflow failures that map onto an HTTP status"""

    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def extra(self) -> dict:
        """Additional fields included in the error response"""
        return {}


class AlreadyExists(DomainError):
    status_code = 409
    default_message = "Resource already exists"


class InvalidCredentials(DomainError):
    status_code = 401
    default_message = "Invalid username or password"


class InvalidToken(DomainError):
    status_code = 401
    default_message = "Invalid refresh token"


class UnverifiedAccount(DomainError):
    status_code = 403
    default_message = "Account is not verified"

    def __init__(self, unverified: List[str], message: Optional[str] = None):
        self.unverified = list(unverified)
        super().__init__(message)

    def extra(self) -> dict:
        return {"unverified": self.unverified}


class PaymentBlocked(DomainError):
    status_code = 403
    default_message = "Both email and mobile number must be verified to make purchases"


class NotFound(DomainError):
    status_code = 404
    default_message = "Resource not found"


class InvalidVerification(DomainError):
    status_code = 400
    default_message = "Invalid or expired verification code"

    def __init__(self, message: Optional[str] = None, expired: bool = False):
        self.expired = expired
        super().__init__(message)

    def extra(self) -> dict:
        return {"expired": self.expired}


class AlreadyPurchased(DomainError):
    status_code = 409
    default_message = "You have already purchased this movie"


class ConfigurationFault(DomainError):
    """Operator error, e.g. reference data that was never seeded"""

    status_code = 500
    default_message = "Server is misconfigured"
