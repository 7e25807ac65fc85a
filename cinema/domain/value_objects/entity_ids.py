"""Entity ID value objects"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("User ID must be a positive integer")


@dataclass(frozen=True)
class MovieId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("Movie ID must be a positive integer")


@dataclass(frozen=True)
class PurchaseId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("Purchase ID must be a positive integer")


@dataclass(frozen=True)
class VerificationId:
    value: int
