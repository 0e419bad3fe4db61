from dataclasses import dataclass
from enum import Enum


class ValidationResult(Enum):
    VALID = "valid"
    INVALID = "invalid"


class StatusKind(Enum):
    INVALID_ADDRESS = "invalid_address"
    LIST_ADD_FAILED = "list_add_failed"
    CONFIRMATION_FAILED = "confirmation_failed"
    SUBSCRIBED = "subscribed"


@dataclass(frozen=True)
class SubscriptionRequest:
    name: str = ""
    address: str = ""

    @property
    def user(self) -> str:
        return f"{self.name} <{self.address}>"


@dataclass(frozen=True)
class NotificationOutcome:
    list_add_sent: bool
    confirmation_sent: bool = False


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    text: str
    sender: str


@dataclass(frozen=True)
class StatusMessage:
    kind: StatusKind
    text: str
