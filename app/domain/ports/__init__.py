from abc import ABC, abstractmethod
from app.domain.entities import SubscriptionRequest, EmailMessage

class MailTransport(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, body: str, from_header: str) -> bool:
        """Delivers one message. Failures are reported as False, never raised."""
        ...

class EmailComposer(ABC):
    @abstractmethod
    def compose_list_add(self, data: SubscriptionRequest) -> EmailMessage:
        ...

    @abstractmethod
    def compose_confirmation(self, data: SubscriptionRequest) -> EmailMessage:
        ...
