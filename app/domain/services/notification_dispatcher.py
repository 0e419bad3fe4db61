import logging
from app.domain.entities import SubscriptionRequest, NotificationOutcome, EmailMessage
from app.domain.ports import MailTransport, EmailComposer

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Sends the list-owner notice, then the subscriber confirmation.

    The confirmation is only attempted once the notice went out. Nothing is
    retried and nothing is raised: every send collapses to a bool.
    """

    def __init__(self, transport: MailTransport, composer: EmailComposer):
        self._transport = transport
        self._composer = composer

    def dispatch(self, data: SubscriptionRequest) -> NotificationOutcome:
        if not self._send(self._composer.compose_list_add(data)):
            return NotificationOutcome(list_add_sent=False, confirmation_sent=False)
        confirmation_sent = self._send(self._composer.compose_confirmation(data))
        return NotificationOutcome(list_add_sent=True, confirmation_sent=confirmation_sent)

    def _send(self, message: EmailMessage) -> bool:
        try:
            sent = bool(self._transport.send(message.to, message.subject, message.text, message.sender))
        except Exception:
            logger.exception("Mail transport raised while sending to %s", message.to)
            return False
        if not sent:
            logger.warning("Mail transport failed to send %r to %s", message.subject, message.to)
        return sent
