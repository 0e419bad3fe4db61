import logging
from app.domain.entities import SubscriptionRequest, StatusMessage, ValidationResult
from app.domain.services.email_validation import validate_address
from app.domain.services.notification_dispatcher import NotificationDispatcher
from app.domain.services.status_composer import compose_status

logger = logging.getLogger(__name__)

class SubscriptionService:
    def __init__(self, dispatcher: NotificationDispatcher, product: str = "IF97"):
        self._dispatcher = dispatcher
        self._product = product

    def execute(self, data: SubscriptionRequest) -> StatusMessage:
        validation = validate_address(data.address)
        if validation is not ValidationResult.VALID:
            logger.info("Rejected signup with invalid address %r", data.address)
            return compose_status(data, validation, product=self._product)

        outcome = self._dispatcher.dispatch(data)
        status = compose_status(data, validation, outcome, product=self._product)
        logger.info("Signup for %s finished as %s", data.address, status.kind.value)
        return status
