from typing import Optional
from app.domain.entities import (
    SubscriptionRequest,
    ValidationResult,
    NotificationOutcome,
    StatusKind,
    StatusMessage,
)

INVALID_ADDRESS_TEXT = "You might have submitted an invalid email address."
CONFIRMATION_FAILED_TEXT = "Failure sending confirmation."


def compose_status(
    data: SubscriptionRequest,
    validation: ValidationResult,
    outcome: Optional[NotificationOutcome] = None,
    product: str = "IF97",
) -> StatusMessage:
    """Maps one request's outcome to the text shown above the signup form.

    The text is plain; escaping is left to the page template.
    """
    if validation is not ValidationResult.VALID:
        return StatusMessage(StatusKind.INVALID_ADDRESS, INVALID_ADDRESS_TEXT)
    if outcome is None or not outcome.list_add_sent:
        return StatusMessage(StatusKind.LIST_ADD_FAILED, f"Failure adding {data.user} to mailing list.")
    if not outcome.confirmation_sent:
        return StatusMessage(StatusKind.CONFIRMATION_FAILED, CONFIRMATION_FAILED_TEXT)
    return StatusMessage(StatusKind.SUBSCRIBED, f"{data.user} added to {product} mailing list.")
