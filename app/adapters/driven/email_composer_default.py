from infra.settings import settings
from app.domain.entities import SubscriptionRequest, EmailMessage
from app.domain.ports import EmailComposer

CONFIRMATION_TEMPLATE = (
    "Dear {name},\n"
    "\n"
    "Thank you for your interest in {product} Java library!\n"
    "You've submitted your email address to the mailing list.\n"
    "Send us a message when you want to be removed.\n"
    "\n"
    "Kind regards,\n"
    "\n"
    "Ralph Hummeling\n"
    "Hummeling Engineering BV\n"
    "www.hummeling.com"
)

class DefaultEmailComposer(EmailComposer):
    def compose_list_add(self, data: SubscriptionRequest) -> EmailMessage:
        return EmailMessage(
            to=settings.LIST_OWNER_MAILBOX,
            subject=settings.SUBJECT,
            text=data.user,
            sender=settings.SENDER_MAILBOX,
        )

    def compose_confirmation(self, data: SubscriptionRequest) -> EmailMessage:
        return EmailMessage(
            to=data.address,
            subject=settings.SUBJECT,
            text=CONFIRMATION_TEMPLATE.format(name=data.name, product=settings.PRODUCT_NAME),
            sender=settings.SENDER_MAILBOX,
        )
