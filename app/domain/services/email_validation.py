import logging
import email_validator
from email_validator import EmailNotValidError, validate_email
from app.domain.entities import ValidationResult

logger = logging.getLogger(__name__)

# Dotted names under these are ordinary syntax; no deliverability is checked here.
for _reserved in ("local", "test", "invalid"):
    if _reserved in email_validator.SPECIAL_USE_DOMAIN_NAMES:
        email_validator.SPECIAL_USE_DOMAIN_NAMES.remove(_reserved)


def validate_address(address: str) -> ValidationResult:
    """Syntax only: ASCII, one ``@``, a local part and a dotted domain. No DNS lookups."""
    if not address or not address.isascii():
        return ValidationResult.INVALID
    try:
        result = validate_email(
            address,
            allow_smtputf8=False,
            check_deliverability=False,
            globally_deliverable=False,
        )
    except EmailNotValidError as e:
        logger.debug("Rejected address %r: %s", address, e)
        return ValidationResult.INVALID
    if "." not in result.ascii_domain:
        logger.debug("Rejected address %r: domain has no dot", address)
        return ValidationResult.INVALID
    return ValidationResult.VALID
