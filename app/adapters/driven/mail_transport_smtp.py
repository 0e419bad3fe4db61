import logging
import smtplib
from email.mime.text import MIMEText
from email.utils import parseaddr
from infra.settings import settings
from app.domain.ports import MailTransport

logger = logging.getLogger(__name__)

def _connect() -> smtplib.SMTP:
    if settings.EMAIL_USE_SSL:
        client = smtplib.SMTP_SSL(settings.EMAIL_HOST, settings.EMAIL_PORT, timeout=settings.SMTP_CONNECT_TIMEOUT)
    else:
        client = smtplib.SMTP(settings.EMAIL_HOST, settings.EMAIL_PORT, timeout=settings.SMTP_CONNECT_TIMEOUT)
        if settings.EMAIL_USE_STARTTLS:
            client.ehlo()
            try:
                client.starttls(); client.ehlo()
            except (smtplib.SMTPException, RuntimeError) as e:
                logger.warning("STARTTLS unavailable on %s, continuing in plain text: %s", settings.EMAIL_HOST, e)
    if settings.EMAIL_USER and settings.EMAIL_PASS:
        client.login(settings.EMAIL_USER, settings.EMAIL_PASS)
    client.timeout = settings.SMTP_OP_TIMEOUT
    return client

def _as_mime(to: str, subject: str, body: str, from_header: str) -> MIMEText:
    m = MIMEText(body, "plain", "utf-8")
    m["Subject"] = subject
    m["From"] = from_header
    m["To"] = to
    return m

class SmtpMailTransport(MailTransport):
    """One connection per message; no client is cached between requests."""

    def send(self, to: str, subject: str, body: str, from_header: str) -> bool:
        mime = _as_mime(to, subject, body, from_header)
        envelope_from = parseaddr(from_header)[1] or from_header
        try:
            client = _connect()
        except (smtplib.SMTPException, OSError) as e:
            logger.warning("Could not connect to %s:%s: %s", settings.EMAIL_HOST, settings.EMAIL_PORT, e)
            return False
        try:
            client.sendmail(envelope_from, [to], mime.as_string())
        except (smtplib.SMTPException, OSError, ValueError) as e:
            logger.warning("Failed to send %r to %s: %s", subject, to, e)
            return False
        finally:
            try:
                client.quit()
            except (smtplib.SMTPException, OSError):
                pass
        return True
