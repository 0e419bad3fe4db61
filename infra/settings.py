import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass(frozen=True)
class Settings:
    # Mailing list
    PRODUCT_NAME: str = os.getenv("PRODUCT_NAME", "IF97")
    LIST_OWNER_MAILBOX: str = os.getenv("LIST_OWNER_MAILBOX", "if97@hummeling.com")
    SENDER_MAILBOX: str = os.getenv("SENDER_MAILBOX", "engineering@hummeling.com")

    # SMTP
    EMAIL_HOST: str = os.getenv("EMAIL_HOST", "localhost")
    EMAIL_PORT: int = int(os.getenv("EMAIL_PORT", "25"))
    EMAIL_USER: str | None = os.getenv("EMAIL_USER")
    EMAIL_PASS: str | None = os.getenv("EMAIL_PASS")
    EMAIL_USE_SSL: bool = os.getenv("EMAIL_USE_SSL", "false").lower() == "true"
    EMAIL_USE_STARTTLS: bool = os.getenv("EMAIL_USE_STARTTLS", "false").lower() == "true"

    SMTP_CONNECT_TIMEOUT: float = float(os.getenv("SMTP_CONNECT_TIMEOUT", "7"))
    SMTP_OP_TIMEOUT: float = float(os.getenv("SMTP_OP_TIMEOUT", "10"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def SUBJECT(self) -> str:
        return f"{self.PRODUCT_NAME} mailing list"

settings = Settings()
