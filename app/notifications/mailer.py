import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from string import Template
from typing import Optional

from loguru import logger

from app.config import settings


TEMPLATES = {
    "verify_email": Template(
        "<p>Hello $username,</p>"
        "<p>Confirm your email address with the code below:</p>"
        "<p><strong>$token</strong></p>"
        '<p>Or open <a href="$link">$link</a>.</p>'
        "<p>The code expires on $expires_at (UTC).</p>"
    ),
}


@dataclass
class SendResult:
    success: bool
    error: Optional[str] = None


class SmtpMailer:
    """Fire-and-forget delivery over SMTP. Never raises; reports failure in the result."""

    def __init__(
        self,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender: str = "no-reply@ledger.local",
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender

    def render(self, template: str, data: dict) -> str:
        if template not in TEMPLATES:
            raise KeyError(f"Unknown email template: {template}")
        return TEMPLATES[template].safe_substitute(data)

    def send(self, to: str, template: str, data: dict) -> SendResult:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = data.get("subject", "Ledger notification")
        message.set_content(self.render(template, data), subtype="html")

        try:
            with smtplib.SMTP(self.host, self.port, timeout=10) as smtp:
                smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password or "")
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning(f"Email '{template}' to {to} failed: {exc}")
            return SendResult(success=False, error=str(exc))

        logger.info(f"Email '{template}' sent to {to}")
        return SendResult(success=True)


def get_mailer() -> SmtpMailer:
    return SmtpMailer(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASS,
        sender=settings.EMAIL_FROM,
    )
