"""Email service for sending one-time codes via SMTP."""

import re
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any

from django.conf import settings
from django.template.loader import render_to_string

import structlog

from relay.constants import EMAIL_PATTERN

logger = structlog.get_logger(__name__)


def is_valid_email(email: str) -> bool:
    """Check an address against the accepted email format."""
    return bool(re.match(EMAIL_PATTERN, email or ""))


class EmailService:
    """Service for sending emails via SMTP.

    Renders Django templates to HTML, derives a plain text part, and
    delivers both as one multipart message.
    """

    def __init__(self) -> None:
        """Initialize email service with SMTP configuration."""
        self.smtp_host = settings.EMAIL_HOST
        self.smtp_port = settings.EMAIL_PORT
        self.smtp_user = settings.EMAIL_HOST_USER
        self.smtp_password = settings.EMAIL_HOST_PASSWORD
        self.use_tls = settings.EMAIL_USE_TLS
        self.from_email = settings.DEFAULT_FROM_EMAIL

    def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        from_email: str | None = None,
    ) -> bool:
        """Send an email via SMTP.

        Args:
            to_email: Recipient email address
            subject: Email subject line
            html_content: HTML email content
            from_email: Sender email (defaults to DEFAULT_FROM_EMAIL)

        Returns:
            True once the SMTP server accepted the message

        Raises:
            ValueError: If email address is invalid
            smtplib.SMTPException: If SMTP operation fails
            OSError: If the SMTP server cannot be reached
        """
        if not is_valid_email(to_email):
            raise ValueError(f"Invalid email address: {to_email}")

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = from_email or self.from_email
        msg["To"] = to_email
        msg.attach(MIMEText(self._html_to_plain(html_content), "plain"))
        msg.attach(MIMEText(html_content, "html"))

        try:
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=30) as server:
                if self.use_tls:
                    server.starttls()
                if self.smtp_user and self.smtp_password:
                    server.login(self.smtp_user, self.smtp_password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                "email_send_failed",
                to_email=to_email,
                subject=subject,
                error=str(e),
            )
            raise

        logger.info("email_sent", to_email=to_email, subject=subject)
        return True

    def send_template_email(
        self,
        to_email: str,
        subject: str,
        template_name: str,
        context: dict[str, Any] | None = None,
        from_email: str | None = None,
    ) -> bool:
        """Send an email rendered from a Django template.

        Args:
            to_email: Recipient email address
            subject: Email subject line
            template_name: Template path (e.g., 'emails/otp_code.html')
            context: Template context variables
            from_email: Sender email (defaults to DEFAULT_FROM_EMAIL)

        Raises:
            ValueError: If email address is invalid
            smtplib.SMTPException: If SMTP operation fails
            django.template.TemplateDoesNotExist: If template not found
        """
        html_content = render_to_string(template_name, context or {})
        return self.send_email(
            to_email=to_email,
            subject=subject,
            html_content=html_content,
            from_email=from_email,
        )

    def _html_to_plain(self, html: str) -> str:
        text = re.sub(r"<(style|head)[^>]*>.*?</\1>", "", html, flags=re.S | re.I)
        text = re.sub(r"<[^>]+>", "", text)
        for entity, char in (
            ("&nbsp;", " "),
            ("&lt;", "<"),
            ("&gt;", ">"),
            ("&quot;", '"'),
            ("&#x27;", "'"),
            ("&amp;", "&"),
        ):
            text = text.replace(entity, char)
        text = re.sub(r"\n\s*\n", "\n\n", text)
        return text.strip()
