"""Email service for verification codes"""

import smtplib
import asyncio
import logging
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional

from ...core.config import settings


logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """SMTP delivery failed"""


class EmailService:

    def __init__(self):
        self.enabled = settings.EMAIL_ENABLED
        self.smtp_host = settings.SMTP_HOST
        self.smtp_port = settings.SMTP_PORT
        self.smtp_username = settings.SMTP_USERNAME
        self.smtp_password = settings.SMTP_PASSWORD
        self.smtp_use_tls = settings.SMTP_USE_TLS
        self.from_email = settings.FROM_EMAIL
        self.from_name = settings.FROM_NAME

    async def send_email(self,
                         to_email: str,
                         subject: str,
                         text_content: str,
                         html_content: Optional[str] = None) -> None:
        """Send email with a plain-text body and optional HTML alternative"""
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = f"{self.from_name} <{self.from_email}>"
        msg['To'] = to_email

        msg.attach(MIMEText(text_content, 'plain'))
        if html_content:
            msg.attach(MIMEText(html_content, 'html'))

        if not self.enabled:
            logger.info("Email delivery disabled, skipping '%s' to %s", subject, to_email)
            return

        try:
            await self._send_smtp_email(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(f"Failed to send email to {to_email}: {e}") from e

        logger.info("Email sent to %s: %s", to_email, subject)

    async def _send_smtp_email(self, msg: MIMEMultipart):
        """Send email via SMTP"""
        def send_sync():
            with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
                if self.smtp_use_tls:
                    server.starttls()
                if self.smtp_username:
                    server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

        # Run in thread pool to avoid blocking
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, send_sync)

    async def send_verification_code(self, to_email: str, code: str, expires_in_minutes: int) -> None:
        """Send the email-channel one-time code"""
        subject = "Email Verification Code"
        text_content = (
            f"Your verification code is: {code}"
            f"\nThis code will expire in {expires_in_minutes} minutes."
        )
        html_content = f"""
        <!DOCTYPE html>
        <html>
        <body style="font-family: Arial, sans-serif; color: #333;">
            <h2>Verify your {self.from_name} account</h2>
            <p>Your verification code is:</p>
            <p style="font-size: 28px; letter-spacing: 6px;"><strong>{code}</strong></p>
            <p>This code will expire in {expires_in_minutes} minutes.</p>
            <p>If you did not create an account, you can ignore this email.</p>
        </body>
        </html>
        """
        await self.send_email(to_email, subject, text_content, html_content)
