"""Outbound mail over SMTP with STARTTLS."""

import asyncio
import logging
import smtplib
import ssl
from email.mime.text import MIMEText
from typing import Optional

import joinauth.application.interfaces as iapp
import joinauth.infrastructure.exceptions as exc

logger = logging.getLogger('joinauth')


class SMTPMailSender(iapp.IMailSender):
    """Sends plain-text mail through an SMTP relay (Outlook by default)."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        from_email: Optional[str] = None,
        verify_certs: bool = False,
        timeout: float = 30,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email or username or ''
        self.verify_certs = verify_certs
        self.timeout = timeout

    def _tls_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        if not self.verify_certs:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def build_message(self, recipient: str, subject: str, body: str) -> MIMEText:
        msg = MIMEText(body, "plain", "utf-8")
        msg["Subject"] = subject
        msg["From"] = self.from_email
        msg["To"] = recipient
        return msg

    def _send_blocking(self, recipient: str, subject: str, body: str) -> None:
        msg = self.build_message(recipient, subject, body)
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            server.starttls(context=self._tls_context())
            if self.username and self.password:
                server.login(self.username, self.password)
            server.send_message(msg)

    async def send(self, recipient: str, subject: str, body: str) -> None:
        try:
            await asyncio.to_thread(self._send_blocking, recipient, subject, body)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"[MAIL] Failed to send mail to {recipient}: {e}")
            raise exc.MailDeliveryError(f"Failed to send mail to {recipient}") from e
        logger.debug(f"[MAIL] Mail '{subject}' sent to {recipient}")
