"""SMTP mail delivery."""

import logging
import smtplib
from email.header import Header
from email.mime.text import MIMEText
from email.utils import formatdate

from pwnotify.models.message import Message

from .base import MailDeliveryError, MailSink, TransportUnavailableError

logger = logging.getLogger(__name__)


def build_mime(message: Message, charset: str = "utf-8") -> MIMEText:
    """Build a plain-text MIME message."""
    msg = MIMEText(message.body, _charset=charset)
    msg["Subject"] = Header(message.subject.strip(), charset)
    msg["From"] = message.sender.strip()
    msg["To"] = message.recipient.strip()
    msg["Date"] = formatdate(localtime=True)
    return msg


class SmtpMailSink(MailSink):
    """Sends messages through a plain SMTP relay, one connection per message."""

    def __init__(self, host: str, port: int = 25, timeout: float = 30):
        self.host = host
        self.port = port
        self.timeout = timeout

    def check(self) -> None:
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                smtp.noop()
        except (smtplib.SMTPException, OSError) as e:
            raise TransportUnavailableError(
                f"SMTP server {self.host}:{self.port} is unreachable: {e}"
            ) from e
        logger.info("SMTP server %s:%d is reachable", self.host, self.port)

    def send(self, message: Message) -> None:
        msg = build_mime(message)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                refused = smtp.sendmail(message.sender, [message.recipient], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(f"Could not send mail to {message.recipient}: {e}") from e
        if refused:
            raise MailDeliveryError(f"Recipient refused: {refused}")
        logger.debug("Sent '%s' to %s", message.subject, message.recipient)
