"""Mail delivery"""

from .base import MailDeliveryError, MailSink, MailTransportError, TransportUnavailableError
from .smtp_sink import SmtpMailSink

__all__ = [
    "MailDeliveryError",
    "MailSink",
    "MailTransportError",
    "TransportUnavailableError",
    "SmtpMailSink",
]
