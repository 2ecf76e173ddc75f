"""Abstract interface for mail delivery."""

from abc import ABC, abstractmethod

from pwnotify.models.message import Message


class MailTransportError(Exception):
    """Base exception for mail transport errors."""

    pass


class TransportUnavailableError(MailTransportError):
    """Raised when the mail server cannot be reached."""

    pass


class MailDeliveryError(MailTransportError):
    """Raised when a single message could not be delivered."""

    pass


class MailSink(ABC):
    """Accepts rendered messages for delivery."""

    @abstractmethod
    def check(self) -> None:
        """
        Verify the transport is reachable.

        Raises:
            TransportUnavailableError: If the mail server cannot be reached
        """
        pass

    @abstractmethod
    def send(self, message: Message) -> None:
        """
        Deliver one message.

        Raises:
            MailDeliveryError: If the message was not accepted
        """
        pass
