"""Outgoing email data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    """A rendered email ready to be handed to a mail sink."""

    sender: str
    recipient: str
    subject: str
    body: str

    def __post_init__(self):
        if not self.recipient:
            raise ValueError("recipient is required")
