"""Data models for password expiration runs"""

from .account_record import AccountRecord, NORMAL_ACCOUNT
from .disposition import Disposition, DispositionKind
from .message import Message
from .outcome_record import OutcomeRecord, ResultLabel

__all__ = [
    "AccountRecord",
    "NORMAL_ACCOUNT",
    "Disposition",
    "DispositionKind",
    "Message",
    "OutcomeRecord",
    "ResultLabel",
]
