"""Business logic services"""

from .classification import PartOfDay, classify, part_of_day_for
from .directory import DirectorySource, DirectorySourceError
from .mail import MailSink, SmtpMailSink
from .orchestrator import AccountResult, PasswordExpiryNotifier, RunResult
from .reporting import RunReporter, render, render_message

__all__ = [
    "PartOfDay",
    "classify",
    "part_of_day_for",
    "DirectorySource",
    "DirectorySourceError",
    "MailSink",
    "SmtpMailSink",
    "AccountResult",
    "PasswordExpiryNotifier",
    "RunResult",
    "RunReporter",
    "render",
    "render_message",
]
