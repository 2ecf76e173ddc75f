"""Shared fixtures and collaborator fakes."""

from datetime import datetime, timedelta

import pytest

from pwnotify.config.run_config import RunConfig
from pwnotify.models.account_record import AccountRecord, NORMAL_ACCOUNT
from pwnotify.services.directory.base import DirectorySource, DirectorySourceError
from pwnotify.services.mail.base import MailDeliveryError, MailSink, TransportUnavailableError

NOW = datetime(2025, 3, 10, 9, 30, 0)


class FakeDirectory(DirectorySource):
    """In-memory directory that records how it was used."""

    def __init__(self, accounts=(), reachable=True, fail_fetch=False):
        self.accounts = list(accounts)
        self.reachable = reachable
        self.fail_fetch = fail_fetch
        self.check_calls = 0
        self.fetch_calls = 0

    def check(self):
        self.check_calls += 1
        if not self.reachable:
            raise DirectorySourceError("directory unreachable")

    def fetch_accounts(self):
        self.fetch_calls += 1
        if self.fail_fetch:
            raise DirectorySourceError("query failed")
        return list(self.accounts)


class FakeMail(MailSink):
    """Mail sink that keeps sent messages and can refuse recipients."""

    def __init__(self, reachable=True, refuse=()):
        self.reachable = reachable
        self.refuse = set(refuse)
        self.sent = []
        self.check_calls = 0

    def check(self):
        self.check_calls += 1
        if not self.reachable:
            raise TransportUnavailableError("smtp unreachable")

    def send(self, message):
        if message.recipient in self.refuse:
            raise MailDeliveryError(f"refused {message.recipient}")
        self.sent.append(message)


def make_account(name, days_ago, flags=NORMAL_ACCOUNT, now=NOW, mail=None, display=None):
    """Account whose password was set `days_ago` days before `now`."""
    return AccountRecord(
        account_name=name,
        display_name=display or name.title(),
        mail_address=mail if mail is not None else f"{name}@example.org",
        password_last_set=now - timedelta(days=days_ago),
        account_control_flags=flags,
    )


@pytest.fixture
def config():
    """Run configuration with a 60 day policy and 15/10 day windows."""
    return RunConfig(
        smtp_host="mail.example.org",
        admin_email="admin@example.org",
        password_policy_days=60,
        upper_threshold_days=15,
        lower_threshold_days=10,
        email_from="noreply@example.org",
        email_subject="Password notice for [USERNAME]",
        email_body_template="Dear [USERNAME],\n\tyour password [PASSWORDSTATEMESSAGE].",
        exclusions=frozenset({"svc-backup"}),
    )


@pytest.fixture
def now():
    return NOW
