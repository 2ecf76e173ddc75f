"""Runs one password expiration notification pass."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from pwnotify.config.run_config import RunConfig
from pwnotify.models.account_record import AccountRecord
from pwnotify.models.message import Message
from pwnotify.models.outcome_record import OutcomeRecord, ResultLabel
from pwnotify.services.classification.classifier import PartOfDay, classify, part_of_day_for
from pwnotify.services.directory.base import DirectorySource
from pwnotify.services.mail.base import MailSink
from pwnotify.services.reporting.run_reporter import RunReporter
from pwnotify.services.reporting.template_renderer import render_message
from pwnotify.utils.time_utils import InvalidTimestampError, local_now

logger = logging.getLogger(__name__)


@dataclass
class AccountResult:
    """
    Result of processing one account.

    Attributes:
        outcome: Outcome written to the report
        error: Error that stopped processing, if any
    """

    outcome: OutcomeRecord
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunResult:
    """Result of a complete run."""

    outcomes: List[OutcomeRecord]
    report_path: Path
    summary_sent: bool
    summary_error: Optional[Exception] = None
    failures: List[AccountResult] = field(default_factory=list)


class PasswordExpiryNotifier:
    """
    Notifies users whose passwords are about to expire.

    A run checks that mail and directory are reachable, fetches every
    account once, and then handles accounts one at a time in directory
    order. Every account produces exactly one outcome; a failure for one
    account never stops the run.
    """

    def __init__(
        self,
        config: RunConfig,
        directory: DirectorySource,
        mail: MailSink,
        reporter: Optional[RunReporter] = None,
        clock: Optional[Callable[[], datetime]] = None,
        dry_run: bool = False,
    ):
        """
        Initialize notifier.

        Args:
            config: Run configuration
            directory: Source of accounts
            mail: Mail transport for notifications and the summary
            reporter: Reporter; defaults to one writing config.report_path
            clock: Returns the current local time (default: aware local time)
            dry_run: Render notifications but do not send any mail
        """
        self.config = config
        self.directory = directory
        self.mail = mail
        self.reporter = reporter or RunReporter(config.get_report_path())
        self.clock = clock or local_now
        self.dry_run = dry_run

    def preflight(self) -> None:
        """
        Check mail transport and directory before any work is done.

        Raises:
            TransportUnavailableError: If the mail server is unreachable
            DirectorySourceError: If the directory is unreachable
        """
        self.mail.check()
        self.directory.check()

    def run(self) -> RunResult:
        """
        Execute a full run.

        Raises:
            TransportUnavailableError: If the mail server is unreachable
            DirectorySourceError: If the directory cannot be reached or queried
        """
        self.preflight()
        accounts = self.directory.fetch_accounts()
        logger.info("Evaluating %d accounts", len(accounts))

        now = self.clock()
        part_of_day = part_of_day_for(now)
        logger.info(
            "Using %s threshold of %d days",
            part_of_day.value,
            self.config.threshold_for(part_of_day is PartOfDay.AFTERNOON),
        )

        self.reporter.start()
        failures = []
        for account in accounts:
            result = self.process_account(account, now, part_of_day)
            self.reporter.record(result.outcome)
            if not result.ok:
                failures.append(result)

        for label, count in self.reporter.summary().items():
            logger.info("%s: %d", label, count)

        summary_sent, summary_error = self.send_summary()
        return RunResult(
            outcomes=self.reporter.outcomes,
            report_path=self.reporter.path,
            summary_sent=summary_sent,
            summary_error=summary_error,
            failures=failures,
        )

    def process_account(
        self,
        account: AccountRecord,
        now: datetime,
        part_of_day: PartOfDay,
    ) -> AccountResult:
        """Classify one account and notify it if due. Never raises for account data."""
        try:
            disposition = classify(account, self.config, now, part_of_day)
        except InvalidTimestampError as e:
            logger.warning("%s: %s", account.account_name, e)
            return self._failed(account, None, ResultLabel.INVALID_TIMESTAMP, e)

        days = disposition.days_to_expiry
        if not disposition.should_notify:
            return AccountResult(OutcomeRecord(account.account_name, days, disposition.result_label))

        try:
            message = render_message(self.config, account, days)
        except Exception as e:
            logger.warning("%s: could not render notification: %s", account.account_name, e)
            return self._failed(account, days, ResultLabel.RENDER_FAILED, e)

        if self.dry_run:
            logger.info("Dry run, not notifying %s <%s>", account.account_name, message.recipient)
            return AccountResult(OutcomeRecord(account.account_name, days, ResultLabel.DRY_RUN))

        try:
            self.mail.send(message)
        except Exception as e:
            logger.warning("%s: could not send notification: %s", account.account_name, e)
            return self._failed(account, days, ResultLabel.SEND_FAILED, e)

        logger.info("Notified %s (%d days to expiry)", account.account_name, days)
        return AccountResult(OutcomeRecord(account.account_name, days, ResultLabel.NOTIFIED))

    def send_summary(self):
        """
        Mail the report to the administrator.

        Returns:
            Tuple of (sent, error)
        """
        if self.dry_run:
            logger.info("Dry run, report not mailed (see %s)", self.reporter.path)
            return False, None

        message = Message(
            sender=self.config.email_from,
            recipient=self.config.admin_email,
            subject=self.config.admin_subject,
            body=self.reporter.finalize(),
        )
        try:
            self.mail.send(message)
        except Exception as e:
            logger.error("Could not send report to %s: %s", self.config.admin_email, e)
            return False, e

        logger.info("Report sent to %s", self.config.admin_email)
        return True, None

    @staticmethod
    def _failed(account, days, label, error) -> AccountResult:
        return AccountResult(OutcomeRecord(account.account_name, days, label), error)
