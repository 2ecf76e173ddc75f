"""Per-run outcome reporting."""

import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional

from pwnotify.models.outcome_record import OutcomeRecord
from pwnotify.storage.report_file import REPORT_HEADER, ReportFile

logger = logging.getLogger(__name__)


class RunReporter:
    """
    Collects one outcome per processed account.

    Outcomes are kept in memory in the order they were recorded and
    written to the report file as they arrive.
    """

    def __init__(self, report_path: Path, report_file: Optional[ReportFile] = None):
        """
        Initialize reporter.

        Args:
            report_path: Location of the report file
            report_file: Optional pre-built ReportFile (used in tests)
        """
        self.report_file = report_file or ReportFile(report_path)
        self._outcomes: List[OutcomeRecord] = []
        self._started = False

    @property
    def path(self) -> Path:
        return self.report_file.path

    @property
    def outcomes(self) -> List[OutcomeRecord]:
        return list(self._outcomes)

    def start(self) -> None:
        """Begin a new report, discarding any report from an earlier run."""
        self._outcomes = []
        self.report_file.reset(REPORT_HEADER)
        self._started = True
        logger.debug("Started report at %s", self.path)

    def record(self, outcome: OutcomeRecord) -> None:
        """Append an outcome to memory and to the report file."""
        if not self._started:
            self.start()
        self._outcomes.append(outcome)
        self.report_file.append(outcome.to_row())

    def finalize(self) -> str:
        """Return the full report, header included."""
        lines = [REPORT_HEADER] + [outcome.to_row() for outcome in self._outcomes]
        return "\n".join(lines) + "\n"

    def summary(self) -> Dict[str, int]:
        """Count of accounts per result label, in first-seen order."""
        return dict(Counter(outcome.result.value for outcome in self._outcomes))
