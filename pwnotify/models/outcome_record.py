"""Per-account outcome data model."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResultLabel(Enum):
    """Result written to the report for one account."""

    EXCLUDED_BY_LIST = "Excluded: Exclusion List"
    EXCLUDED_BY_ACCOUNT_STATE = "Excluded: Account Disabled Or Password Never Expires"
    OUTSIDE_THRESHOLD = "Skipped: Outside Notification Window"
    NOTIFIED = "Notification Sent"
    DRY_RUN = "Dry Run: Notification Not Sent"
    INVALID_TIMESTAMP = "Failed: Invalid Password Timestamp"
    RENDER_FAILED = "Failed: Unable To Render Notification"
    SEND_FAILED = "Failed: Unable To Send Notification"


@dataclass(frozen=True)
class OutcomeRecord:
    """
    Records what happened to one account during a run.

    Attributes:
        account_name: Account the outcome belongs to
        days_to_expiry: Days left before the password expires, or None
            when it could not be computed
        result: Result label
    """

    account_name: str
    days_to_expiry: Optional[int]
    result: ResultLabel

    def to_row(self) -> str:
        """Format as a report line (without line terminator)."""
        days = "" if self.days_to_expiry is None else str(self.days_to_expiry)
        return f"{self.account_name},{days},{self.result.value}"
