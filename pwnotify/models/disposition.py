"""Classification outcome data model."""

from dataclasses import dataclass
from enum import Enum

from .outcome_record import ResultLabel


class DispositionKind(Enum):
    """How an account was classified."""

    EXCLUDED_BY_LIST = "excluded_by_list"
    EXCLUDED_BY_ACCOUNT_STATE = "excluded_by_account_state"
    OUTSIDE_THRESHOLD = "outside_threshold"
    NOTIFY = "notify"


_LABELS = {
    DispositionKind.EXCLUDED_BY_LIST: ResultLabel.EXCLUDED_BY_LIST,
    DispositionKind.EXCLUDED_BY_ACCOUNT_STATE: ResultLabel.EXCLUDED_BY_ACCOUNT_STATE,
    DispositionKind.OUTSIDE_THRESHOLD: ResultLabel.OUTSIDE_THRESHOLD,
    DispositionKind.NOTIFY: ResultLabel.NOTIFIED,
}


@dataclass(frozen=True)
class Disposition:
    """
    Classification of one account in one run.

    Attributes:
        kind: Which rule matched
        days_to_expiry: Days left before the password expires; zero or
            negative means it has already expired
    """

    kind: DispositionKind
    days_to_expiry: int

    @property
    def should_notify(self) -> bool:
        return self.kind is DispositionKind.NOTIFY

    @property
    def result_label(self) -> ResultLabel:
        return _LABELS[self.kind]
