"""Directory account data model."""

from dataclasses import dataclass
from typing import Any

# userAccountControl value of an enabled account whose password expires
NORMAL_ACCOUNT = 512


@dataclass(frozen=True)
class AccountRecord:
    """
    One user entry as returned by the directory.

    Attributes:
        account_name: Logon name, unique within a run
        display_name: Human readable name used in notifications
        mail_address: Address notifications are sent to
        password_last_set: When the password was last changed. Usually a
            datetime, but the raw directory value is kept as-is when it
            could not be converted.
        account_control_flags: Bit-encoded account state
    """

    account_name: str
    display_name: str
    mail_address: str
    password_last_set: Any
    account_control_flags: int

    def __post_init__(self):
        """Validate fields after initialization."""
        if not self.account_name:
            raise ValueError("account_name is required")

    @property
    def is_normal_account(self) -> bool:
        return self.account_control_flags == NORMAL_ACCOUNT
