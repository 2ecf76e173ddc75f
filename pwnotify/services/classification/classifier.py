"""Password expiration classification."""

import logging
from datetime import datetime
from enum import Enum

from pwnotify.config.run_config import RunConfig
from pwnotify.models.account_record import AccountRecord
from pwnotify.models.disposition import Disposition, DispositionKind
from pwnotify.utils.time_utils import to_datetime, whole_days_between

logger = logging.getLogger(__name__)

NOON = 12


class PartOfDay(Enum):
    """Which warning window applies to a run."""

    MORNING = "morning"
    AFTERNOON = "afternoon"


def part_of_day_for(now: datetime) -> PartOfDay:
    """Afternoon from 12:00 local time onwards, morning before."""
    return PartOfDay.AFTERNOON if now.hour >= NOON else PartOfDay.MORNING


def select_threshold(config: RunConfig, part_of_day: PartOfDay) -> int:
    """Upper threshold in the afternoon, lower threshold in the morning."""
    return config.threshold_for(part_of_day is PartOfDay.AFTERNOON)


def days_to_expiry(account: AccountRecord, config: RunConfig, now: datetime) -> int:
    """
    Days left before the account's password reaches the policy age.

    Raises:
        InvalidTimestampError: If the password-last-set value is unusable
    """
    last_set = to_datetime(account.password_last_set)
    return config.password_policy_days - whole_days_between(last_set, now)


def classify(
    account: AccountRecord,
    config: RunConfig,
    now: datetime,
    part_of_day: PartOfDay,
) -> Disposition:
    """
    Decide what to do with one account.

    Rules are checked in this order, first match wins:

    1. account is on the exclusion list
    2. account is not a normal account with an expiring password
    3. expiry is further away than the selected threshold
    4. otherwise the user is notified (also when already expired)

    Raises:
        InvalidTimestampError: If the password-last-set value is unusable
    """
    days = days_to_expiry(account, config, now)
    threshold = select_threshold(config, part_of_day)

    if account.account_name in config.exclusions:
        kind = DispositionKind.EXCLUDED_BY_LIST
    elif not account.is_normal_account:
        kind = DispositionKind.EXCLUDED_BY_ACCOUNT_STATE
    elif days > threshold:
        kind = DispositionKind.OUTSIDE_THRESHOLD
    else:
        kind = DispositionKind.NOTIFY

    logger.debug(
        "%s: %d days to expiry, threshold %d -> %s",
        account.account_name,
        days,
        threshold,
        kind.value,
    )
    return Disposition(kind=kind, days_to_expiry=days)
