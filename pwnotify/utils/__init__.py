"""Utility functions"""

from .time_utils import (
    InvalidTimestampError,
    filetime_to_datetime,
    local_now,
    to_datetime,
    whole_days_between,
)

__all__ = [
    "InvalidTimestampError",
    "filetime_to_datetime",
    "local_now",
    "to_datetime",
    "whole_days_between",
]
