"""Password expiration classification"""

from .classifier import PartOfDay, classify, days_to_expiry, part_of_day_for, select_threshold

__all__ = ["PartOfDay", "classify", "days_to_expiry", "part_of_day_for", "select_threshold"]
