"""Maintenance interval vocabulary and day counts."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

INTERVAL_DAYS = {
    "1 week": 7,
    "2 weeks": 14,
    "1 month": 30,
    "3 months": 90,
    "6 months": 180,
    "1 year": 365,
}

INTERVAL_LABELS = tuple(INTERVAL_DAYS)

# Unrecognized labels fall back to a month
DEFAULT_INTERVAL_DAYS = 30


def is_known_interval(label: Optional[str]) -> bool:
    """Check if a label is one of the enumerated interval choices."""
    return label in INTERVAL_DAYS


def resolve_interval_days(label: Optional[str]) -> int:
    """Day count for an interval label, 30 for anything unrecognized."""
    days = INTERVAL_DAYS.get(label)
    if days is None:
        logger.debug("Unknown interval %r, using %d days", label, DEFAULT_INTERVAL_DAYS)
        return DEFAULT_INTERVAL_DAYS
    return days
