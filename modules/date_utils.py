#!/usr/bin/env python3
"""Utilities for resolving default dates and seasons."""

from datetime import datetime, timezone


def _utc_now(now: datetime | None = None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def today_utc(now: datetime | None = None) -> str:
    """
    Get the current calendar date in UTC.

    Args:
        now: Optional reference time (defaults to the current time)

    Returns:
        Date string in YYYY-MM-DD format

    Examples:
        >>> today_utc(datetime(2024, 12, 25, 23, 30, tzinfo=timezone.utc))
        '2024-12-25'
    """
    return _utc_now(now).strftime("%Y-%m-%d")


def current_season_year(now: datetime | None = None) -> str:
    """
    Get the current calendar year, used as the default standings season.

    Args:
        now: Optional reference time (defaults to the current time)

    Returns:
        Four digit year string, e.g. '2024'
    """
    return str(_utc_now(now).year)
