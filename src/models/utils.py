"""Utility functions shared by the estimate calculator and advisory generator."""

import math
from datetime import date
from typing import Iterable, Optional


def sail_month(sail_date: Optional[date]) -> Optional[int]:
    """Return the calendar month (1-12) of a sail date, or None if absent."""
    if sail_date is None:
        return None
    return sail_date.month


def seasonal_factor(
    sail_date: Optional[date],
    season_months: Iterable[int],
    factor: float
) -> float:
    """Pricing multiplier for a sail date.

    Args:
        sail_date: Optional departure date
        season_months: Months (1-12) that carry the seasonal factor
        factor: Multiplier applied inside the season

    Returns:
        ``factor`` when the date falls in one of ``season_months``, else 1.0.
        An absent date is always 1.0.
    """
    month = sail_month(sail_date)
    if month is not None and month in set(season_months):
        return factor
    return 1.0


def is_peak_advisory_month(sail_date: Optional[date], peak_months: Iterable[int]) -> bool:
    """Whether a sail date falls in the peak-season advisory band."""
    month = sail_month(sail_date)
    return month is not None and month in set(peak_months)


def excess_guests(passenger_count: int, capacity: int) -> int:
    """Number of guests above the vessel's rated capacity (never negative)."""
    return max(passenger_count - capacity, 0)


def round_half_up(value: float, unit: int = 10) -> int:
    """Round to the nearest multiple of ``unit``, halves rounding up.

    Python's built-in round() uses banker's rounding, which would send
    6145 to 6140; this always sends it to 6150.

    Example:
        >>> round_half_up(5508)
        5510
        >>> round_half_up(5505)
        5510
    """
    return int(math.floor(value / unit + 0.5)) * unit
