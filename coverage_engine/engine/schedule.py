import math

DAYS_PER_MONTH = 30


def total_days(timescale_months: float) -> int:
    """Simulated horizon in days; halves round up."""
    return int(math.floor(timescale_months * DAYS_PER_MONTH + 0.5))


def purchase_days(cadence_days: int, horizon_days: int) -> frozenset:
    """Every positive multiple of the cadence up to and including the horizon.

    Day 0 is never a regular purchase day.
    """
    return frozenset(range(cadence_days, horizon_days + 1, cadence_days))
