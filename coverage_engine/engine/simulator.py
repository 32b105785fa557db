import logging
from collections import deque
from typing import Deque, List, Sequence

import pandas as pd

from .aggregation import build_monthly_rows, monthly_frame
from .calendar import START_MONTH, START_YEAR
from .coverage import coverage_from_premiums
from .schedule import purchase_days, total_days
from .types import ActivePurchase, DailyPoint, SimulationConfig, SimulationResult

logger = logging.getLogger(__name__)

DAILY_COLUMNS = ["Day", "Purchase", "Cumulative Premiums", "Active Premiums", "Coverage"]


def simulate(config: SimulationConfig) -> List[DailyPoint]:
    """Day-by-day premium purchases and the coverage they fund.

    Returns one point per day from 0 to the horizon inclusive. Purchases stay
    active while their age is below the policy duration and expire the day
    the age reaches it.
    """
    horizon = total_days(config.timescale_months)
    scheduled = purchase_days(int(config.purchase_cadence_days), horizon)
    duration = config.policy_duration_days

    cumulative = 0.0
    active_total = 0.0
    active: Deque[ActivePurchase] = deque()
    points: List[DailyPoint] = []

    for day in range(horizon + 1):
        purchase = config.premium_value if day in scheduled else 0.0
        bootstrap = config.bootstrap_funding if day == 0 else 0.0
        total_purchase = purchase + bootstrap
        if total_purchase > 0:
            cumulative += total_purchase
            active_total += total_purchase
            active.append(ActivePurchase(day=day, amount=total_purchase))

        while active and day - active[0].day >= duration:
            expired = active.popleft()
            active_total -= expired.amount

        points.append(DailyPoint(
            day=day,
            purchase=total_purchase,
            cumulative_premiums=cumulative,
            coverage=coverage_from_premiums(active_total, config.premium_cost_pct),
            active_premiums=active_total,
        ))

    logger.debug(
        "simulated %d days, %d scheduled purchases, final coverage %.2f",
        horizon + 1, len(scheduled), points[-1].coverage,
    )
    return points


def daily_frame(points: Sequence[DailyPoint]) -> pd.DataFrame:
    rows = [
        {
            "Day": p.day,
            "Purchase": p.purchase,
            "Cumulative Premiums": p.cumulative_premiums,
            "Active Premiums": p.active_premiums,
            "Coverage": p.coverage,
        }
        for p in points
    ]
    return pd.DataFrame(rows, columns=DAILY_COLUMNS)


def run(
    config: SimulationConfig,
    start_year: int = START_YEAR,
    start_month: int = START_MONTH,
) -> SimulationResult:
    """Simulate and build both the daily and the monthly frame."""
    points = simulate(config)
    months = build_monthly_rows(points, config.timescale_months)
    return SimulationResult(
        daily=daily_frame(points),
        monthly=monthly_frame(months, start_year, start_month),
    )
