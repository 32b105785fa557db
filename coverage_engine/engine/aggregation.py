from typing import List, Sequence

import pandas as pd

from .calendar import START_MONTH, START_YEAR, month_label
from .schedule import DAYS_PER_MONTH
from .types import DailyPoint, MonthlyPoint

MONTHLY_COLUMNS = [
    "Month Index",
    "Month",
    "Premium Purchases",
    "Cumulative Premium Purchases",
    "Current Cumulative Coverage",
]


def build_monthly_rows(points: Sequence[DailyPoint], timescale_months: float) -> List[MonthlyPoint]:
    """Fold the daily series into 30-day buckets.

    Purchases are summed; cumulative premiums and coverage are the values on
    the last day seen in the bucket. Days past the last bucket are dropped.
    """
    n_months = int(timescale_months)
    purchases = [0.0] * n_months
    cumulative = [0.0] * n_months
    coverage = [0.0] * n_months

    for p in points:
        idx = p.day // DAYS_PER_MONTH
        if idx >= n_months:
            continue
        purchases[idx] += p.purchase
        cumulative[idx] = p.cumulative_premiums
        coverage[idx] = p.coverage

    return [
        MonthlyPoint(month_index=i, purchases=purchases[i],
                     cumulative_premiums=cumulative[i], coverage=coverage[i])
        for i in range(n_months)
    ]


def monthly_frame(
    rows: Sequence[MonthlyPoint],
    start_year: int = START_YEAR,
    start_month: int = START_MONTH,
) -> pd.DataFrame:
    records = [
        {
            "Month Index": r.month_index,
            "Month": month_label(r.month_index, start_year, start_month),
            "Premium Purchases": r.purchases,
            "Cumulative Premium Purchases": r.cumulative_premiums,
            "Current Cumulative Coverage": r.coverage,
        }
        for r in rows
    ]
    return pd.DataFrame(records, columns=MONTHLY_COLUMNS)
