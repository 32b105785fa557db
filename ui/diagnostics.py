# ui/diagnostics.py
# Pure functions over the daily frame. No I/O side effects.

from typing import List, Optional, Tuple
import pandas as pd

DAY_COL = "Day"
PURCHASE_COL = "Purchase"
ACTIVE_COL = "Active Premiums"
COVERAGE_COL = "Coverage"


def first_purchase(df: pd.DataFrame) -> Optional[Tuple[int, float]]:
    """Return (day, amount) of the first purchase row, else None."""
    mask = df[PURCHASE_COL].astype(float) > 0
    if not mask.any():
        return None
    row = df.loc[mask.idxmax()]
    return int(row[DAY_COL]), float(row[PURCHASE_COL])


def first_expiry(df: pd.DataFrame) -> Optional[int]:
    """First day on which a purchase drops out of the active set."""
    purchased = df[PURCHASE_COL].astype(float)
    active = df[ACTIVE_COL].astype(float)
    expected = active.shift(1, fill_value=0.0) + purchased
    mask = active < expected - 1e-9
    if not mask.any():
        return None
    return int(df.loc[mask.idxmax(), DAY_COL])


def peak_coverage(df: pd.DataFrame) -> Tuple[int, float]:
    """(day, coverage) of the first maximum."""
    idx = df[COVERAGE_COL].astype(float).idxmax()
    return int(df.loc[idx, DAY_COL]), float(df.loc[idx, COVERAGE_COL])


def lapsed_days(df: pd.DataFrame) -> List[int]:
    """Days after the first purchase on which nothing is active."""
    fp = first_purchase(df)
    if fp is None:
        return []
    after = df[df[DAY_COL] > fp[0]]
    return [int(d) for d in after.loc[after[ACTIVE_COL].astype(float) <= 0.0, DAY_COL]]
