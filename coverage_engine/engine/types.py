import math
import numbers
from dataclasses import dataclass, fields

import pandas as pd

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class SimulationConfig:
    timescale_months: int = 24
    premium_value: float = 50_000.0
    purchase_cadence_days: int = 30
    policy_duration_days: int = 90
    bootstrap_funding: float = 0.0
    premium_cost_pct: float = 8.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidConfiguration(f.name, value, "must be a number")
            if not math.isfinite(value):
                raise InvalidConfiguration(f.name, value, "must be finite")
            if value < 0:
                raise InvalidConfiguration(f.name, value, "must not be negative")

        for name in ("purchase_cadence_days", "policy_duration_days"):
            value = getattr(self, name)
            if value < 1:
                raise InvalidConfiguration(name, value, "must be at least one day")
            if float(value) != int(value):
                raise InvalidConfiguration(name, value, "must be a whole number of days")


@dataclass(frozen=True)
class ActivePurchase:
    day: int
    amount: float


@dataclass(frozen=True)
class DailyPoint:
    day: int
    purchase: float
    cumulative_premiums: float
    coverage: float
    active_premiums: float


@dataclass(frozen=True)
class MonthlyPoint:
    month_index: int
    purchases: float
    cumulative_premiums: float
    coverage: float


@dataclass
class SimulationResult:
    daily: pd.DataFrame
    monthly: pd.DataFrame
