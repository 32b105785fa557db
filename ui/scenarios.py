"""
Scenario helpers for the coverage UI.

`app.py` drives the dashboard through `run_scenario`; the same helpers are
usable from notebooks or other front-ends without touching the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple

import pandas as pd

from coverage_engine.engine.config import clamp_config
from coverage_engine.engine.simulator import run
from coverage_engine.engine.types import SimulationConfig


@dataclass
class ScenarioParams:
    """Named set of overrides applied on top of a base config.

    `None` leaves the base value untouched. With `clamp` set, the result is
    pulled back into the documented input ranges, as the dashboard does.
    """

    name: str = "Base case"
    timescale_months: int | None = None
    premium_value: float | None = None
    purchase_cadence_days: int | None = None
    policy_duration_days: int | None = None
    bootstrap_funding: float | None = None
    premium_cost_pct: float | None = None
    clamp: bool = True

    def apply_overrides(self, config: SimulationConfig) -> SimulationConfig:
        changes = {
            name: value
            for name, value in (
                ("timescale_months", self.timescale_months),
                ("premium_value", self.premium_value),
                ("purchase_cadence_days", self.purchase_cadence_days),
                ("policy_duration_days", self.policy_duration_days),
                ("bootstrap_funding", self.bootstrap_funding),
                ("premium_cost_pct", self.premium_cost_pct),
            )
            if value is not None
        }
        c = replace(config, **changes) if changes else config
        return clamp_config(c) if self.clamp else c


def run_scenario(
    config: SimulationConfig,
    params: ScenarioParams,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Apply `params` to `config`, simulate, and return (daily_df, monthly_df)."""
    result = run(params.apply_overrides(config))
    return result.daily, result.monthly


def summarize_scenario(daily_df: pd.DataFrame) -> Dict[str, Any]:
    """Headline numbers for the KPI strip."""
    if daily_df.empty:
        return {
            "purchases": 0,
            "total_premiums": 0.0,
            "end_coverage": 0.0,
            "peak_coverage": 0.0,
        }

    latest = daily_df.iloc[-1]
    return {
        "purchases": int((daily_df["Purchase"] > 0).sum()),
        "total_premiums": float(latest["Cumulative Premiums"]),
        "end_coverage": float(latest["Coverage"]),
        "peak_coverage": float(daily_df["Coverage"].max()),
    }


__all__ = [
    "ScenarioParams",
    "run_scenario",
    "summarize_scenario",
]
