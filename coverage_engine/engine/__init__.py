"""Premium purchase / coverage simulation engine."""

from .aggregation import build_monthly_rows, monthly_frame
from .config import clamp_config, config_from_dict, config_to_dict, load_simulation_config
from .errors import CoverageModelError, InvalidConfiguration, UnknownConfigKey
from .simulator import daily_frame, run, simulate
from .types import DailyPoint, MonthlyPoint, SimulationConfig, SimulationResult

__all__ = [
    "CoverageModelError",
    "DailyPoint",
    "InvalidConfiguration",
    "MonthlyPoint",
    "SimulationConfig",
    "SimulationResult",
    "UnknownConfigKey",
    "build_monthly_rows",
    "clamp_config",
    "config_from_dict",
    "config_to_dict",
    "daily_frame",
    "load_simulation_config",
    "monthly_frame",
    "run",
    "simulate",
]
