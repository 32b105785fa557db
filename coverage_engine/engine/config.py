from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple
import json

from .errors import UnknownConfigKey
from .types import SimulationConfig

# JSON key -> dataclass field
KEYS: Dict[str, str] = {
    "timescaleMonths": "timescale_months",
    "premiumValue": "premium_value",
    "purchaseCadenceDays": "purchase_cadence_days",
    "policyDurationDays": "policy_duration_days",
    "bootstrapFunding": "bootstrap_funding",
    "premiumCostPct": "premium_cost_pct",
}

BOUNDS: Dict[str, Tuple[float, float]] = {
    "timescale_months": (12, 60),
    "premium_value": (1_000, 500_000),
    "purchase_cadence_days": (1, 365),
    "policy_duration_days": (1, 365),
    "bootstrap_funding": (0, 500_000),
    "premium_cost_pct": (1, 30),
}

STEPS: Dict[str, float] = {
    "timescale_months": 1,
    "premium_value": 1_000,
    "purchase_cadence_days": 1,
    "policy_duration_days": 1,
    "bootstrap_funding": 1_000,
    "premium_cost_pct": 0.5,
}

INT_FIELDS = frozenset({"timescale_months", "purchase_cadence_days", "policy_duration_days"})

DEFAULTS: Dict[str, Any] = asdict(SimulationConfig())


def _coerce(name: str, value: Any) -> Any:
    # Whole floats from JSON become ints; anything else is left for validation.
    if name in INT_FIELDS and isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def config_from_dict(data: Mapping[str, Any]) -> SimulationConfig:
    """Build a config from camelCase (JSON) or snake_case keys.

    Missing keys fall back to `DEFAULTS`.
    """
    known = set(KEYS.values())
    values = dict(DEFAULTS)
    for key, value in data.items():
        name = KEYS.get(key, key)
        if name not in known:
            raise UnknownConfigKey(key)
        values[name] = _coerce(name, value)
    return SimulationConfig(**values)


def config_to_dict(config: SimulationConfig) -> Dict[str, Any]:
    """camelCase mapping, the inverse of `config_from_dict`."""
    by_field = {v: k for k, v in KEYS.items()}
    return {by_field[f.name]: getattr(config, f.name) for f in fields(config)}


def read_config_file(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_simulation_config(path: Path) -> SimulationConfig:
    return config_from_dict(read_config_file(path))


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def clamp_config(config: SimulationConfig) -> SimulationConfig:
    """Pull every field back into its documented range."""
    changes = {}
    for name, (lo, hi) in BOUNDS.items():
        value = clamp(getattr(config, name), lo, hi)
        changes[name] = int(value) if name in INT_FIELDS else float(value)
    return replace(config, **changes)
