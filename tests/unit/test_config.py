from pathlib import Path

import pytest

from coverage_engine.engine.config import (
    BOUNDS, DEFAULTS, clamp, clamp_config, config_from_dict, config_to_dict, load_simulation_config,
)
from coverage_engine.engine.errors import InvalidConfiguration, UnknownConfigKey
from coverage_engine.engine.types import SimulationConfig

ROOT = Path(__file__).resolve().parents[2]

def test_defaults():
    c = SimulationConfig()
    assert (c.timescale_months, c.premium_value, c.purchase_cadence_days,
            c.policy_duration_days, c.bootstrap_funding, c.premium_cost_pct) == (24, 50_000, 30, 90, 0, 8)
    assert DEFAULTS["policy_duration_days"] == 90

def test_from_dict_accepts_camel_and_snake_keys():
    a = config_from_dict({"timescaleMonths": 36, "premiumCostPct": 5})
    b = config_from_dict({"timescale_months": 36, "premium_cost_pct": 5})
    assert a == b
    assert a.premium_value == DEFAULTS["premium_value"]

def test_from_dict_coerces_whole_float_days():
    c = config_from_dict({"purchaseCadenceDays": 7.0})
    assert c.purchase_cadence_days == 7 and isinstance(c.purchase_cadence_days, int)

def test_from_dict_rejects_unknown_key():
    with pytest.raises(UnknownConfigKey):
        config_from_dict({"premiumValues": 1})

def test_to_dict_round_trips_through_from_dict():
    c = SimulationConfig(timescale_months=48, bootstrap_funding=100_000)
    assert config_from_dict(config_to_dict(c)) == c
    assert set(config_to_dict(c)) == {
        "timescaleMonths", "premiumValue", "purchaseCadenceDays",
        "policyDurationDays", "bootstrapFunding", "premiumCostPct",
    }

def test_load_default_config_file():
    c = load_simulation_config(ROOT / "configs" / "default.json")
    assert c == SimulationConfig()

@pytest.mark.parametrize("field,value", [
    ("premium_value", float("nan")),
    ("bootstrap_funding", float("inf")),
    ("premium_value", -1.0),
    ("premium_cost_pct", -0.5),
    ("timescale_months", -12),
    ("purchase_cadence_days", 0),
    ("policy_duration_days", 0),
    ("purchase_cadence_days", 2.5),
    ("policy_duration_days", True),
    ("premium_value", "50000"),
])
def test_malformed_input_raises(field, value):
    with pytest.raises(InvalidConfiguration) as info:
        SimulationConfig(**{field: value})
    assert info.value.field == field

def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        SimulationConfig(purchase_cadence_days=0)

def test_out_of_range_but_well_formed_is_accepted():
    c = SimulationConfig(timescale_months=100, premium_cost_pct=0)
    assert c.timescale_months == 100

def test_clamp():
    assert clamp(5, 1, 3) == 3
    assert clamp(-5, 1, 3) == 1
    assert clamp(2, 1, 3) == 2

def test_clamp_config_pulls_fields_into_bounds():
    c = clamp_config(SimulationConfig(
        timescale_months=100, premium_value=10, purchase_cadence_days=400,
        policy_duration_days=1000, bootstrap_funding=1e9, premium_cost_pct=0,
    ))
    for name, (lo, hi) in BOUNDS.items():
        assert lo <= getattr(c, name) <= hi
    assert c.timescale_months == 60 and isinstance(c.timescale_months, int)
    assert c.premium_value == 1_000
    assert c.premium_cost_pct == 1

def test_clamp_config_keeps_in_range_values():
    c = SimulationConfig()
    assert clamp_config(c) == c
