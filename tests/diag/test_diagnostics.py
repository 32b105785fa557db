from coverage_engine.engine.simulator import run
from coverage_engine.engine.types import SimulationConfig
from ui.diagnostics import first_expiry, first_purchase, lapsed_days, peak_coverage

def _daily(**kw):
    return run(SimulationConfig(**kw)).daily

def test_diagnostics_basic_paths():
    df = _daily(timescale_months=12)
    assert first_purchase(df) == (30, 50_000.0)
    assert first_expiry(df) == 120
    day, value = peak_coverage(df)
    assert day == 90 and abs(value - 1_875_000) < 1e-6
    assert lapsed_days(df) == []

def test_bootstrap_is_first_purchase():
    df = _daily(timescale_months=12, bootstrap_funding=10_000)
    assert first_purchase(df) == (0, 10_000.0)
    assert first_expiry(df) == 90

def test_no_purchase_returns_none():
    df = _daily(timescale_months=12, purchase_cadence_days=365)
    assert first_purchase(df) is None
    assert first_expiry(df) is None
    assert lapsed_days(df) == []

def test_lapses_when_cadence_outruns_duration():
    df = _daily(timescale_months=12, purchase_cadence_days=100, policy_duration_days=60)
    lapses = lapsed_days(df)
    # purchase on day 100 expires on day 160, next purchase on day 200
    assert lapses[:3] == [160, 161, 162]
    assert 199 in lapses and 200 not in lapses
    assert first_expiry(df) == 160
