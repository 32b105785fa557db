from coverage_engine.engine.simulator import run
from coverage_engine.engine.types import SimulationConfig
from ui.export import table_csv

DAILY = ["Day", "Purchase", "Cumulative Premiums", "Active Premiums", "Coverage"]
MONTHLY = [
    "Month Index", "Month", "Premium Purchases",
    "Cumulative Premium Purchases", "Current Cumulative Coverage",
]

def test_daily_columns_match_expected_order():
    result = run(SimulationConfig(timescale_months=12))
    assert list(result.daily.columns) == DAILY
    assert len(result.daily) == 361

def test_monthly_columns_match_expected_order():
    result = run(SimulationConfig(timescale_months=12))
    assert list(result.monthly.columns) == MONTHLY
    assert list(result.monthly["Month"][:2]) == ["26-4", "26-5"]

def test_monthly_labels_follow_start_month():
    result = run(SimulationConfig(timescale_months=12), start_year=2025, start_month=11)
    assert list(result.monthly["Month"][:3]) == ["25-11", "25-12", "26-1"]

def test_table_csv_headers_and_rows():
    monthly = run(SimulationConfig(timescale_months=12)).monthly
    lines = table_csv(monthly).decode("utf-8").strip().splitlines()
    assert lines[0] == "Month,Premium Purchases,Cumulative Premium Purchases,Current Cumulative Coverage"
    assert len(lines) == 13
    assert lines[2].startswith("26-5,50000")
