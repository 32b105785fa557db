from pathlib import Path

import pandas as pd
import pytest

from coverage_engine.run_simulation import main

ROOT = Path(__file__).resolve().parents[2]

def test_cli_writes_daily_and_monthly(tmp_path, capsys):
    prefix = tmp_path / "out" / "RUN"
    main(["--config", str(ROOT / "configs" / "example_12m.json"), "--out-prefix", str(prefix)])
    daily = pd.read_csv(tmp_path / "out" / "RUN_Daily.csv")
    monthly = pd.read_csv(tmp_path / "out" / "RUN_Monthly.csv")
    assert len(daily) == 361
    assert len(monthly) == 12
    assert "Done" in capsys.readouterr().out

def test_cli_overrides_config(tmp_path):
    prefix = tmp_path / "RUN"
    main(["--timescale-months", "36", "--bootstrap-funding", "1000", "--out-prefix", str(prefix)])
    daily = pd.read_csv(tmp_path / "RUN_Daily.csv")
    assert len(daily) == 1081
    assert daily.loc[0, "Purchase"] == 1000

def test_cli_rejects_malformed_input(tmp_path):
    with pytest.raises(SystemExit) as info:
        main(["--purchase-cadence-days", "0", "--out-prefix", str(tmp_path / "RUN")])
    assert info.value.code == 2
