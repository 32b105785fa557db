# tools/update_golden.py
import json
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path

from coverage_engine.engine.config import config_to_dict, load_simulation_config
from coverage_engine.engine.simulator import run

CONFIG = Path("configs/example_12m.json")
GOLDEN_DIR = Path("golden")


def q2(x):  # two-decimal quantize to stabilize snapshots
    return float(Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def normalize(df):
    return [{k: (q2(v) if isinstance(v, (int, float)) else v) for k, v in r.items()}
            for r in df.to_dict(orient="records")]


def main():
    config = load_simulation_config(CONFIG)
    result = run(config)

    GOLDEN_DIR.mkdir(parents=True, exist_ok=True)
    monthly = normalize(result.monthly)
    Path(GOLDEN_DIR / "monthly_example_12m.json").write_text(json.dumps(monthly, indent=2))

    manifest = {
        "config": config_to_dict(config),
        "config_path": str(CONFIG),
        "rows_captured": {"monthly_example_12m": len(monthly)},
    }
    Path(GOLDEN_DIR / "manifest.json").write_text(json.dumps(manifest, indent=2))
    print("Golden snapshots updated:", [p.name for p in GOLDEN_DIR.glob("*.json")])


if __name__ == "__main__":
    main()
