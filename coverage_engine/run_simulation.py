#!/usr/bin/env python3
import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from coverage_engine.engine.config import load_simulation_config
from coverage_engine.engine.errors import InvalidConfiguration
from coverage_engine.engine.simulator import run
from coverage_engine.engine.types import SimulationConfig

logger = logging.getLogger(__name__)

# flag -> config field
OVERRIDES = {
    "timescale_months": int,
    "premium_value": float,
    "purchase_cadence_days": int,
    "policy_duration_days": int,
    "bootstrap_funding": float,
    "premium_cost_pct": float,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate recurring premium purchases and coverage.")
    parser.add_argument("--config", type=Path, help="JSON config; defaults apply when omitted")
    for name, kind in OVERRIDES.items():
        parser.add_argument("--" + name.replace("_", "-"), dest=name, type=kind)
    parser.add_argument("--out-prefix", type=str, default="out/COVERAGE")
    parser.add_argument("--verbose", action="store_true")
    return parser


def resolve_config(args: argparse.Namespace) -> SimulationConfig:
    config = load_simulation_config(args.config) if args.config else SimulationConfig()
    changes = {name: getattr(args, name) for name in OVERRIDES if getattr(args, name) is not None}
    return replace(config, **changes) if changes else config


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except InvalidConfiguration as exc:
        parser.error(str(exc))

    result = run(config)
    out = Path(args.out_prefix)
    out.parent.mkdir(parents=True, exist_ok=True)
    daily_path = out.with_name(out.name + "_Daily.csv")
    monthly_path = out.with_name(out.name + "_Monthly.csv")
    result.daily.to_csv(daily_path, index=False)
    result.monthly.to_csv(monthly_path, index=False)
    logger.info("wrote %d daily rows to %s", len(result.daily), daily_path)
    logger.info("wrote %d monthly rows to %s", len(result.monthly), monthly_path)
    print("Done")


if __name__ == "__main__":
    main()
