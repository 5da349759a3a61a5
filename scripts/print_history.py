#!/usr/bin/env python3
"""Print recent workout history with PR flags from the configured database.

Reads .env for DB_PATH, HISTORY_LIMIT and WEIGHT_UNIT.

Usage:
  python scripts/print_history.py
  python scripts/print_history.py --exercise Squat
"""

from __future__ import annotations

import argparse

import pandas as pd
from dotenv import load_dotenv

load_dotenv(override=False)

from liftmax.config import weight_unit  # noqa: E402
from liftmax.history import history_frame  # noqa: E402
from liftmax.records import compute_bests  # noqa: E402
from liftmax.repos import repo_factory  # noqa: E402


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Print recent workout history")
    p.add_argument("--exercise", default="all", help="Only show this exercise (default: all)")
    args = p.parse_args(argv)

    repo = repo_factory()
    logs = repo.recent_logs()
    print(f"[INFO] Rows: {len(logs)}")
    if logs.empty:
        print("[INFO] No workouts logged yet")
        return

    bests = compute_bests(logs)
    unit = weight_unit()
    print("[INFO] Personal records:")
    for exercise, best in sorted(bests.items()):
        print(f"  {exercise}: {best:.1f} {unit}")

    h = history_frame(logs, bests, args.exercise)
    if h.empty:
        print(f"[INFO] No workouts for {args.exercise}")
        return
    out = pd.DataFrame({
        "when": h["when"],
        "exercise": h["exercise"],
        "set": [f"{w:g} x {r}" for w, r in zip(h["weight"], h["reps"])],
        "1rm": h["calculated_one_rm"].round(1),
        "formula": h["one_rm_formula"],
        "pct_of_pr": h["percent_of_best"].round(0).astype(int),
        "pr": h["is_pr"].map({True: "PR", False: ""}),
    })
    pd.set_option('display.max_rows', None)
    pd.set_option('display.width', 200)
    print(out.to_string(index=False))


if __name__ == "__main__":
    main()
