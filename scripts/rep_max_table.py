#!/usr/bin/env python3
"""Print an estimated 1RM and a rep-max table for one set.

Usage:
  python scripts/rep_max_table.py --weight 225 --reps 5
  python scripts/rep_max_table.py --weight 60 --reps 12 --exercise "DB Bench Press"
  python scripts/rep_max_table.py --weight 300 --reps 15 --category machine --high-reps

Without --exercise or --category the rep-range formula policy is used.
"""

from __future__ import annotations

import argparse
import sys

import pandas as pd
from dotenv import load_dotenv

load_dotenv(override=False)

from liftmax.classifier import classify, parse_category  # noqa: E402
from liftmax.config import weight_unit  # noqa: E402
from liftmax.errors import LiftMaxError  # noqa: E402
from liftmax.estimator import DEFAULT_REP_TARGETS, HIGH_REP_TARGETS, estimate_one_rm, rep_max_table  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("--weight", type=float, required=True, help="Weight lifted")
    p.add_argument("--reps", type=int, required=True, help="Reps performed")
    p.add_argument("--exercise", default="", help="Exercise name; its category picks the formula")
    p.add_argument("--category", choices=["compound", "dumbbell", "machine"], help="Override the category")
    p.add_argument("--high-reps", action="store_true", help="Project 5/10/15/20/25 instead of 2-15 reps")
    args = p.parse_args(argv)

    unit = weight_unit()
    if args.category:
        category = parse_category(args.category)
    elif args.exercise.strip():
        category = classify(args.exercise)
    else:
        category = None

    try:
        res = estimate_one_rm(args.weight, args.reps, category)
        table = rep_max_table(res.one_rm, res.rep_max_formula, HIGH_REP_TARGETS if args.high_reps else DEFAULT_REP_TARGETS)
    except LiftMaxError as e:
        print(f"[ERROR] {e}")
        return 1

    policy = res.category.value if res.category else "rep range"
    print(f"[INFO] Estimated 1RM: {res.one_rm:.1f} {unit} ({res.label}, policy={policy}, reps used={res.capped_reps})")
    table = table.assign(weight=table["weight"].round(1), percent_1rm=table["percent_1rm"].round(0).astype(int))
    pd.set_option('display.width', 200)
    print(table.rename(columns={"weight": f"weight_{unit}", "percent_1rm": "%_1rm"}).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
