from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from .classifier import ExerciseCategory, classify, parse_category
from .formulas import FormulaKey, formula_key, validate_reps, validate_weight, weight_at_reps
from .formulas import one_rm as forward_one_rm
from .selector import select_formula

DEFAULT_REP_TARGETS: Sequence[int] = (2, 4, 6, 8, 10, 15)
HIGH_REP_TARGETS: Sequence[int] = (5, 10, 15, 20, 25)


@dataclass(frozen=True)
class EstimationResult:
    one_rm: float
    one_rm_formula: FormulaKey
    rep_max_formula: FormulaKey
    capped_reps: int
    label: str
    category: Optional[ExerciseCategory] = None


def estimate_one_rm(
    weight: float, reps: int, category: Optional[ExerciseCategory] = None
) -> EstimationResult:
    """Estimate the 1RM for a set and report which formulas were used.

    Without a category the rep-range policy applies (reps capped at 20);
    with one, the category-aware policy (reps capped at 25).
    """
    w = validate_weight(weight)
    r = validate_reps(reps)
    category = parse_category(category)
    choice = select_formula(r, category)
    value = forward_one_rm(w, choice.capped_reps, choice.one_rm_formula)
    return EstimationResult(
        one_rm=value,
        one_rm_formula=choice.one_rm_formula,
        rep_max_formula=choice.rep_max_formula,
        capped_reps=choice.capped_reps,
        label=choice.label,
        category=category,
    )


def estimate_for_exercise(exercise: str, weight: float, reps: int) -> EstimationResult:
    """Classify ``exercise`` by name and estimate with that category."""
    return estimate_one_rm(weight, reps, classify(exercise))


def project_weight_at_reps(one_rm: float, target_reps: int, rep_max_formula: FormulaKey) -> float:
    key = formula_key(rep_max_formula)
    if validate_reps(target_reps) == 1:
        return validate_weight(one_rm, "one_rm")
    return weight_at_reps(one_rm, target_reps, key)


def rep_max_table(
    one_rm: float,
    rep_max_formula: FormulaKey,
    targets: Sequence[int] = DEFAULT_REP_TARGETS,
) -> pd.DataFrame:
    """Projected weights for each target rep count.

    The same formula is used for every row so the curve stays consistent.
    """
    rows = []
    for reps in targets:
        weight = project_weight_at_reps(one_rm, reps, rep_max_formula)
        rows.append({"reps": int(reps), "weight": weight, "percent_1rm": weight / one_rm * 100})
    return pd.DataFrame(rows, columns=["reps", "weight", "percent_1rm"])
