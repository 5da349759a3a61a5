from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .classifier import ExerciseCategory, parse_category
from .errors import InvalidArgument
from .formulas import FORMULA_LABELS, FormulaKey

REP_ONLY_CAP = 20
CATEGORY_REP_CAP = 25
TREAT_AS_1RM_MAX_REPS = 3
TREAT_AS_1RM_LABEL = "Treat as 1RM"


@dataclass(frozen=True)
class FormulaChoice:
    one_rm_formula: FormulaKey
    rep_max_formula: FormulaKey
    capped_reps: int
    label: str


def _same(key: FormulaKey, reps: int) -> FormulaChoice:
    return FormulaChoice(
        one_rm_formula=key, rep_max_formula=key, capped_reps=reps, label=FORMULA_LABELS[key]
    )


def select_by_reps(reps: int) -> FormulaChoice:
    """Rep-range policy used when the exercise category is unknown.

    Reps are capped at 20, then bucketed: <=5 Epley, 6-10 Brzycki,
    11-15 Lombardi, 16+ Mayhew.
    """
    r = min(int(reps), REP_ONLY_CAP)
    if r <= 5:
        return _same(FormulaKey.EPLEY, r)
    if r <= 10:
        return _same(FormulaKey.BRZYCKI, r)
    if r <= 15:
        return _same(FormulaKey.LOMBARDI, r)
    return _same(FormulaKey.MAYHEW, r)


def select_by_category(reps: int, category: ExerciseCategory) -> FormulaChoice:
    """Category-aware policy, reps capped at 25.

    Up to 3 reps the lifted weight is taken as the 1RM; Epley is still
    returned as the rep-max formula so a projection curve can be drawn.
    """
    category = parse_category(category)
    if category is None:
        raise InvalidArgument("A category is required for the category-aware policy")
    r = min(int(reps), CATEGORY_REP_CAP)
    if r <= TREAT_AS_1RM_MAX_REPS:
        return FormulaChoice(
            one_rm_formula=FormulaKey.NONE,
            rep_max_formula=FormulaKey.EPLEY,
            capped_reps=r,
            label=TREAT_AS_1RM_LABEL,
        )

    if category is ExerciseCategory.MACHINE:
        if r <= 10:
            return _same(FormulaKey.BRZYCKI, r)
        if r <= 15:
            return _same(FormulaKey.MAYHEW, r)
        return _same(FormulaKey.BRZYCKI, r)

    epley_max = 8 if category is ExerciseCategory.DUMBBELL else 10
    if r <= epley_max:
        return _same(FormulaKey.EPLEY, r)
    if r <= 20:
        return _same(FormulaKey.MAYHEW, r)
    return _same(FormulaKey.BRZYCKI, r)


def select_formula(reps: int, category: Optional[ExerciseCategory] = None) -> FormulaChoice:
    if category is None:
        return select_by_reps(reps)
    return select_by_category(reps, category)
