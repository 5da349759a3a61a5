from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import pandas as pd


def _field(log: Any, name: str) -> Any:
    if isinstance(log, Mapping):
        return log.get(name)
    return getattr(log, name, None)


def _pairs(logs) -> Iterable[Tuple[str, float]]:
    if isinstance(logs, pd.DataFrame):
        if logs.empty or not {"exercise", "calculated_one_rm"} <= set(logs.columns):
            return
        for exercise, value in zip(logs["exercise"], logs["calculated_one_rm"]):
            yield exercise, value
        return
    for log in logs:
        yield _field(log, "exercise"), _field(log, "calculated_one_rm")


def compute_bests(logs) -> Dict[str, float]:
    """Best stored 1RM per exercise name.

    ``logs`` may be a DataFrame or an iterable of dicts / LogEntry objects.
    Rows missing either field are skipped. Always returns a new dict.
    """
    bests: Dict[str, float] = {}
    for exercise, value in _pairs(logs):
        if pd.isna(exercise) or pd.isna(value):
            continue
        if exercise not in bests or value > bests[exercise]:
            bests[exercise] = value
    return bests


def update_bests(bests: Mapping[str, float], exercise: str, one_rm: float) -> Dict[str, float]:
    """Return a copy of ``bests`` with one newly saved set folded in."""
    updated = dict(bests)
    if exercise not in updated or one_rm > updated[exercise]:
        updated[exercise] = one_rm
    return updated


def is_personal_record(log: Any, bests: Mapping[str, float]) -> bool:
    # Exact comparison: the stored value is never recomputed.
    best = bests.get(_field(log, "exercise"))
    return best is not None and _field(log, "calculated_one_rm") == best


def percent_of_best(one_rm: float, exercise: str, bests: Mapping[str, float]) -> float:
    best: Optional[float] = bests.get(exercise)
    if not best:
        return 100.0
    return one_rm / best * 100
