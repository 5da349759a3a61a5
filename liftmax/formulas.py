from __future__ import annotations

import math
import numbers
from enum import Enum
from typing import Dict

from .errors import DomainError, InvalidArgument


class FormulaKey(str, Enum):
    NONE = "none"
    EPLEY = "epley"
    BRZYCKI = "brzycki"
    LOMBARDI = "lombardi"
    MAYHEW = "mayhew"


FORMULA_LABELS: Dict[FormulaKey, str] = {
    FormulaKey.NONE: "None",
    FormulaKey.EPLEY: "Epley",
    FormulaKey.BRZYCKI: "Brzycki",
    FormulaKey.LOMBARDI: "Lombardi",
    FormulaKey.MAYHEW: "Mayhew",
}

# Brzycki's denominator (37 - reps) reaches zero at 37 reps.
BRZYCKI_MAX_REPS = 36


def validate_weight(value: float, name: str = "weight") -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    w = float(value)
    if not math.isfinite(w) or w <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value!r}")
    return w


def validate_reps(value: int) -> int:
    if isinstance(value, bool):
        raise InvalidArgument(f"reps must be an integer, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"reps must be an integer, got {value!r}")
    if value < 1:
        raise InvalidArgument(f"reps must be at least 1, got {value}")
    return int(value)


def _check_brzycki(reps: int) -> None:
    if reps > BRZYCKI_MAX_REPS:
        raise DomainError(f"Brzycki is undefined at {reps} reps (max {BRZYCKI_MAX_REPS})")


def formula_key(key: FormulaKey | str) -> FormulaKey:
    try:
        return FormulaKey(key)
    except ValueError:
        raise InvalidArgument(f"Unknown formula: {key!r}") from None


def _mayhew_percent(reps: int) -> float:
    return 52.2 + 41.9 * math.exp(-0.055 * reps)


def one_rm(weight: float, reps: int, key: FormulaKey | str) -> float:
    """Estimate a one-repetition maximum from a set of ``reps`` at ``weight``.

    - epley:    weight * (1 + reps / 30)
    - brzycki:  weight * 36 / (37 - reps)
    - lombardi: weight * reps ** 0.10
    - mayhew:   100 * weight / (52.2 + 41.9 * e ** (-0.055 * reps))
    - none:     weight

    A single rep is its own 1RM, whatever the formula.
    Raises InvalidArgument on bad input and DomainError for Brzycki past 36 reps.
    """
    w = validate_weight(weight)
    r = validate_reps(reps)
    k = formula_key(key)
    if k is FormulaKey.BRZYCKI:
        _check_brzycki(r)
    if r == 1 or k is FormulaKey.NONE:
        return w
    if k is FormulaKey.EPLEY:
        return w * (1.0 + r / 30.0)
    if k is FormulaKey.BRZYCKI:
        return w * 36.0 / (37.0 - r)
    if k is FormulaKey.LOMBARDI:
        return w * r ** 0.10
    return 100.0 * w / _mayhew_percent(r)


def weight_at_reps(orm: float, reps: int, key: FormulaKey | str) -> float:
    """Project the weight liftable for ``reps`` from a known 1RM.

    Algebraic inverse of :func:`one_rm` for the same key, so
    ``weight_at_reps(one_rm(w, r, k), r, k)`` gives back ``w``.
    """
    m = validate_weight(orm, "one_rm")
    r = validate_reps(reps)
    k = formula_key(key)
    if k is FormulaKey.BRZYCKI:
        _check_brzycki(r)
    if r == 1 or k is FormulaKey.NONE:
        return m
    if k is FormulaKey.EPLEY:
        return m / (1.0 + r / 30.0)
    if k is FormulaKey.BRZYCKI:
        return m * (37.0 - r) / 36.0
    if k is FormulaKey.LOMBARDI:
        return m / r ** 0.10
    return m * _mayhew_percent(r) / 100.0
