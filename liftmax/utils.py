from __future__ import annotations

from typing import Dict, List, Optional

from .errors import InvalidArgument

REQUIRED_TABS: Dict[str, List[str]] = {
    "Logs": [
        "id", "date", "exercise", "weight", "reps", "sets", "calculated_one_rm", "one_rm_formula", "notes"
    ],
    "Exercises": ["name", "position"],
}

MAX_FORM_REPS = 30
MAX_FORM_SETS = 20


def normalize_decimal(value) -> Optional[float]:
    """Convert form input to float, accepting both comma and period as decimal separator.

    Returns None for empty or unparseable input.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    text = str(value).strip().replace(",", ".")
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_weight(value) -> float:
    w = normalize_decimal(value)
    if w is None or w <= 0:
        raise InvalidArgument("Please enter a valid weight")
    return w


def parse_reps(value, max_reps: int = MAX_FORM_REPS) -> int:
    """Parse a reps field; whole numbers between 1 and ``max_reps`` only."""
    r = normalize_decimal(value)
    if r is None or not r.is_integer() or not 1 <= r <= max_reps:
        raise InvalidArgument(f"Please enter reps between 1 and {max_reps}")
    return int(r)


def parse_sets(value, max_sets: int = MAX_FORM_SETS) -> Optional[int]:
    """Parse the optional sets field. Blank means not recorded."""
    if value is None or not str(value).strip():
        return None
    s = normalize_decimal(value)
    if s is None or not s.is_integer() or not 1 <= s <= max_sets:
        raise InvalidArgument(f"Please enter sets between 1 and {max_sets}")
    return int(s)
