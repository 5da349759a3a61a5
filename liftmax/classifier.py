from __future__ import annotations

import re
from enum import Enum
from typing import List, Optional, Tuple

from .errors import InvalidArgument


class ExerciseCategory(str, Enum):
    COMPOUND = "compound"
    DUMBBELL = "dumbbell"
    MACHINE = "machine"


_NON_ALNUM = re.compile(r"[^a-z0-9 ]")
_SPACES = re.compile(r"\s+")

# Checked in order; the first category with a matching pattern wins.
_PATTERNS: List[Tuple[ExerciseCategory, List[re.Pattern]]] = [
    (
        ExerciseCategory.MACHINE,
        [re.compile(p) for p in (r"leg press", r"hack squat", r"smith", r"chest press")],
    ),
    (
        ExerciseCategory.DUMBBELL,
        [
            re.compile(p)
            for p in (
                r"\bdb\b",
                r"dumbbell",
                r"db bench",
                r"db incline",
                r"incline dumbbell",
                r"goblet squat",
                r"lunges?",
            )
        ],
    ),
    (
        ExerciseCategory.COMPOUND,
        [
            re.compile(p)
            for p in (
                r"squat",
                r"bench",
                r"deadlift",
                r"overhead press",
                r"\bohp\b",
                r"barbell row",
                r"\brow\b",
            )
        ],
    ),
]


def normalize_name(name: Optional[str]) -> str:
    """Lowercase, drop everything outside [a-z0-9 ], collapse whitespace."""
    text = _SPACES.sub(" ", str(name or "").lower())
    text = _NON_ALNUM.sub("", text)
    return _SPACES.sub(" ", text).strip()


def classify(name: Optional[str]) -> ExerciseCategory:
    """Map a free-text exercise name to a movement category.

    Pattern heuristic only: machine patterns are tried first, then dumbbell,
    then compound. Anything unmatched falls back to compound.
    """
    text = normalize_name(name)
    for category, patterns in _PATTERNS:
        if any(p.search(text) for p in patterns):
            return category
    return ExerciseCategory.COMPOUND


def parse_category(value) -> Optional[ExerciseCategory]:
    """Parse a category coming from a form or caller.

    Returns None when no category is given, so the rep-only policy applies.
    """
    if value is None or isinstance(value, ExerciseCategory):
        return value
    text = str(value).strip().lower()
    if not text:
        return None
    try:
        return ExerciseCategory(text)
    except ValueError:
        raise InvalidArgument(f"Unknown exercise category: {value!r}") from None
