from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field, validator

from liftmax.formulas import FormulaKey
from liftmax.utils import MAX_FORM_REPS, MAX_FORM_SETS

"""Pydantic v1 models for data validation.

The project pins `pydantic<2.0`, so these models keep the v1 API
(`validator`, `Config`).
"""


def _clean_name(v: str) -> str:
    v = " ".join(str(v).split())
    if not v:
        raise ValueError("Exercise name cannot be empty")
    return v


class LogEntry(BaseModel):
    """Validation model for a logged set."""

    id: Optional[str] = None
    date: datetime.datetime
    exercise: str
    weight: float = Field(gt=0, description="Weight must be positive")
    reps: int = Field(gt=0, le=MAX_FORM_REPS, description=f"Reps must be between 1-{MAX_FORM_REPS}")
    sets: Optional[int] = Field(None, gt=0, le=MAX_FORM_SETS)
    calculated_one_rm: float = Field(gt=0)
    one_rm_formula: FormulaKey = FormulaKey.NONE
    notes: Optional[str] = None

    @validator("exercise")
    def validate_exercise(cls, v: str) -> str:
        return _clean_name(v)

    @validator("date")
    def no_future_dates(cls, v: datetime.datetime) -> datetime.datetime:
        # Stored dates are naive local time.
        if v.tzinfo is not None:
            v = v.astimezone().replace(tzinfo=None)
        if v.date() > datetime.datetime.now().date():
            raise ValueError("Cannot log future dates")
        return v

    class Config:
        use_enum_values = True
        schema_extra = {
            "examples": [
                {
                    "date": "2026-10-01T18:30:00",
                    "exercise": "Squat",
                    "weight": 225.0,
                    "reps": 5,
                    "sets": 3,
                    "calculated_one_rm": 262.5,
                    "one_rm_formula": "epley",
                    "notes": "Felt strong",
                }
            ]
        }


class ExerciseEntry(BaseModel):
    """Validation model for a user's exercise list item."""

    name: str = Field(max_length=80)

    @validator("name")
    def validate_name(cls, v: str) -> str:
        return _clean_name(v)
