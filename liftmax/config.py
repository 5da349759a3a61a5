from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Literal, Optional, cast

WeightUnit = Literal["lbs", "kg"]

DEFAULT_EXERCISES: List[str] = ["Squat", "Bench Press", "Deadlift", "Overhead Press", "Barbell Row"]


def db_path() -> str:
    return os.environ.get("DB_PATH", "./liftmax.db")


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def log_file() -> Optional[str]:
    return os.environ.get("LOG_FILE") or None


def history_limit() -> int:
    """Number of most recent logs loaded for history and records (default 100)."""
    try:
        value = int(os.environ.get("HISTORY_LIMIT", "100"))
    except ValueError:
        return 100
    return value if value > 0 else 100


def weight_unit() -> WeightUnit:
    unit = os.environ.get("WEIGHT_UNIT", "lbs").strip().lower()
    return cast(WeightUnit, unit if unit in ("lbs", "kg") else "lbs")


@dataclass
class AppConfig:
    db_path: str
    log_level: str
    log_file: Optional[str]
    history_limit: int
    weight_unit: WeightUnit
    default_exercises: List[str] = field(default_factory=lambda: list(DEFAULT_EXERCISES))


def app_config() -> AppConfig:
    return AppConfig(
        db_path=db_path(),
        log_level=log_level(),
        log_file=log_file(),
        history_limit=history_limit(),
        weight_unit=weight_unit(),
    )
