from __future__ import annotations

import sqlite3
import uuid
from datetime import datetime
from typing import List, Optional, Protocol

import pandas as pd
from pydantic import ValidationError

from .config import DEFAULT_EXERCISES, db_path, history_limit
from .errors import InvalidArgument
from .estimator import estimate_for_exercise
from .logger import log_function_call, logger
from .models import ExerciseEntry, LogEntry
from .utils import REQUIRED_TABS


class Repo(Protocol):
    def recent_logs(self, limit: Optional[int] = None, exercise: Optional[str] = None) -> pd.DataFrame: ...
    def add_log(
        self,
        exercise: str,
        weight: float,
        reps: int,
        sets: Optional[int] = None,
        when: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> dict: ...
    def delete_log(self, row_id: str) -> None: ...
    def list_exercises(self) -> List[str]: ...
    def add_exercise(self, name: str) -> List[str]: ...
    def remove_exercise(self, name: str) -> List[str]: ...


class SQLiteRepo:
    def __init__(self, path: str | None = None, default_exercises: Optional[List[str]] = None):
        self.path = path or db_path()
        self.default_exercises = list(DEFAULT_EXERCISES if default_exercises is None else default_exercises)
        self._init_db()
        logger.info(f"SQLiteRepo initialized at {self.path}")

    def _conn(self):
        return sqlite3.connect(self.path, check_same_thread=False)

    def _init_db(self):
        with self._conn() as con:
            cur = con.cursor()
            cur.execute("SELECT 1 FROM sqlite_master WHERE type='table' AND name='Exercises'")
            fresh = cur.fetchone() is None
            cur.execute("""
                CREATE TABLE IF NOT EXISTS Logs (
                    id TEXT PRIMARY KEY,
                    date TEXT,
                    exercise TEXT,
                    weight REAL,
                    reps INTEGER,
                    sets INTEGER,
                    calculated_one_rm REAL,
                    one_rm_formula TEXT,
                    notes TEXT
                )""")
            cur.execute("""
                CREATE TABLE IF NOT EXISTS Exercises (
                    name TEXT PRIMARY KEY,
                    position INTEGER
                )""")
            cur.execute("CREATE INDEX IF NOT EXISTS idx_logs_date ON Logs (date)")
            # Seed the default list once, on a fresh database. An emptied list stays empty.
            if fresh and self.default_exercises:
                cur.executemany(
                    "INSERT INTO Exercises (name, position) VALUES (?, ?)",
                    [(n, i) for i, n in enumerate(self.default_exercises)],
                )
                logger.info("Seeded default exercise list")

    # --- Logs ---

    def recent_logs(self, limit: Optional[int] = None, exercise: Optional[str] = None) -> pd.DataFrame:
        """Most recent logs first, at most ``limit`` rows (HISTORY_LIMIT by default)."""
        limit = limit or history_limit()
        query = f"SELECT {', '.join(REQUIRED_TABS['Logs'])} FROM Logs"
        params: list[object] = []
        if exercise is not None:
            query += " WHERE exercise = ?"
            params.append(exercise)
        query += " ORDER BY date DESC LIMIT ?"
        params.append(int(limit))
        logger.debug(f"SQLite read logs limit={limit} exercise={exercise}")
        with self._conn() as con:
            df = pd.read_sql_query(query, con, params=params)
        if df.empty:
            logger.debug("SQLite Logs query returned no rows")
            return pd.DataFrame(columns=REQUIRED_TABS["Logs"])
        df["date"] = pd.to_datetime(df["date"], errors="coerce")
        logger.debug(f"SQLite read {len(df)} rows from Logs")
        return df

    @log_function_call
    def add_log(
        self,
        exercise: str,
        weight: float,
        reps: int,
        sets: Optional[int] = None,
        when: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> dict:
        """Estimate the 1RM for the set and store it with the log.

        The computed value is stored verbatim; records compare against it later.
        """
        result = estimate_for_exercise(exercise, weight, reps)
        payload = {
            "id": str(uuid.uuid4()),
            "date": when or datetime.now(),
            "exercise": exercise,
            "weight": weight,
            "reps": reps,
            "sets": sets,
            "calculated_one_rm": result.one_rm,
            "one_rm_formula": result.one_rm_formula.value,
            "notes": notes or None,
        }
        logger.debug(f"SQLite add log: {payload}")
        entry = _validate(LogEntry, payload)
        row = entry.dict()
        values: list[object] = []
        for c in REQUIRED_TABS["Logs"]:
            v = row.get(c)
            values.append(v.isoformat(timespec="microseconds") if isinstance(v, datetime) else v)
        placeholders = ",".join(["?"] * len(values))
        with self._conn() as con:
            con.execute(
                f"INSERT INTO Logs ({','.join(REQUIRED_TABS['Logs'])}) VALUES ({placeholders})",
                tuple(values),
            )
        logger.info(
            f"SQLite logged {row['exercise']} {row['weight']}x{row['reps']} "
            f"id={row['id']} 1rm={row['calculated_one_rm']:.1f} ({row['one_rm_formula']})"
        )
        return row

    def delete_log(self, row_id: str) -> None:
        logger.debug(f"SQLite delete from Logs id={row_id}")
        with self._conn() as con:
            con.execute("DELETE FROM Logs WHERE id = ?", (row_id,))
        logger.info(f"SQLite deleted Logs id={row_id}")

    # --- Exercises ---

    def _read_exercises(self) -> List[str]:
        with self._conn() as con:
            rows = con.execute("SELECT name FROM Exercises ORDER BY position, name").fetchall()
        return [r[0] for r in rows]

    def _write_exercises(self, names: List[str]) -> None:
        with self._conn() as con:
            con.execute("DELETE FROM Exercises")
            con.executemany(
                "INSERT INTO Exercises (name, position) VALUES (?, ?)",
                [(n, i) for i, n in enumerate(names)],
            )

    def list_exercises(self) -> List[str]:
        return self._read_exercises()

    @log_function_call
    def add_exercise(self, name: str) -> List[str]:
        try:
            clean = _validate(ExerciseEntry, {"name": name}).name
        except ValidationError as e:
            raise InvalidArgument("Please enter an exercise name") from e
        names = self.list_exercises()
        if clean in names:
            raise InvalidArgument("Exercise already exists")
        names = sorted(names + [clean])
        self._write_exercises(names)
        logger.info(f"SQLite added exercise {clean!r}")
        return names

    def remove_exercise(self, name: str) -> List[str]:
        """Drop ``name`` from the list. Logged sets for it are kept."""
        names = self.list_exercises()
        if name not in names:
            logger.debug(f"Exercise {name!r} not in list; nothing to remove")
            return names
        names = [n for n in names if n != name]
        self._write_exercises(names)
        logger.info(f"SQLite removed exercise {name!r}")
        return names


def repo_factory() -> Repo:
    """Return the SQLite repository configured by DB_PATH."""
    return SQLiteRepo()


def _validate(model, payload: dict):
    """Validate a payload with its pydantic model, logging failures."""
    try:
        return model(**payload)
    except ValidationError:
        logger.exception(f"Validation failed for {model.__name__} payload={payload}")
        raise
