from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Optional

import pandas as pd

from .records import is_personal_record, percent_of_best
from .utils import REQUIRED_TABS

HISTORY_COLUMNS = REQUIRED_TABS["Logs"] + ["is_pr", "percent_of_best", "when"]


def format_log_date(when, now: Optional[datetime] = None) -> str:
    """Human-friendly log date.

    "Today", "Yesterday", "N days ago" within a week, then "Mon D"
    (with ", YYYY" appended outside the current year).
    """
    if when is None or (not isinstance(when, str) and pd.isna(when)):
        return ""
    if isinstance(when, str):
        when = pd.to_datetime(when, errors="coerce")
        if pd.isna(when):
            return ""
    if isinstance(when, pd.Timestamp):
        when = when.to_pydatetime()
    if not isinstance(when, datetime) and isinstance(when, date):
        when = datetime(when.year, when.month, when.day)
    now = now or datetime.now()

    days = (now - when).days
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    if 1 < days < 7:
        return f"{days} days ago"
    label = f"{when.strftime('%b')} {when.day}"
    if when.year != now.year:
        label += f", {when.year}"
    return label


def history_frame(
    logs: pd.DataFrame,
    bests: Mapping[str, float],
    exercise_filter: str = "all",
    now: Optional[datetime] = None,
) -> pd.DataFrame:
    """Annotate logs for display: PR flag, percent of best and a friendly date.

    ``bests`` should come from :func:`compute_bests` over the unfiltered logs.
    """
    if logs is None or logs.empty:
        return pd.DataFrame(columns=HISTORY_COLUMNS)
    df = logs
    if exercise_filter and exercise_filter != "all":
        df = df[df["exercise"] == exercise_filter]
    if df.empty:
        return pd.DataFrame(columns=HISTORY_COLUMNS)
    df = df.copy()
    df["is_pr"] = [is_personal_record(row, bests) for row in df.to_dict("records")]
    df["percent_of_best"] = [
        percent_of_best(orm, ex, bests) for orm, ex in zip(df["calculated_one_rm"], df["exercise"])
    ]
    df["when"] = [format_log_date(d, now) for d in df["date"]]
    return df.reset_index(drop=True)


def best_history(logs: pd.DataFrame) -> pd.DataFrame:
    """Best estimated 1RM per exercise per day, oldest first."""
    cols = ["day", "exercise", "best_one_rm"]
    if logs is None or logs.empty:
        return pd.DataFrame(columns=cols)
    df = logs.dropna(subset=["date", "calculated_one_rm"]).copy()
    if df.empty:
        return pd.DataFrame(columns=cols)
    df["day"] = pd.to_datetime(df["date"]).dt.normalize()
    out = (
        df.groupby(["day", "exercise"], as_index=False)["calculated_one_rm"]
        .max()
        .rename(columns={"calculated_one_rm": "best_one_rm"})
        .sort_values(["day", "exercise"])
        .reset_index(drop=True)
    )
    return out[cols]
