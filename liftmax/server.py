from __future__ import annotations

from typing import Optional, cast

import pandas as pd
import plotly.graph_objects as go
from shiny import Inputs, Outputs, Session, reactive, render, ui
from shinywidgets import render_plotly

from .classifier import classify, parse_category
from .config import weight_unit
from .errors import InvalidArgument
from .estimator import DEFAULT_REP_TARGETS, HIGH_REP_TARGETS, EstimationResult, estimate_one_rm, rep_max_table
from .history import best_history, history_frame
from .logger import logger
from .records import compute_bests
from .repos import Repo, repo_factory
from .utils import REQUIRED_TABS, parse_reps, parse_sets, parse_weight


def server(input: Inputs, output: Outputs, session: Session):
    repo = reactive.value(cast(Repo, None))
    # Bumped after every write so the dependent calcs re-read the database.
    revision = reactive.value(0)
    calc_state = reactive.value(cast(Optional[EstimationResult], None))
    unit = weight_unit()

    def get_repo() -> Optional[Repo]:
        return repo.get()

    def _changed():
        revision.set(revision.get() + 1)

    @reactive.effect
    def _init_repo():
        repo.set(repo_factory())

    @reactive.calc
    def logs_df() -> pd.DataFrame:
        revision.get()
        r = get_repo()
        return r.recent_logs() if r else pd.DataFrame(columns=REQUIRED_TABS["Logs"])

    @reactive.calc
    def exercises() -> list:
        revision.get()
        r = get_repo()
        return r.list_exercises() if r else []

    @reactive.calc
    def bests() -> dict:
        # Rebuilt from scratch whenever the log collection changes.
        return compute_bests(logs_df())

    @reactive.effect
    def _refresh_choices():
        names = exercises()
        ui.update_select("log_exercise", choices=["", *names])
        ui.update_select("remove_exercise", choices=["", *names])
        ui.update_select("history_filter", choices={"all": "All Exercises", **{n: n for n in names}})
        d = logs_df()
        picks = {}
        for row in d.to_dict("records"):
            when = row["date"].strftime("%Y-%m-%d") if pd.notna(row["date"]) else "?"
            picks[row["id"]] = f"{when} | {row['exercise']} | {row['weight']:g} x {row['reps']}"
        ui.update_selectize("log_pick", choices=picks)

    # --- Calculator ---

    @reactive.effect
    @reactive.event(input.btn_calculate)
    def _calculate():
        try:
            weight = parse_weight(input.calc_weight())
            reps = parse_reps(input.calc_reps())
            choice = input.calc_category()
            if choice == "auto":
                name = input.calc_exercise().strip()
                category = classify(name) if name else None
            elif choice == "none":
                category = None
            else:
                category = parse_category(choice)
            calc_state.set(estimate_one_rm(weight, reps, category))
        except InvalidArgument as e:
            calc_state.set(None)
            ui.notification_show(str(e), type="warning")

    @render.ui
    def calc_result():
        res = calc_state.get()
        if res is None:
            return ui.p("Enter a weight and reps, then press Calculate.", class_="text-muted")
        category = res.category.value.title() if res.category else "Rep range"
        return ui.div(
            ui.h2(f"{res.one_rm:.1f} {unit}"),
            ui.p(f"Formula: {res.label} · Policy: {category} · Reps used: {res.capped_reps}"),
        )

    @render.data_frame
    def tbl_rep_max():
        res = calc_state.get()
        if res is None:
            return pd.DataFrame(columns=["Reps", f"Weight ({unit})", "% 1RM"])
        targets = HIGH_REP_TARGETS if input.calc_high_reps() else DEFAULT_REP_TARGETS
        t = rep_max_table(res.one_rm, res.rep_max_formula, targets)
        return pd.DataFrame({
            "Reps": t["reps"],
            f"Weight ({unit})": t["weight"].round(1),
            "% 1RM": t["percent_1rm"].round(0).astype(int),
        })

    # --- Logging ---

    @reactive.effect
    @reactive.event(input.btn_save_log)
    def _save_log():
        r = get_repo()
        if not r:
            logger.warning("No repo available for save_log")
            return
        exercise = input.log_exercise()
        if not exercise:
            ui.notification_show("Please select an exercise", type="warning")
            return
        try:
            weight = parse_weight(input.log_weight())
            reps = parse_reps(input.log_reps())
            sets = parse_sets(input.log_sets())
            row = r.add_log(
                exercise,
                weight,
                reps,
                sets=sets,
                notes=input.log_notes(),
            )
        except ValueError as e:
            ui.notification_show(f"Failed to save workout: {e}", type="error")
            return
        _changed()
        ui.notification_show(f"Saved! Estimated 1RM {row['calculated_one_rm']:.1f} {unit}")

    @reactive.effect
    @reactive.event(input.btn_del_log)
    def _delete_log():
        r = get_repo()
        row_id = input.log_pick()
        if not r or not row_id:
            ui.notification_show("Pick a log entry to delete", type="warning")
            return
        r.delete_log(row_id)
        _changed()
        ui.notification_show("Log deleted.")

    # --- Exercises ---

    @reactive.effect
    @reactive.event(input.btn_add_exercise)
    def _add_exercise():
        r = get_repo()
        if not r:
            return
        try:
            r.add_exercise(input.new_exercise())
        except InvalidArgument as e:
            ui.notification_show(str(e), type="warning")
            return
        _changed()
        ui.update_text("new_exercise", value="")

    @reactive.effect
    @reactive.event(input.btn_remove_exercise)
    def _remove_exercise():
        r = get_repo()
        name = input.remove_exercise()
        if not r or not name:
            ui.notification_show("Pick an exercise to remove", type="warning")
            return
        r.remove_exercise(name)
        _changed()
        ui.notification_show(f'Removed "{name}" from your exercises.')

    @render.ui
    def exercise_list():
        names = exercises()
        if not names:
            return ui.p("No exercises yet", class_="text-muted")
        return ui.tags.ul(*[ui.tags.li(f"{n} ({classify(n).value})") for n in names])

    # --- History ---

    @render.data_frame
    def tbl_history():
        h = history_frame(logs_df(), bests(), input.history_filter() or "all")
        if h.empty:
            return pd.DataFrame({"": ["No workouts logged yet"]})
        return pd.DataFrame({
            "Exercise": [f"{ex} 🏆" if pr else ex for ex, pr in zip(h["exercise"], h["is_pr"])],
            "Set": [f"{w:g} {unit} × {r} reps" for w, r in zip(h["weight"], h["reps"])],
            "When": h["when"],
            "1RM": [f"{v:.1f} {unit}" for v in h["calculated_one_rm"]],
            "% of PR": [f"{p:.0f}%" for p in h["percent_of_best"]],
        })

    def _empty_figure(message: str = "No data available"):
        fig = go.Figure()
        fig.update_layout(
            template='plotly_white',
            autosize=True,
            margin=dict(l=50, r=50, t=50, b=50),
            annotations=[dict(
                text=message,
                showarrow=False,
                x=0.5, y=0.5,
                xref="paper", yref="paper",
                font=dict(color="#6c757d", size=16)
            )]
        )
        return fig

    @render_plotly
    def plot_1rm():
        d = best_history(logs_df())
        if d.empty:
            return _empty_figure("No workouts logged yet")
        chosen = input.history_filter() or "all"
        if chosen != "all":
            d = d[d["exercise"] == chosen]
            if d.empty:
                return _empty_figure("No data for selected exercise")

        fig = go.Figure()
        for exercise_name, grp in d.groupby("exercise"):
            fig.add_trace(go.Scatter(
                x=grp["day"],
                y=grp["best_one_rm"],
                mode='lines+markers',
                name=str(exercise_name),
                line=dict(width=3),
                marker=dict(size=8),
                hovertemplate=f'<b>%{{fullData.name}}</b><br>Date: %{{x}}<br>1RM: %{{y:.1f}} {unit}<extra></extra>'
            ))
        fig.update_layout(
            title=dict(text="Estimated 1RM", font=dict(size=16)),
            xaxis_title="Date",
            yaxis_title=f"1RM ({unit})",
            hovermode='closest',
            template='plotly_white',
            autosize=True,
            margin=dict(l=50, r=50, t=50, b=50),
            legend=dict(title=dict(text="Exercise"), orientation='v', yanchor='top', y=1, xanchor='left', x=1.02)
        )
        return fig
