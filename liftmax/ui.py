from __future__ import annotations

from typing import Any, cast

from shiny import ui
from shinywidgets import output_widget

from .config import DEFAULT_EXERCISES, weight_unit
from .utils import MAX_FORM_REPS

_UNIT = weight_unit()

CATEGORY_CHOICES = {
    "auto": "Auto (from exercise name)",
    "none": "None (rep range only)",
    "compound": "Compound",
    "dumbbell": "Dumbbell",
    "machine": "Machine",
}

app_ui = ui.page_navbar(
    ui.nav_panel(
        "🧮 Calculator",
        ui.layout_columns(
            ui.card(
                ui.card_header(
                    ui.h4("🏋️ Estimate 1RM", class_="mb-0"),
                    class_="bg-primary text-white"
                ),
                ui.input_text("calc_exercise", "Exercise (optional)", "", placeholder="e.g. DB Bench Press"),
                ui.layout_column_wrap(
                    ui.input_numeric("calc_weight", f"Weight ({_UNIT})", 135, min=0, step=2.5),
                    ui.input_numeric("calc_reps", "Reps", 5, min=1, max=MAX_FORM_REPS, step=1),
                    width=1/2,
                ),
                ui.input_select("calc_category", "Formula policy", CATEGORY_CHOICES, selected="auto"),
                ui.input_checkbox("calc_high_reps", "High-rep table (5-25)", False),
                ui.input_action_button("btn_calculate", "Calculate", class_="btn-primary w-100"),
            ),
            ui.card(
                ui.card_header(
                    ui.h4("📈 Result", class_="mb-0"),
                    class_="bg-success text-white"
                ),
                ui.output_ui("calc_result"),
                ui.output_data_frame("tbl_rep_max"),
            ),
            col_widths=cast(Any, {"lg": [5, 7]}),
        ),
    ),
    ui.nav_panel(
        "✍️ Log",
        ui.layout_columns(
            ui.card(
                ui.card_header(
                    ui.h4("💪 Log a Set", class_="mb-0"),
                    class_="bg-primary text-white"
                ),
                ui.input_select("log_exercise", "Exercise", ["", *DEFAULT_EXERCISES]),
                ui.layout_column_wrap(
                    ui.input_numeric("log_weight", f"Weight ({_UNIT})", 135, min=0, step=2.5),
                    ui.input_numeric("log_reps", "Reps", 5, min=1, max=MAX_FORM_REPS, step=1),
                    ui.input_text("log_sets", "Sets (optional)", ""),
                    width=1/3,
                ),
                ui.input_text_area("log_notes", "Notes", "", rows=2),
                ui.input_action_button("btn_save_log", "Save Workout", class_="btn-primary w-100"),
            ),
            ui.card(
                ui.card_header(
                    ui.h4("📋 My Exercises", class_="mb-0"),
                    class_="bg-secondary text-white"
                ),
                ui.layout_column_wrap(
                    ui.input_text("new_exercise", "New exercise", ""),
                    ui.input_action_button("btn_add_exercise", "Add", class_="btn-success"),
                    width=1/2,
                ),
                ui.layout_column_wrap(
                    ui.input_select("remove_exercise", "Remove exercise", [""]),
                    ui.input_action_button("btn_remove_exercise", "Remove", class_="btn-danger"),
                    width=1/2,
                ),
                ui.output_ui("exercise_list"),
            ),
            col_widths=cast(Any, {"lg": [7, 5]}),
        ),
    ),
    ui.nav_panel(
        "🏆 History",
        ui.layout_columns(
            ui.card(
                ui.card_header(
                    ui.h4("📋 Recent Workouts", class_="mb-0"),
                    class_="bg-secondary text-white"
                ),
                ui.input_select("history_filter", "Exercise", {"all": "All Exercises"}),
                ui.output_data_frame("tbl_history"),
                ui.layout_column_wrap(
                    ui.input_selectize("log_pick", "Select Entry", choices=[], width="100%"),
                    ui.input_action_button("btn_del_log", "Delete", class_="btn-danger"),
                    width=1/2,
                ),
            ),
            ui.card(
                ui.card_header(
                    ui.h4("💪 Strength Progress", class_="mb-0"),
                    class_="bg-primary text-white"
                ),
                output_widget("plot_1rm"),
            ),
            col_widths=cast(Any, {"lg": [6, 6]}),
        ),
    ),
    title="🏋️ LiftMax",
    theme=ui.Theme("cosmo"),
)
