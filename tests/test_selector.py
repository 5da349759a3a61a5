"""Tests for liftmax.selector module."""
import pytest

from liftmax.classifier import ExerciseCategory
from liftmax.errors import InvalidArgument
from liftmax.formulas import FormulaKey
from liftmax.selector import (
    CATEGORY_REP_CAP,
    REP_ONLY_CAP,
    select_by_category,
    select_by_reps,
    select_formula,
)

COMPOUND = ExerciseCategory.COMPOUND
DUMBBELL = ExerciseCategory.DUMBBELL
MACHINE = ExerciseCategory.MACHINE


class TestRepOnlySelection:
    """Rep-range policy used without a category."""

    @pytest.mark.parametrize(
        "reps,expected",
        [
            (1, FormulaKey.EPLEY),
            (5, FormulaKey.EPLEY),
            (6, FormulaKey.BRZYCKI),
            (10, FormulaKey.BRZYCKI),
            (11, FormulaKey.LOMBARDI),
            (15, FormulaKey.LOMBARDI),
            (16, FormulaKey.MAYHEW),
            (20, FormulaKey.MAYHEW),
        ],
    )
    def test_buckets(self, reps, expected):
        choice = select_by_reps(reps)
        assert choice.one_rm_formula == expected
        assert choice.rep_max_formula == expected
        assert choice.capped_reps == reps

    def test_reps_capped_at_20(self):
        choice = select_by_reps(25)
        assert REP_ONLY_CAP == 20
        assert choice.capped_reps == 20
        assert choice.one_rm_formula == FormulaKey.MAYHEW


class TestCategorySelection:
    """Category-aware policy."""

    @pytest.mark.parametrize("category", list(ExerciseCategory))
    @pytest.mark.parametrize("reps", [1, 2, 3])
    def test_low_reps_treated_as_one_rm(self, category, reps):
        choice = select_by_category(reps, category)
        assert choice.one_rm_formula == FormulaKey.NONE
        assert choice.rep_max_formula == FormulaKey.EPLEY
        assert choice.label == "Treat as 1RM"

    @pytest.mark.parametrize(
        "reps,expected",
        [(4, FormulaKey.EPLEY), (10, FormulaKey.EPLEY), (11, FormulaKey.MAYHEW),
         (15, FormulaKey.MAYHEW), (20, FormulaKey.MAYHEW), (21, FormulaKey.BRZYCKI)],
    )
    def test_compound(self, reps, expected):
        assert select_by_category(reps, COMPOUND).one_rm_formula == expected

    @pytest.mark.parametrize(
        "reps,expected",
        [(4, FormulaKey.EPLEY), (8, FormulaKey.EPLEY), (9, FormulaKey.MAYHEW),
         (20, FormulaKey.MAYHEW), (21, FormulaKey.BRZYCKI)],
    )
    def test_dumbbell(self, reps, expected):
        assert select_by_category(reps, DUMBBELL).one_rm_formula == expected

    @pytest.mark.parametrize(
        "reps,expected",
        [(4, FormulaKey.BRZYCKI), (10, FormulaKey.BRZYCKI), (11, FormulaKey.MAYHEW),
         (15, FormulaKey.MAYHEW), (16, FormulaKey.BRZYCKI), (25, FormulaKey.BRZYCKI)],
    )
    def test_machine(self, reps, expected):
        assert select_by_category(reps, MACHINE).one_rm_formula == expected

    @pytest.mark.parametrize("category", list(ExerciseCategory))
    @pytest.mark.parametrize("reps", range(4, 31))
    def test_formulas_match_above_three_reps(self, category, reps):
        choice = select_by_category(reps, category)
        assert choice.one_rm_formula == choice.rep_max_formula

    def test_reps_capped_at_25(self):
        choice = select_by_category(40, COMPOUND)
        assert CATEGORY_REP_CAP == 25
        assert choice.capped_reps == 25
        assert choice.one_rm_formula == FormulaKey.BRZYCKI

    def test_accepts_category_string(self):
        assert select_by_category(9, "dumbbell").one_rm_formula == FormulaKey.MAYHEW

    @pytest.mark.parametrize("reps", [2, 9])
    def test_unknown_category_rejected(self, reps):
        with pytest.raises(InvalidArgument):
            select_by_category(reps, "cardio")

    def test_missing_category_rejected(self):
        with pytest.raises(InvalidArgument):
            select_by_category(2, None)

    def test_label_follows_formula(self):
        assert select_by_category(12, COMPOUND).label == "Mayhew"
        assert select_by_reps(8).label == "Brzycki"


class TestSelectFormula:
    """Dispatch between the two policies."""

    def test_without_category_uses_rep_ranges(self):
        assert select_formula(12).one_rm_formula == FormulaKey.LOMBARDI

    def test_with_category_uses_category_policy(self):
        assert select_formula(12, COMPOUND).one_rm_formula == FormulaKey.MAYHEW

    def test_three_reps_differs_between_policies(self):
        assert select_formula(3).one_rm_formula == FormulaKey.EPLEY
        assert select_formula(3, COMPOUND).one_rm_formula == FormulaKey.NONE
