"""Tests for liftmax.classifier module."""
import pytest

from liftmax.classifier import ExerciseCategory, classify, normalize_name, parse_category
from liftmax.errors import InvalidArgument


class TestNormalizeName:
    """Test cases for normalize_name."""

    def test_lowercases_and_collapses_whitespace(self):
        assert normalize_name("  Incline   DB Press  ") == "incline db press"

    def test_strips_punctuation(self):
        assert normalize_name("Squat (High-Bar)!") == "squat highbar"

    def test_tabs_and_newlines(self):
        assert normalize_name("Leg\tPress\n") == "leg press"

    def test_none_and_empty(self):
        assert normalize_name(None) == ""
        assert normalize_name("   ") == ""


class TestClassify:
    """Test cases for classify."""

    @pytest.mark.parametrize("name", ["Leg Press", "Hack Squat", "Smith Machine Bench", "Seated Chest Press"])
    def test_machine(self, name):
        assert classify(name) == ExerciseCategory.MACHINE

    @pytest.mark.parametrize(
        "name",
        ["DB Bench Press", "Dumbbell Row", "Incline Dumbbell Press", "Goblet Squat", "Walking Lunges", "db curl"],
    )
    def test_dumbbell(self, name):
        assert classify(name) == ExerciseCategory.DUMBBELL

    @pytest.mark.parametrize(
        "name", ["Squat", "Bench Press", "Deadlift", "Overhead Press", "OHP", "Barbell Row", "Seated Cable Row"]
    )
    def test_compound(self, name):
        assert classify(name) == ExerciseCategory.COMPOUND

    def test_machine_checked_before_compound(self):
        """Hack squat contains "squat" but is a machine movement."""
        assert classify("Hack Squat") == ExerciseCategory.MACHINE

    def test_dumbbell_checked_before_compound(self):
        assert classify("Dumbbell Bench") == ExerciseCategory.DUMBBELL

    def test_db_needs_word_boundary(self):
        """"db" inside another word is not a dumbbell marker."""
        assert classify("Sandbag Carry") == ExerciseCategory.COMPOUND
        assert classify("Feedback Squat") == ExerciseCategory.COMPOUND

    def test_row_needs_word_boundary(self):
        assert classify("Arrow Drill") == ExerciseCategory.COMPOUND
        assert classify("Rowing") == ExerciseCategory.COMPOUND

    @pytest.mark.parametrize("name", ["Bicep Curl", "Plank", "", None])
    def test_unmatched_defaults_to_compound(self, name):
        assert classify(name) == ExerciseCategory.COMPOUND

    def test_case_insensitive(self):
        assert classify("LEG PRESS") == classify("leg press") == ExerciseCategory.MACHINE


class TestParseCategory:
    """Test cases for parse_category."""

    def test_values(self):
        assert parse_category("compound") == ExerciseCategory.COMPOUND
        assert parse_category(" Machine ") == ExerciseCategory.MACHINE
        assert parse_category(ExerciseCategory.DUMBBELL) == ExerciseCategory.DUMBBELL

    def test_absent(self):
        assert parse_category(None) is None
        assert parse_category("") is None

    def test_unknown(self):
        with pytest.raises(InvalidArgument):
            parse_category("cardio")
