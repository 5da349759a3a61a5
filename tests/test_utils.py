"""Tests for liftmax.utils module."""
import pytest

from liftmax.errors import InvalidArgument
from liftmax.utils import REQUIRED_TABS, normalize_decimal, parse_reps, parse_sets, parse_weight


class TestNormalizeDecimal:
    """Test cases for normalize_decimal."""

    def test_numbers(self):
        assert normalize_decimal(5) == 5.0
        assert normalize_decimal(102.5) == 102.5

    def test_comma_separator(self):
        assert normalize_decimal("102,5") == 102.5
        assert normalize_decimal(" 80.25 ") == 80.25

    @pytest.mark.parametrize("value", [None, "", "  ", "abc", True])
    def test_unparseable(self, value):
        assert normalize_decimal(value) is None


class TestParseFields:
    """Test cases for form field parsing."""

    def test_weight(self):
        assert parse_weight("225") == 225.0
        assert parse_weight("92,5") == 92.5

    @pytest.mark.parametrize("value", [None, "", "0", "-10", "heavy"])
    def test_invalid_weight(self, value):
        with pytest.raises(InvalidArgument, match="valid weight"):
            parse_weight(value)

    def test_reps(self):
        assert parse_reps("8") == 8
        assert parse_reps(5.0) == 5
        assert parse_reps(30) == 30

    @pytest.mark.parametrize("value", [None, "", "0", "31", "2.5", "many"])
    def test_invalid_reps(self, value):
        with pytest.raises(InvalidArgument, match="between 1 and 30"):
            parse_reps(value)


class TestParseSets:
    """Test cases for the optional sets field."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_is_none(self, value):
        assert parse_sets(value) is None

    @pytest.mark.parametrize("value,expected", [("3", 3), ("4.0", 4), (5, 5), ("20", 20)])
    def test_whole_numbers(self, value, expected):
        assert parse_sets(value) == expected

    @pytest.mark.parametrize("value", ["2.5", "2,5", "0", "-1", "21", "abc"])
    def test_rejected(self, value):
        with pytest.raises(InvalidArgument, match="between 1 and 20"):
            parse_sets(value)


class TestConstants:
    """Test module constants."""

    def test_logs_schema(self):
        assert REQUIRED_TABS["Logs"] == [
            "id", "date", "exercise", "weight", "reps", "sets", "calculated_one_rm", "one_rm_formula", "notes"
        ]

    def test_exercises_schema(self):
        assert REQUIRED_TABS["Exercises"] == ["name", "position"]
