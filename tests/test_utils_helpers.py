"""
Tests for helper functions

Covers route input parsing and lineup slot ordering.
"""
import pytest

from exceptions import ValidationException
from models.division import Division
from utils.helpers import is_starting_slot, parse_division, parse_team_id, slot_priority


class TestParseDivision:
    """Test division token validation."""

    def test_valid_tokens(self):
        assert parse_division("green") is Division.GREEN
        assert parse_division("white") is Division.WHITE
        assert parse_division(Division.WHITE) is Division.WHITE

    @pytest.mark.parametrize("token", ["Green", "WHITE", "blue", "", " green", None])
    def test_invalid_tokens(self, token):
        with pytest.raises(ValidationException, match="Invalid division"):
            parse_division(token)


class TestParseTeamId:
    """Test team id parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("1", 1),
        ("12", 12),
        (" 7 ", 7),
        ("0", 0),
        (5, 5),
    ])
    def test_valid_ids(self, value, expected):
        assert parse_team_id(value) == expected

    @pytest.mark.parametrize("value", ["abc", "1.5", "-3", "", "1e3", -1, True, None, 2.0])
    def test_invalid_ids(self, value):
        with pytest.raises(ValidationException, match="Invalid team id"):
            parse_team_id(value)


class TestSlotOrdering:
    """Test rostered slot ranking."""

    def test_starting_order(self):
        slots = ["K", "D/ST", "RB/WR/TE", "TE", "WR", "RB", "QB"]
        assert sorted(slots, key=slot_priority) == ["QB", "RB", "WR", "TE", "RB/WR/TE", "D/ST", "K"]

    def test_flex_aliases_share_rank(self):
        assert slot_priority("FLEX") == slot_priority("RB/WR/TE") == 5

    def test_reserves_rank_last(self):
        assert slot_priority("Bench") == 99
        assert slot_priority("IR") == 100

    def test_unknown_slot_ranks_with_bench(self):
        assert slot_priority("OP") == 99

    @pytest.mark.parametrize("slot,expected", [
        ("QB", True),
        ("K", True),
        ("OP", True),
        ("Bench", False),
        ("IR", False),
    ])
    def test_is_starting_slot(self, slot, expected):
        assert is_starting_slot(slot) is expected
