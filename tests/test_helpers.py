"""Tests for numeric, text and game time helpers."""

import pytest
from pydantic import ValidationError

from dmlib import NOTHING, irange, reduce
from dmlib.config import DEFAULT_CONFIG
from dmlib.helpers import gametime, numeric, text


class TestNumeric:
    """Tests for numeric helpers."""

    def test_clamps(self):
        """Test minimum, maximum and range clamps."""
        assert numeric.force_min(0)(-3) == 0
        assert numeric.force_max(10)(30) == 10
        assert numeric.force_range(0, 10)(5) == 5
        assert numeric.force_range(0, 10)(-1) == 0
        assert numeric.force_positive(-2) == 0
        assert numeric.force_percent(1.5) == 1

    def test_defaults(self):
        """Test absent values fall back and 0 is kept."""
        assert numeric.default_mult(None) == 1
        assert numeric.default_base(NOTHING) == 0
        assert numeric.default_base(0) == 0
        assert numeric.default_mult(3) == 3

    def test_float_equals(self):
        """Test comparison within the default and explicit precision."""
        assert numeric.float_equals(1.0, 1.0005)
        assert not numeric.float_equals(1.0, 1.01)
        assert numeric.float_equals(1.0, 1.01, precision=0.1)

    def test_float_equals_uses_config(self):
        """Test the precision is read from the config."""
        loose = DEFAULT_CONFIG.with_overrides(float_precision=0.5)
        assert numeric.float_equals(1.0, 1.4, config=loose)

    def test_bool_base_returns_zero_as_data(self):
        """Test a false predicate gives 0."""
        assert numeric.bool_base(lambda x: x * 2, True)(3) == 6
        assert numeric.bool_base(lambda x: x * 2, False)(3) == 0

    def test_bool_multiplier(self):
        """Test a false predicate leaves the value unchanged."""
        assert numeric.bool_multiplier(lambda x: x * 2, True)(3) == 6
        assert numeric.bool_multiplier(lambda x: x * 2, False)(3) == 3
        assert numeric.bool_mult(True, 3, 2) == 6
        assert numeric.bool_mult(False, 3, 2) == 3

    def test_round_half_up(self):
        """Test halves round towards positive infinity."""
        assert numeric.round_half_up(2.5) == 3
        assert numeric.round_half_up(2.4) == 2
        assert numeric.round_half_up(-0.5) == 0

    def test_skyrim_bool(self):
        """Test only 1 is true."""
        assert numeric.skyrim_bool(1)
        assert not numeric.skyrim_bool(0)
        assert not numeric.skyrim_bool(None)

    def test_lin_curve(self):
        """Test the line passes through both points."""
        f = numeric.lin_curve({"x": 24, "y": 2}, {"x": 96, "y": 16})
        assert f(24) == pytest.approx(2)
        assert f(96) == pytest.approx(16)
        assert f(0) == pytest.approx(-2.6666666666667)

    def test_exp_curve(self):
        """Test the exponential passes through both points."""
        p1 = numeric.Point(x=0, y=3)
        p2 = numeric.Point(x=1, y=0.5)
        f = numeric.exp_curve(-2.3, p1, p2)
        assert f(0) == pytest.approx(3)
        assert f(1) == pytest.approx(0.5)

    def test_curve_point_validation(self):
        """Test malformed points are rejected when the curve is built."""
        with pytest.raises(ValidationError):
            numeric.lin_curve({"x": "left"}, {"x": 1, "y": 1})

    def test_coincident_points_fail_on_call(self):
        """Test building a curve on equal x values succeeds and calling it fails."""
        line = numeric.lin_curve({"x": 1, "y": 0}, {"x": 1, "y": 5})
        curve = numeric.exp_curve(-2.3, {"x": 1, "y": 0}, {"x": 1, "y": 5})

        with pytest.raises(ZeroDivisionError):
            line(2)
        with pytest.raises(ZeroDivisionError):
            curve(2)


class TestText:
    """Tests for text helpers."""

    def test_fmt(self):
        """Test printf style formatting."""
        assert text.fmt("%s has %d hp", "Lydia", 10) == "Lydia has 10 hp"

    def test_get_file_name(self):
        """Test both path separators and the no-directory case."""
        assert text.get_file_name("C:\\Skyrim\\Data\\mod.esp") == "mod.esp"
        assert text.get_file_name("data/scripts/init.lua") == "init.lua"
        assert text.get_file_name("plain.txt") is NOTHING

    def test_trim(self):
        """Test left, right and full trims."""
        assert text.triml("  a  ") == "a  "
        assert text.trimr("  a  ") == "  a"
        assert text.trim("  a  ") == "a"

    def test_enclose(self):
        """Test enclosing with one or two delimiters."""
        assert text.enclose_str("x", "[", "]") == "[x]"
        assert text.enclose_str("x", "*") == "*x*"
        assert text.enclose_single_quote("x") == "'x'"
        assert text.enclose_double_quote("x") == '"x"'

    def test_reduce_str(self):
        """Test string joins as reduce callbacks."""
        assert reduce(["a", "b", "c"], "", text.reduce_comma) == "a,b,c"
        assert reduce(["a", "b"], "", text.reduce_comma_pretty) == "a, b"
        assert reduce([], "", text.reduce_comma) == ""

    def test_number_formats(self):
        """Test percent, hex, color and padding formats."""
        assert text.float_to_percent_str(0.256) == "25.60%"
        assert text.int_to_hex_lower(255) == "ff"
        assert text.int_to_hex_upper(255) == "FF"
        assert text.print_color(0xFF) == "0000FF"
        assert text.pad_zeros(7, 3) == "007"
        assert text.pad_zeros(1234, 2) == "1234"

    def test_append_str(self):
        """Test the prefix is prepended to the value."""
        assert text.append_str("hp: ")(10) == "hp: 10"


class TestGameTime:
    """Tests for game time conversions."""

    def test_conversions(self):
        """Test days to hours and back."""
        assert gametime.to_human_hours(2.0) == 48
        assert gametime.to_human_hours(0.5) == 12
        assert gametime.to_game_hours(48) == 2.0
        assert gametime.to_game_hours(12) == 0.5

    def test_configured_day_length(self):
        """Test the day length is read from the config."""
        short_days = DEFAULT_CONFIG.with_overrides(game_hours_per_day=12)
        assert gametime.to_human_hours(1, short_days) == 12

    def test_round_trip_over_range(self):
        """Test conversions invert each other."""
        assert [gametime.to_game_hours(gametime.to_human_hours(d)) for d in irange(3)] == [1, 2, 3]
