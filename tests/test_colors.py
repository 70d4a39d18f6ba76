# test_colors.py

import re
import math

import pytest

from adcolors.style.colors import (
    BLACK, color_distance, mix, nearest_named_color, parse_hex, resolve_color,
)
from adcolors.style.definitions import (
    ANSI_HEX, COLORS, EXTENDED_COLORS, NAMED_COLORS, merge_named_colors,
)
from adcolors.style.blending import blend, generate_shades, gradient, rainbow
from adcolors.style.engine import color
from adcolors.text import strip

TRUE_COLOR = re.compile(r'\x1b\[38;2;\d+;\d+;\d+m')


class TestNamedColors:
    """Construction of the combined named-color table."""

    def test_extended_names_win_and_come_first(self):
        merged = merge_named_colors(
            {"shared": "#000000", "ansi_only": "#111111"},
            {"shared": "#FFFFFF", "extended_only": "#222222"},
        )
        assert merged["shared"] == "#FFFFFF"
        assert list(merged) == ["shared", "extended_only", "ansi_only"]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            NAMED_COLORS["red"] = "#FF0000"

    def test_table_contents(self):
        assert len(NAMED_COLORS) == len(EXTENDED_COLORS) + len(ANSI_HEX)
        names = list(NAMED_COLORS)
        assert names[0] == "maroon"
        assert names[-1] == "bright_white"
        assert len(EXTENDED_COLORS) >= 50


class TestResolveColor:
    """Parsing of every accepted color representation."""

    @pytest.mark.parametrize("value", ["red", "#CD0000", "CD0000", "#cd0000", (205, 0, 0), [205, 0, 0]])
    def test_same_color_resolves_identically(self, value):
        assert resolve_color(value) == (205, 0, 0)

    def test_extended_name(self):
        assert resolve_color("dodgerblue") == (30, 144, 255)

    @pytest.mark.parametrize("value, expected", [("#abc", (170, 187, 204)), ("fff", (255, 255, 255))])
    def test_short_hex_is_doubled(self, value, expected):
        assert resolve_color(value) == expected

    @pytest.mark.parametrize("value", [
        "not-a-color", "#12345", "#GGGGGG", "", 42, None, [1, 2], ["a", "b", "c"], (1, 2, 3, 4), (True, 0, 0),
    ])
    def test_unresolvable_input_is_black(self, value):
        assert resolve_color(value) == BLACK

    def test_parse_hex_rejects_short_form_when_asked(self):
        assert parse_hex("#abc", allow_short=False) is None
        assert parse_hex("#aabbcc", allow_short=False) == (170, 187, 204)


class TestMix:
    """Channel math of the blend modes."""

    def test_normal_rounds_halves_up(self):
        assert mix((0, 0, 0), (255, 255, 255), 0.5) == (128, 128, 128)

    def test_normal_endpoints(self):
        assert mix((10, 20, 30), (200, 100, 0), 0.0) == (10, 20, 30)
        assert mix((10, 20, 30), (200, 100, 0), 1.0) == (200, 100, 0)

    def test_multiply(self):
        assert mix((255, 128, 0), (128, 255, 255), mode="multiply") == (128, 128, 0)

    def test_screen(self):
        assert mix((0, 0, 0), (100, 150, 200), mode="screen") == (100, 150, 200)
        assert mix((255, 0, 0), (0, 0, 255), mode="screen") == (255, 0, 255)

    def test_unknown_mode_is_normal(self):
        assert mix((0, 0, 0), (100, 100, 100), 0.5, mode="overlay") == (50, 50, 50)


class TestBlend:
    """Blended text output."""

    @pytest.mark.parametrize("ratio", [0.0, 0.3, 0.5, 1.0])
    def test_blend_with_itself_is_noop(self, ratio):
        assert blend("text", "red", "red", ratio) == color.rgb(205, 0, 0)("text")

    @pytest.mark.parametrize("mode", ["normal", "multiply", "screen"])
    def test_blend_pure_color_with_itself_in_every_mode(self, mode):
        assert blend("t", "bright_magenta", "#FF00FF", 0.7, mode) == color.rgb(255, 0, 255)("t")

    def test_blend_is_one_span(self):
        out = blend("hello", "black", "#FFFFFF")
        assert out == color.rgb(128, 128, 128)("hello")
        assert len(TRUE_COLOR.findall(out)) == 1


class TestGradient:
    """Per-character gradients."""

    def test_per_character_fraction(self):
        out = gradient("abcd", "#000000", "#FFFFFF")
        expected = "".join(color.rgb(v, v, v)(c) for v, c in zip([0, 64, 128, 191], "abcd"))
        assert out == expected
        assert strip(out) == "abcd"

    def test_last_character_stops_short_of_end_color(self):
        out = gradient("ab", "black", "#FFFFFF")
        assert color.rgb(255, 255, 255).prefix not in out

    def test_equal_endpoints_give_one_color(self):
        out = gradient("same color", "teal", "#008080")
        codes = TRUE_COLOR.findall(out)
        assert len(codes) == len("same color")
        assert set(codes) == {"\x1b[38;2;0;128;128m"}

    def test_empty_text(self):
        assert gradient("", "red", "blue") == ""


class TestRainbowAndShades:

    def test_rainbow_cycles(self):
        out = rainbow("abcdefg")
        assert strip(out) == "abcdefg"
        assert out.startswith(color.red("a"))
        assert out.endswith(color.red("g"))
        assert color.magenta("f") in out

    def test_darken(self):
        shades = generate_shades("#FFFFFF", 3)
        assert shades == [color.rgb(255, 255, 255), color.rgb(128, 128, 128), color.rgb(0, 0, 0)]

    def test_lighten(self):
        assert generate_shades("black", 2, "lighten") == [color.rgb(0, 0, 0), color.rgb(255, 255, 255)]

    def test_small_counts(self):
        assert generate_shades("red", 1) == [color.rgb(205, 0, 0)]
        assert generate_shades("red", 0) == []


class TestNearestNamedColor:

    def test_color_in_table_is_its_own_match(self):
        assert nearest_named_color(resolve_color("red")) == "red"
        assert nearest_named_color("crimson") == "crimson"

    def test_nearest(self):
        assert nearest_named_color((250, 0, 0)) == "bright_red"

    def test_ties_go_to_first_entry(self):
        # mediumblue and blue share #0000CD; extended names are enumerated first
        assert nearest_named_color("#0000CD") == "mediumblue"

    def test_distance(self):
        assert color_distance((0, 0, 0), (3, 4, 0)) == 5.0
        assert math.isclose(color_distance((0, 0, 0), (255, 255, 255)), 255 * math.sqrt(3))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
