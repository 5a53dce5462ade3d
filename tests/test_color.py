"""Tests for the color module."""

from colorize.core.color import (
    DEFAULT_HIGHLIGHT,
    SHORTCUTS,
    ColorResolver,
    extend_color_map,
    is_integer,
    resolve_color_spec,
)


class TestResolveColorSpec:
    """Tests for color map resolution."""

    def test_shortcuts_match_numbers(self):
        """Test that "red+bold" is the same as "31+1"."""
        assert resolve_color_spec("red+bold") == ["\033[31;1m"]
        assert resolve_color_spec("31+1") == resolve_color_spec("red+bold")

    def test_groups(self):
        """Test one code per comma separated group."""
        result = resolve_color_spec("green+bold,blue+bold")

        assert result == ["\033[32;1m", "\033[34;1m"]

    def test_multi_value_shortcut(self):
        """Test shortcuts that expand to several parameters."""
        assert resolve_color_spec("gray") == ["\033[38;5;245m"]
        assert resolve_color_spec("grayB+bold") == ["\033[48;5;245;1m"]

    def test_raw_passthrough(self):
        """Test that unknown segments are passed through literally."""
        result = resolve_color_spec("red+32;2;255;82;197;48;2;155;106;0")

        assert result == ["\033[31;32;2;255;82;197;48;2;155;106;0m"]

    def test_garbage_is_not_an_error(self):
        """Test that malformed specs still produce a sequence."""
        assert resolve_color_spec("notacolor") == ["\033[notacolorm"]
        assert resolve_color_spec("") == ["\033[m"]
        assert resolve_color_spec("red,") == ["\033[31m", "\033[m"]

    def test_white_shares_cyan_codes(self):
        """Test that white and cyan keep their shared codes."""
        assert SHORTCUTS["white"] == SHORTCUTS["cyan"] == "36"
        assert SHORTCUTS["whiteB"] == SHORTCUTS["cyanB"] == "46"
        assert resolve_color_spec("white") == resolve_color_spec("cyan")

    def test_shortcut_names_are_case_sensitive(self):
        """Test that "Red" is not the red shortcut."""
        assert resolve_color_spec("Red") == ["\033[Redm"]

    def test_leading_plus_is_a_separator(self):
        """Test that a leading plus yields an empty first segment."""
        assert resolve_color_spec("+5") == ["\033[;5m"]

    def test_signed_integer_verbatim(self):
        """Test that signed integers are kept as written."""
        assert ColorResolver().resolve_segment("-1") == "-1"
        assert is_integer("-1")
        assert not is_integer("1.5")
        assert not is_integer("")


class TestColorResolver:
    """Tests for ColorResolver class."""

    def test_resolve_segment(self):
        """Test resolving individual segments."""
        resolver = ColorResolver()

        assert resolver.resolve_segment("7") == "7"
        assert resolver.resolve_segment("reverse") == "7"
        assert resolver.resolve_segment("38;5;1") == "38;5;1"

    def test_extra_shortcuts(self):
        """Test user defined shortcuts."""
        resolver = ColorResolver({"orange": "38;5;208"})

        assert resolver.resolve("orange+bold") == ["\033[38;5;208;1m"]

    def test_builtin_shortcuts_cannot_be_redefined(self, caplog):
        """Test that built-in names win over user shortcuts."""
        resolver = ColorResolver({"red": "91"})

        assert resolver.resolve("red") == ["\033[31m"]
        assert "built-in names cannot be redefined" in caplog.text

    def test_resolve_all_accumulates(self):
        """Test that several specifications accumulate in order."""
        resolver = ColorResolver()

        result = resolver.resolve_all(["red", "blue"])

        assert result == ["\033[31m", "\033[34m"]

    def test_resolve_all_appends_without_modifying(self):
        """Test appending to an existing color map."""
        resolver = ColorResolver()
        existing = ["\033[1m"]

        result = resolver.resolve_all(["green,yellow"], existing)

        assert result == ["\033[1m", "\033[32m", "\033[33m"]
        assert existing == ["\033[1m"]


class TestExtendColorMap:
    """Tests for extend_color_map function."""

    def test_empty_is_seeded_with_default(self):
        """Test that an empty map gets the default highlight."""
        assert extend_color_map([], 0) == [DEFAULT_HIGHLIGHT]
        assert extend_color_map([], 3) == [DEFAULT_HIGHLIGHT] * 3
        assert DEFAULT_HIGHLIGHT == "\033[1;31m"

    def test_last_entry_repeated(self):
        """Test that the last entry spills over to remaining patterns."""
        result = extend_color_map(["a", "b"], 4)

        assert result == ["a", "b", "b", "b"]

    def test_sufficient_map_unchanged(self):
        """Test that extending a long enough map is a no-op."""
        color_map = ["a", "b", "c"]

        for size in range(0, 4):
            assert extend_color_map(color_map, size) == color_map

    def test_length_invariant(self):
        """Test the length guarantees for a range of inputs."""
        for original in ([], ["a"], ["a", "b", "c"]):
            for size in range(0, 6):
                result = extend_color_map(original, size)
                assert len(result) >= max(size, 1)
                assert len(result) >= len(original)
                assert result[: len(original)] == original

    def test_argument_not_modified(self):
        """Test that the input list is left alone."""
        color_map = ["a"]

        extend_color_map(color_map, 3)

        assert color_map == ["a"]

    def test_spillover_single_group(self):
        """Test three patterns sharing a single color group."""
        result = extend_color_map(resolve_color_spec("green"), 3)

        assert result == ["\033[32m"] * 3
