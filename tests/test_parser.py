# SPDX-License-Identifier: MIT
"""Unit tests for version parsing."""

import logging

import pytest

from flexver import (
    InvalidVersionError,
    parse_semantic,
    parse_valid,
    parse_version,
    tokenize,
)


class TestTokenize:
    """Tests for the separator state machine."""

    def test_parts_only(self):
        assert tokenize("1.2.3") == (["1", "2", "3"], [], [])

    def test_all_segments(self):
        assert tokenize("1.2.3-4.5+6.7") == (["1", "2", "3"], ["4", "5"], ["6", "7"])

    def test_no_separators(self):
        assert tokenize("42") == (["42"], [], [])

    def test_empty_text(self):
        assert tokenize("") == ([], [], [])

    def test_empty_tokens_preserved(self):
        assert tokenize("1..2") == (["1", "", "2"], [], [])

    def test_trailing_separator(self):
        assert tokenize("1.2.") == (["1", "2", ""], [], [])
        assert tokenize("1.2-") == (["1", "2"], [""], [])

    def test_leading_separator(self):
        assert tokenize(".1") == (["", "1"], [], [])

    def test_plus_before_hyphen_separates_parts(self):
        """Test that "+" in the version parts acts like "."."""
        assert tokenize("1.0.0+build.5") == (["1", "0", "0", "build", "5"], [], [])

    def test_hyphen_inside_prerelease(self):
        assert tokenize("1.0.0-alpha-2.1") == (["1", "0", "0"], ["alpha-2", "1"], [])

    def test_separators_inside_build(self):
        assert tokenize("1.0.0-rc+x86-64+gcc") == (["1", "0", "0"], ["rc"], ["x86-64+gcc"])

    def test_consecutive_stage_separators(self):
        assert tokenize("1-+2") == (["1"], [""], ["2"])


class TestParseVersion:
    """Tests for parse_version function."""

    def test_basic_version(self):
        v = parse_version("1.2.3")
        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.prerelease == ()
        assert v.build == ()
        assert v.has_major and v.has_minor and v.has_patch
        assert v.is_semantic
        assert str(v) == "1.2.3"

    def test_two_parts(self):
        v = parse_version("1.2")
        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 0
        assert not v.has_patch
        assert not v.is_semantic
        assert str(v) == "1.2"

    def test_four_parts(self):
        v = parse_version("1.2.3.4")
        assert v.part_number(3) == 4
        assert not v.is_semantic
        assert str(v) == "1.2.3.4"

    def test_four_parts_with_prerelease(self):
        v = parse_version("1.2.3.4-Rel1")
        assert v.parts == ("1", "2", "3", "4")
        assert v.prerelease == ("Rel1",)
        assert not v.is_semantic

    def test_prerelease_and_build(self):
        v = parse_version("1.2.3-1.x6+0.a2")
        assert v.prerelease == ("1", "x6")
        assert v.build == ("0", "a2")
        assert v.is_semantic
        assert str(v) == "1.2.3-1.x6+0.a2"

    def test_mixed_case_prerelease(self):
        v = parse_version("1.2.3-Rel1")
        assert v.prerelease == ("Rel1",)
        assert v.is_semantic

    def test_source_kept_verbatim(self):
        text = "1..2-+-x"
        assert str(parse_version(text)) == text

    def test_source_not_compared(self):
        assert parse_version("1.2.3") == parse_version("1.2.3")
        assert parse_version("1.2.3").source == "1.2.3"

    def test_empty_string(self):
        v = parse_version("")
        assert v.parts == ()
        assert not v.is_valid
        assert str(v) == ""

    def test_none_input(self):
        assert parse_version(None) is None

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            parse_version(123)  # type: ignore

    def test_garbage_does_not_raise(self):
        v = parse_version("not a version!")
        assert v.parts == ("not a version!",)
        assert not v.is_semantic


class TestPrefix:
    """Tests for the leading literal."""

    def test_prefix_stripped(self):
        v = parse_version("v1.2.3", prefix="v")
        assert v.prefix == "v"
        assert v.parts == ("1", "2", "3")
        assert v.is_semantic
        assert str(v) == "v1.2.3"

    def test_prefix_absent_from_text(self):
        v = parse_version("1.2.3", prefix="v")
        assert v.prefix == ""
        assert v.parts == ("1", "2", "3")

    def test_prefix_ignored_by_equality(self):
        assert parse_version("v1.2.3", prefix="v") == parse_version("1.2.3")

    def test_prefix_rendered(self):
        v = parse_version("release-2.0", prefix="release-")
        assert v.render() == "release-2.0"


class TestParseValid:
    """Tests for parse_valid function."""

    def test_valid(self):
        assert parse_valid("1.2").major == 1

    def test_text_major_is_valid(self):
        """Test that a non-numeric major counts as 0."""
        assert parse_valid("x.1").major == 0

    def test_empty_raises(self):
        with pytest.raises(InvalidVersionError) as exc_info:
            parse_valid("")
        assert exc_info.value.reason == "valid"

    def test_leading_hyphen_gives_empty_major(self):
        """Test that a leading "-" gives an empty major and a pre-release."""
        assert parse_valid("-1.0").parts == ("",)

    def test_none_raises(self):
        with pytest.raises(InvalidVersionError, match="Invalid version"):
            parse_valid(None)

    def test_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="flexver.parser"):
            with pytest.raises(InvalidVersionError):
                parse_valid("")
        assert "Rejected invalid version" in caplog.text


class TestParseSemantic:
    """Tests for parse_semantic function."""

    def test_semantic(self):
        v = parse_semantic("1.0.0-alpha.1+build.456")
        assert v.prerelease == ("alpha", "1")
        assert v.build == ("build", "456")

    @pytest.mark.parametrize("text", ["1.0", "1.2.3.4", "1.0.0-al_pha", "1.0.0-", "1..0", ""])
    def test_not_semantic(self, text):
        with pytest.raises(InvalidVersionError, match="Not a semantic version") as exc_info:
            parse_semantic(text)
        assert exc_info.value.reason == "semantic"
        assert exc_info.value.version == text

    def test_none_raises(self):
        with pytest.raises(InvalidVersionError):
            parse_semantic(None)
