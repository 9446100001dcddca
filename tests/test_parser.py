"""
Tests for pepver.versioning.parser module.

Tests version string parsing including:
- Release, epoch, pre, post, dev and local segments
- Alias normalization (alpha/beta/c/pre/preview)
- Default numbers for bare labels
- Separator and case tolerance
- Malformed input rejection
- Shared, lazily built grammar
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from pepver.exceptions import MalformedVersion
from pepver.versioning import Version, parse_version
from pepver.versioning import parser as parser_module


class TestReleaseSegment:
    """Tests for the mandatory release segment."""

    def test_parse_release_version(self):
        """Test a plain three-part release."""
        v = parse_version("1.5.3")
        assert v.release == (1, 5, 3)
        assert v.epoch is None
        assert v.pre is None
        assert v.post is None
        assert v.dev is None
        assert v.local is None

    def test_leading_zeros_dropped(self):
        """Test that leading zeros carry no meaning."""
        assert parse_version("1.05.3").release == (1, 5, 3)
        assert parse_version("007").release == (7,)

    def test_single_component(self):
        """Test a one-number release."""
        assert parse_version("2024").release == (2024,)

    def test_release_not_padded(self):
        """Test that the stored release keeps its own length."""
        assert parse_version("1.5").release == (1, 5)
        assert parse_version("1.5.0").release == (1, 5, 0)

    def test_raw_string_kept(self):
        """Test that the original input is kept unchanged."""
        assert parse_version("  v1.05.3 ").raw == "  v1.05.3 "

    def test_whitespace_and_v_prefix(self):
        """Test that surrounding whitespace and a leading v are ignored."""
        assert parse_version("  1.0\n").release == (1, 0)
        assert parse_version("v1.2.3").release == (1, 2, 3)
        assert parse_version("V1.2.3").release == (1, 2, 3)


class TestEpoch:
    """Tests for the optional epoch prefix."""

    def test_epoch_with_dev(self):
        """Test epoch combined with a dev segment."""
        v = parse_version("2!1.dev0")
        assert v.epoch == 2
        assert v.release == (1,)
        assert v.dev == 0

    def test_epoch_absent_is_none(self):
        """Test that a missing epoch is None, not 0."""
        assert parse_version("1.0").epoch is None

    def test_explicit_zero_epoch(self):
        """Test that an explicit 0! is preserved."""
        assert parse_version("0!1.0").epoch == 0


class TestPreRelease:
    """Tests for pre-release parsing and alias normalization."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1.5alpha1", ("a", 1)),
            ("1.5a1", ("a", 1)),
            ("1.5b2", ("b", 2)),
            ("1.5beta2", ("b", 2)),
            ("1.5rc5", ("rc", 5)),
            ("1.5c5", ("rc", 5)),
            ("1.5pre5", ("rc", 5)),
            ("1.5-preview1", ("rc", 1)),
        ],
    )
    def test_labels(self, raw, expected):
        """Test every accepted label and its canonical form."""
        v = parse_version(raw)
        assert v.release == (1, 5)
        assert v.pre == expected

    def test_preview_matches_rc(self):
        """Test that preview and rc normalize to the same label."""
        assert parse_version("1.5.3-preview1").pre == parse_version("1.5.3rc1").pre

    def test_label_without_number_defaults_to_zero(self):
        """Test that a bare label gets number 0."""
        assert parse_version("1.0rc").pre == ("rc", 0)
        assert parse_version("1.0-beta").pre == ("b", 0)

    @pytest.mark.parametrize("raw", ["1.0-a1", "1.0_a1", "1.0.a1", "1.0a.1", "1.0a-1", "1.0a_1"])
    def test_separators(self, raw):
        """Test separators before the label and before the number."""
        assert parse_version(raw).pre == ("a", 1)

    def test_case_insensitive(self):
        """Test upper and mixed case labels."""
        assert parse_version("1.0RC1").pre == ("rc", 1)
        assert parse_version("1.0Alpha2").pre == ("a", 2)


class TestPostRelease:
    """Tests for post-release parsing."""

    def test_labeled_post(self):
        """Test the labeled post form."""
        v = parse_version("1.3.9-post12")
        assert v.release == (1, 3, 9)
        assert v.post == 12

    @pytest.mark.parametrize("raw", ["1.0.post1", "1.0post1", "1.0-rev1", "1.0r1", "1.0_post_1"])
    def test_post_spellings(self, raw):
        """Test post/rev/r labels with different separators."""
        assert parse_version(raw).post == 1

    def test_implicit_post(self):
        """Test the bare -N form."""
        v = parse_version("1.0-1")
        assert v.post == 1
        assert v.pre is None

    def test_post_without_number(self):
        """Test that a bare post label gets number 0."""
        assert parse_version("1.0.post").post == 0

    def test_pre_then_implicit_post(self):
        """Test -N directly after a pre-release segment."""
        v = parse_version("1.0a1-2")
        assert v.pre == ("a", 1)
        assert v.post == 2


class TestDevRelease:
    """Tests for dev-release parsing."""

    def test_dev(self):
        """Test a plain dev segment."""
        v = parse_version("1.dev0")
        assert v.release == (1,)
        assert v.dev == 0

    def test_dev_without_number(self):
        """Test that a bare dev label gets number 0."""
        assert parse_version("1.0dev").dev == 0

    def test_full_combination(self):
        """Test every segment at once."""
        v = parse_version("1!2.0.1rc3.post4.dev5+ubuntu.1")
        assert v.epoch == 1
        assert v.release == (2, 0, 1)
        assert v.pre == ("rc", 3)
        assert v.post == 4
        assert v.dev == 5
        assert v.local == "ubuntu.1"


class TestLocalVersion:
    """Tests for local version labels."""

    def test_local(self):
        """Test a dotted local label."""
        assert parse_version("1.2.3+some.local.version").local == "some.local.version"

    def test_local_normalized(self):
        """Test lower-casing and separator normalization."""
        assert parse_version("1.0+Ubuntu-1_Focal").local == "ubuntu.1.focal"


class TestMalformed:
    """Tests for inputs that must be rejected."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "   ",
            "abc",
            "v",
            "1.2.3-",
            "1.2.3.",
            "1.0a.",
            "1.0gamma1",
            "1.0+",
            "1.0+local..x",
            "1.0 extra",
            "!1.0",
            "1.x",
            "1.0-dev-",
        ],
    )
    def test_rejected(self, raw):
        """Test that malformed strings raise MalformedVersion."""
        with pytest.raises(MalformedVersion) as exc_info:
            parse_version(raw)
        assert exc_info.value.raw == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "1.0.po\u017ft1",  # LATIN SMALL LETTER LONG S
            "1.0+\u0130",  # LATIN CAPITAL LETTER I WITH DOT ABOVE
            "1.0+\u212a",  # KELVIN SIGN
            "1.0.dev\u0661",  # ARABIC-INDIC DIGIT ONE
        ],
    )
    def test_non_ascii_rejected(self, raw):
        """Test that non-ASCII look-alikes of labels and digits are not accepted."""
        with pytest.raises(MalformedVersion) as exc_info:
            parse_version(raw)
        assert exc_info.value.raw == raw

    def test_local_stays_ascii(self):
        """Test that an accepted local label formats back to the same ASCII text."""
        v = parse_version("1.0+Ubuntu-1")
        assert str(v) == "1.0+ubuntu.1"
        assert str(v).isascii()
        assert parse_version(str(v)) == v

    def test_malformed_is_value_error(self):
        """Test that MalformedVersion can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_version("abc")

    def test_non_string_rejected(self):
        """Test that non-string input raises TypeError."""
        with pytest.raises(TypeError):
            parse_version(1.0)  # type: ignore[arg-type]

    def test_empty_release_rejected_by_constructor(self):
        """Test that a Version cannot be built without a release."""
        with pytest.raises(MalformedVersion):
            Version(release=())


class TestGrammar:
    """Tests for the shared compiled grammar."""

    def test_grammar_built_once(self):
        """Test that repeated lookups return the same object."""
        first = parser_module._get_grammar()
        assert parser_module._get_grammar() is first

    def test_concurrent_parsing(self):
        """Test parsing from many threads at once."""
        inputs = ["1.0", "1.0a1", "2!3.4.post5", "1.0+abc"] * 50
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(parse_version, inputs))
        assert [str(v) for v in results[:4]] == ["1.0", "1.0a1", "2!3.4.post5", "1.0+abc"]
