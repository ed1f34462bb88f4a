"""Tests for version normalisation and comparison."""

from __future__ import annotations

import pytest

from depcollect.scanner.versions import clean_version, is_version_higher, version_key


class TestCleanVersion:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("^1.2.3", "1.2.3"),
            ("~2.0", "2.0"),
            (">3.1.0", "3.1.0"),
            ("<4", "4"),
            ("=5.0.0", "5.0.0"),
            ("1.2.3", "1.2.3"),
        ],
    )
    def test_strips_operator(self, raw, expected):
        assert clean_version(raw) == expected

    def test_removes_only_one_character(self):
        assert clean_version(">=3.1.0") == "=3.1.0"

    def test_idempotent_for_single_prefix(self):
        once = clean_version("^1.0.0")
        assert clean_version(once) == once

    def test_non_numeric_left_alone(self):
        assert clean_version("latest") == "latest"
        assert clean_version("workspace:*") == "workspace:*"

    def test_empty_string(self):
        assert clean_version("") == ""


class TestVersionKey:
    def test_numeric_components(self):
        assert version_key("1.22.333") == [1, 22, 333]

    def test_suffix_ignored(self):
        assert version_key("1.0.0-beta") == [1, 0, 0]

    def test_non_numeric_is_zero(self):
        assert version_key("1.x") == [1, 0]
        assert version_key("latest") == [0]

    def test_only_ascii_digits_count(self):
        # ARABIC-INDIC DIGIT ONE
        assert version_key("\u0661.2") == [0, 2]


class TestIsVersionHigher:
    @pytest.mark.parametrize(
        "higher, lower",
        [
            ("1.5.0", "1.2.0"),
            ("2.0.0", "1.99.99"),
            ("1.10.0", "1.9.0"),
            ("1.2.1", "1.2"),
            ("10", "9.9.9"),
        ],
    )
    def test_ordering(self, higher, lower):
        assert is_version_higher(higher, lower) is True
        assert is_version_higher(lower, higher) is False

    @pytest.mark.parametrize("version", ["1.2.3", "0", "1.0.0-beta", "latest", ""])
    def test_equal_is_not_higher(self, version):
        assert is_version_higher(version, version) is False

    def test_missing_component_counts_as_zero(self):
        assert is_version_higher("1.2", "1.2.0") is False
        assert is_version_higher("1.2.0", "1.2") is False

    def test_prerelease_compares_as_release(self):
        assert is_version_higher("1.0.0", "1.0.0-beta") is False
        assert is_version_higher("1.0.1-rc.1", "1.0.0") is True

    def test_non_numeric_does_not_raise(self):
        assert is_version_higher("1.0.0", "latest") is True
        assert is_version_higher("*", "0.0.1") is False
