"""Tests for the dependency merger."""

from __future__ import annotations

import itertools

from depcollect.scanner.merge import merge_dependency_group


class TestMergeDependencyGroup:
    def test_inserts_cleaned_version(self):
        target: dict[str, str] = {}
        merge_dependency_group({"lib": "^1.2.0"}, target)
        assert target == {"lib": "1.2.0"}

    def test_higher_version_replaces(self):
        target = {"lib": "1.2.0"}
        merge_dependency_group({"lib": "1.5.0"}, target)
        assert target == {"lib": "1.5.0"}

    def test_lower_version_kept_out(self):
        target = {"lib": "1.5.0"}
        merge_dependency_group({"lib": "~1.4.9"}, target)
        assert target == {"lib": "1.5.0"}

    def test_equal_version_keeps_first_seen(self):
        target = {"lib": "1.2"}
        merge_dependency_group({"lib": "1.2.0"}, target)
        assert target == {"lib": "1.2"}

    def test_names_are_case_sensitive(self):
        target: dict[str, str] = {}
        merge_dependency_group({"Lib": "1.0.0", "lib": "2.0.0"}, target)
        assert target == {"Lib": "1.0.0", "lib": "2.0.0"}

    def test_empty_group_is_noop(self):
        target = {"lib": "1.0.0"}
        merge_dependency_group({}, target)
        assert target == {"lib": "1.0.0"}

    def test_order_independent(self):
        groups = [
            {"a": "^1.0.0", "b": "2.0.0"},
            {"a": "1.3.0"},
            {"a": "~1.2.9", "b": "^2.1.0"},
        ]
        results = []
        for order in itertools.permutations(groups):
            target: dict[str, str] = {}
            for group in order:
                merge_dependency_group(group, target)
            results.append(target)
        assert all(r == {"a": "1.3.0", "b": "2.1.0"} for r in results)
