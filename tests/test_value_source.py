"""Tests for value resolution and coalescing."""

import copy

import pytest

from conftest import make_release
from helm_edit.core.value_source import coalesce_values, release_values
from helm_edit.errors import NotFoundError
from helm_edit.models import ValueScope


class TestCoalesceValues:
    def test_override_wins_and_maps_merge(self):
        defaults = {"a": 1, "b": {"c": 2, "d": 3}}
        overrides = {"b": {"c": 99}, "e": 5}
        assert coalesce_values(defaults, overrides) == {"a": 1, "b": {"c": 99, "d": 3}, "e": 5}

    def test_null_override_removes_key(self):
        assert coalesce_values({"a": 1, "b": {"c": 2}}, {"a": None, "b": {"c": None}}) == {"b": {}}

    def test_null_override_for_absent_key_is_kept(self):
        assert coalesce_values({"a": 1}, {"b": None}) == {"a": 1, "b": None}
        assert coalesce_values({"a": {}}, {"a": {"x": None}}) == {"a": {"x": None}}

    def test_non_map_override_replaces_map(self):
        assert coalesce_values({"a": {"b": 1}}, {"a": [1]}) == {"a": [1]}

    def test_empty_inputs(self):
        assert coalesce_values({}, {}) == {}
        assert coalesce_values({"a": 1}, {}) == {"a": 1}
        assert coalesce_values({}, {"a": 1}) == {"a": 1}

    def test_inputs_untouched(self):
        defaults = {"a": {"b": 1}, "l": [1]}
        overrides = {"a": {"c": 2}, "l": [2]}
        snapshot = copy.deepcopy((defaults, overrides))
        merged = coalesce_values(defaults, overrides)
        merged["a"]["b"] = 100
        merged["l"].append(3)
        assert (defaults, overrides) == snapshot


class TestValueSource:
    def test_raw_returns_user_supplied_only(self, source_for):
        source = source_for(make_release(defaults={"a": 1, "b": 2}, config={"b": 3}))
        assert source.resolve("web", scope=ValueScope.RAW) == {"b": 3}

    def test_effective_merges_defaults(self, source_for):
        source = source_for(make_release(defaults={"a": 1, "b": {"c": 2}}, config={"b": {"c": 3}}))
        assert source.resolve("web", scope=ValueScope.EFFECTIVE) == {"a": 1, "b": {"c": 3}}

    def test_raw_without_overrides_is_empty_map(self, source_for):
        source = source_for(make_release(defaults={"a": 1}, config={}))
        assert source.resolve("web") == {}

    def test_latest_revision_by_default(self, source_for):
        source = source_for(
            make_release(version=1, config={"x": 1}),
            make_release(version=2, config={"x": 2}),
        )
        assert source.resolve("web") == {"x": 2}

    def test_pinned_revision(self, source_for):
        source = source_for(
            make_release(version=1, config={"x": 1}),
            make_release(version=2, config={"x": 2}),
        )
        assert source.resolve("web", revision=1) == {"x": 1}

    def test_unknown_release(self, source_for):
        source = source_for(make_release())
        with pytest.raises(NotFoundError, match="release 'api' not found"):
            source.resolve("api")

    def test_unknown_revision(self, source_for):
        source = source_for(make_release(version=1))
        with pytest.raises(NotFoundError, match="revision 7"):
            source.resolve("web", revision=7)

    def test_negative_revision_rejected(self, source_for):
        source = source_for(make_release())
        with pytest.raises(ValueError):
            source.resolve("web", revision=-1)

    def test_resolved_document_is_a_copy(self, source_for):
        release = make_release(config={"a": {"b": 1}})
        source = source_for(release)
        doc = source.resolve("web")
        doc["a"]["b"] = 2
        assert release.config == {"a": {"b": 1}}


def test_release_values_scopes():
    release = make_release(defaults={"a": 1}, config={"b": 2})
    assert release_values(release, ValueScope.RAW) == {"b": 2}
    assert release_values(release, ValueScope.EFFECTIVE) == {"a": 1, "b": 2}


def test_scope_from_flag():
    assert ValueScope.from_all_values(True) is ValueScope.EFFECTIVE
    assert ValueScope.from_all_values(False) is ValueScope.RAW
