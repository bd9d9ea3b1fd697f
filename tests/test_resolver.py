"""Tests for dotted-path resolution."""

from samplerank.ordering.resolver import ABSENT, is_absent, resolve


class TestResolve:
    def test_top_level_key(self):
        assert resolve({"priority": "alta"}, "priority") == "alta"

    def test_nested_key(self):
        assert resolve({"quality": {"score": 72}}, "quality.score") == 72

    def test_list_index(self):
        entity = {"tests": [{"score": 1}, {"score": 2}]}
        assert resolve(entity, "tests.1.score") == 2

    def test_missing_segment_is_absent(self):
        assert resolve({"quality": {}}, "quality.score") is ABSENT

    def test_non_traversable_intermediate_is_absent(self):
        assert resolve({"quality": 5}, "quality.score") is ABSENT
        assert resolve({"code": "abc"}, "code.0") is ABSENT

    def test_index_out_of_range_or_not_numeric(self):
        entity = {"tests": [1]}
        assert resolve(entity, "tests.3") is ABSENT
        assert resolve(entity, "tests.first") is ABSENT
        assert resolve(entity, "tests.-1") is ABSENT

    def test_none_leaf_is_absent(self):
        assert resolve({"priority": None}, "priority") is ABSENT

    def test_falsy_values_are_present(self):
        assert resolve({"urgent": False}, "urgent") is False
        assert resolve({"score": 0}, "score") == 0

    def test_empty_or_malformed_path(self):
        assert resolve({"a": 1}, "") is ABSENT
        assert resolve({"a": 1}, "   ") is ABSENT
        assert resolve({"a": {"b": 1}}, "a..b") is ABSENT

    def test_non_mapping_entity(self):
        assert resolve(None, "a") is ABSENT
        assert resolve(42, "a") is ABSENT


class TestAbsent:
    def test_singleton_and_falsy(self):
        assert is_absent(ABSENT)
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"
        assert type(ABSENT)() is ABSENT
