import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent / "src"))

from jsonfs.utils.deep_merge import NodeKind, deep_merge, node_kind


def test_nested_objects_merge_key_by_key():
    base = {"theme": "light", "nested": {"a": 1, "b": 2}}
    merged = deep_merge(base, {"nested": {"b": 3}})
    assert merged == {"theme": "light", "nested": {"a": 1, "b": 3}}


def test_keys_only_in_base_are_preserved():
    merged = deep_merge({"a": 1, "b": {"c": 2}}, {"d": 4})
    assert merged == {"a": 1, "b": {"c": 2}, "d": 4}


def test_new_object_key_is_taken_verbatim():
    merged = deep_merge({"a": 1}, {"nested": {"x": [1, 2]}})
    assert merged == {"a": 1, "nested": {"x": [1, 2]}}


def test_arrays_are_replaced_not_merged():
    merged = deep_merge({"items": [1, 2, 3]}, {"items": [9]})
    assert merged == {"items": [9]}


def test_null_and_scalars_overwrite():
    merged = deep_merge({"a": {"x": 1}, "b": 2, "c": "s"}, {"a": None, "b": 5, "c": False})
    assert merged == {"a": None, "b": 5, "c": False}


def test_object_replaces_non_object_base_value():
    base = {"scalar": 1, "array": [1, 2], "null": None}
    patch = {"scalar": {"x": 1}, "array": {"y": 2}, "null": {"z": 3}}
    assert deep_merge(base, patch) == patch


def test_deeply_nested_merge():
    base = {"a": {"b": {"c": {"d": 1, "e": 2}}}}
    merged = deep_merge(base, {"a": {"b": {"c": {"e": 3}, "f": 4}}})
    assert merged == {"a": {"b": {"c": {"d": 1, "e": 3}, "f": 4}}}


def test_inputs_are_not_mutated():
    base = {"nested": {"a": 1}, "list": [1]}
    patch = {"nested": {"b": 2}, "extra": {"c": [3]}}
    merged = deep_merge(base, patch)

    merged["nested"]["a"] = 100
    merged["list"].append(2)
    merged["extra"]["c"].append(4)

    assert base == {"nested": {"a": 1}, "list": [1]}
    assert patch == {"nested": {"b": 2}, "extra": {"c": [3]}}


def test_empty_patch_returns_copy():
    base = {"a": {"b": 1}}
    merged = deep_merge(base, {})
    assert merged == base
    assert merged is not base
    assert merged["a"] is not base["a"]


def test_node_kind():
    assert node_kind({}) is NodeKind.OBJECT
    assert node_kind([]) is NodeKind.ARRAY
    assert node_kind((1,)) is NodeKind.ARRAY
    assert node_kind(None) is NodeKind.NULL
    assert node_kind("x") is NodeKind.SCALAR
    assert node_kind(1.5) is NodeKind.SCALAR
    assert node_kind(True) is NodeKind.SCALAR
