"""Tests for variable indexing."""

import pytest

from lpbridge import LP, CompKind, ConstantOffset, Constraint, ModelError, Objective, Variable, index_variables
from lpbridge.indexing import check_name_index, names_from_map


def test_first_seen_order(example_lp):
    names, name_map = index_variables(example_lp)
    assert names == ["a", "c", "b"]
    assert name_map == {"a": 0, "c": 1, "b": 2}


def test_left_before_right():
    lp = LP(
        Objective([ConstantOffset(1)]),
        [
            Constraint([Variable("y")], CompKind.LE, [Variable("x")]),
            Constraint([Variable("z")], CompKind.EQ, [Variable("y"), Variable("w")]),
        ],
    )
    names, _ = index_variables(lp)
    assert names == ["y", "x", "z", "w"]


def test_constants_are_not_indexed(example_lp):
    names, name_map = index_variables(example_lp)
    assert len(names) == len(name_map) == 3
    for i, name in enumerate(names):
        assert name_map[name] == i


def test_repeated_calls_are_identical(example_lp):
    assert index_variables(example_lp) == index_variables(example_lp)


def test_empty_lp():
    assert index_variables(LP(Objective([]))) == ([], {})


def test_names_from_map():
    assert names_from_map({"b": 1, "a": 0}) == ["a", "b"]


def test_names_from_map_rejects_gaps():
    with pytest.raises(ModelError):
        names_from_map({"a": 0, "b": 2})


def test_check_name_index_accepts_indexer_output(example_lp):
    check_name_index(*index_variables(example_lp))


@pytest.mark.parametrize("names, name_map", [
    (["a", "b"], {"a": 0, "b": 1, "c": 2}),
    (["a", "b"], {"b": 0, "a": 1}),
    (["a", "x"], {"a": 0, "b": 1}),
])
def test_check_name_index_rejects_inconsistent_pairs(names, name_map):
    with pytest.raises(ModelError):
        check_name_index(names, name_map)
