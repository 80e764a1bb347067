import pytest

from iteradapt.results import (
    Err,
    Ok,
    filter_map_ok,
    filter_ok,
    flatten_ok,
    map_into,
    map_ok,
)


def test_map_ok_maps_values_and_keeps_errors():
    data = [Ok("a"), Err("bad"), Ok("b")]
    result = list(map_ok(data, lambda v: (v, v)))
    assert result == [Ok(("a", "a")), Err("bad"), Ok(("b", "b"))]


def test_map_ok_does_not_call_function_for_errors():
    calls = []
    result = list(map_ok([Err("x"), Err("y")], calls.append))
    assert result == [Err("x"), Err("y")]
    assert calls == []


def test_map_ok_is_lazy():
    calls = []
    it = map_ok([Ok(1), Ok(2)], lambda v: calls.append(v) or v)
    assert calls == []
    assert next(it) == Ok(1)
    assert calls == [1]


def test_map_ok_rejects_plain_values():
    with pytest.raises(TypeError):
        list(map_ok([Ok(1), 2], lambda v: v))


def test_filter_ok_keeps_matching_values_and_all_errors():
    data = [Ok(1), Err("e"), Ok(2), Ok(3)]
    assert list(filter_ok(data, lambda v: v != 2)) == [Ok(1), Err("e"), Ok(3)]


def test_filter_ok_predicate_never_sees_errors():
    seen = []

    def pred(v):
        seen.append(v)
        return False

    assert list(filter_ok([Err(1), Ok(2)], pred)) == [Err(1)]
    assert seen == [2]


def test_filter_map_ok_drops_none_results():
    data = [Ok(1), Err("e"), Ok(2), Ok(3)]
    result = list(filter_map_ok(data, lambda v: None if v == 2 else (v,)))
    assert result == [Ok((1,)), Err("e"), Ok((3,))]


def test_filter_map_ok_keeps_falsy_non_none_values():
    assert list(filter_map_ok([Ok(0), Ok("")], lambda v: v)) == [Ok(0), Ok("")]


def test_flatten_ok_expands_inner_iterables():
    data = [Ok([1, 2]), Err("e"), Ok([]), Ok((3,))]
    assert list(flatten_ok(data)) == [Ok(1), Ok(2), Err("e"), Ok(3)]


def test_flatten_ok_empty_input():
    assert list(flatten_ok([])) == []


def test_flatten_ok_preserves_error_positions():
    data = [Err("a"), Ok("xy"), Err("b")]
    result = list(flatten_ok(data))
    assert result == [Err("a"), Ok("x"), Ok("y"), Err("b")]


def test_flatten_ok_rejects_plain_values():
    with pytest.raises(TypeError):
        list(flatten_ok([[1, 2]]))


def test_map_into_converts_each_element():
    result = list(map_into([1, 2], float))
    assert result == [1, 2]
    assert all(type(x) is float for x in result)


def test_results_are_value_objects():
    assert Ok(1) == Ok(1)
    assert Ok(1) != Err(1)
    assert hash(Err("e")) == hash(Err("e"))