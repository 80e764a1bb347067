import pytest

from iteradapt.adaptors import put_back
from iteradapt.selection import positions, take_while_ref, update, while_some


def test_take_while_ref_keeps_failing_element_in_source():
    source = put_back([1, 2, 5, 3])
    assert list(take_while_ref(source, lambda x: x < 3)) == [1, 2]
    assert list(source) == [5, 3]


def test_take_while_ref_can_be_repeated():
    source = put_back("aabba")
    first = "".join(take_while_ref(source, lambda c: c == "a"))
    second = "".join(take_while_ref(source, lambda c: c == "b"))
    assert first + second + "".join(source) == "aabba"
    assert set(first) == {"a"}
    assert set(second) == {"b"}


def test_take_while_ref_empty_source():
    source = put_back([])
    assert list(take_while_ref(source, lambda x: True)) == []
    assert list(source) == []


def test_take_while_ref_requires_put_back():
    with pytest.raises(TypeError):
        take_while_ref(iter([1, 2]), lambda x: True)


def test_while_some_stops_at_none():
    it = iter([1, 2, None, 3])
    assert list(while_some(it)) == [1, 2]
    assert list(it) == [3]


def test_while_some_keeps_falsy_values():
    assert list(while_some([0, "", False, None, 1])) == [0, "", False]


def test_positions_finds_matches():
    data = ["a", "b", "a", "c"]
    assert list(positions(data, lambda x: x == "a")) == [0, 2]


def test_positions_invariant():
    data = [3, 8, 1, 6, 7, 4]
    found = list(positions(data, lambda x: x % 2 == 0))
    assert found == sorted(found)
    assert all(data[i] % 2 == 0 for i in found)
    assert len(found) == sum(1 for x in data if x % 2 == 0)


def test_positions_no_match():
    assert list(positions([1, 2, 3], lambda x: False)) == []


def test_update_mutates_and_yields_same_objects():
    items = [[1], [2]]
    result = list(update(items, lambda lst: lst.append(0)))
    assert result == [[1, 0], [2, 0]]
    assert result[0] is items[0]
    assert result[1] is items[1]


def test_update_is_lazy():
    calls = []
    it = update([{"n": 1}, {"n": 2}], calls.append)
    assert calls == []
    assert next(it) == {"n": 1}
    assert len(calls) == 1