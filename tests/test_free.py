import pytest

from iteradapt import free


def test_enumerate():
    assert list(free.enumerate("abc")) == [(0, "a"), (1, "b"), (2, "c")]


def test_rev_sequence_and_generator():
    assert list(free.rev([1, 2, 3])) == [3, 2, 1]
    assert list(free.rev(x for x in range(4))) == [3, 2, 1, 0]


def test_rev_twice_is_identity():
    data = list("itertools")
    assert list(free.rev(free.rev(data))) == data


def test_zip_stops_at_shorter():
    data = [1, 2, 3, 4, 5]
    pairs = list(free.zip(data, data[1:]))
    assert len(pairs) == len(data) - 1
    assert all(b == a + 1 for a, b in pairs)


def test_chain():
    assert list(free.chain([1, 2, 3], [4])) == [1, 2, 3, 4]


def test_cloned_copies_elements():
    assert next(free.cloned(b"abc")) == ord("a")
    inner = [[1], [2]]
    copies = list(free.cloned(inner))
    assert copies == inner
    assert copies[0] is not inner[0]


def test_fold():
    assert free.fold([1.0, 2.0, 3.0], 0.0, max) == 3.0
    assert free.fold(["b", "c"], "a", lambda acc, x: acc + x) == "abc"
    assert free.fold([], 7, lambda acc, x: acc + x) == 7


def test_all_and_any():
    assert free.all([1, 2, 3], lambda x: x > 0)
    assert not free.all([1, -2, 3], lambda x: x > 0)
    assert free.any([0, -1, 2], lambda x: x > 0)
    assert not free.any([0, -1], lambda x: x > 0)
    assert free.all([], lambda x: False)
    assert not free.any([], lambda x: True)


def test_max_min():
    assert free.max(range(10)) == 9
    assert free.min(range(10)) == 0
    assert free.max([]) is None
    assert free.min([]) is None


def test_max_returns_last_of_equal_min_first():
    a, b = (1, "first"), (1, "second")

    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __lt__(self, other):
            return self.pair[0] < other.pair[0]

        def __gt__(self, other):
            return self.pair[0] > other.pair[0]

    items = [Keyed(a), Keyed(b)]
    assert free.max(items).pair == b
    assert free.min(items).pair == a


def test_join():
    assert free.join([1, 2, 3], ", ") == "1, 2, 3"
    assert free.join([], ", ") == ""


def test_sorted():
    assert list(free.sorted("rust")) == list("rstu")


def test_sorted_invariant():
    data = [5, 3, 9, 1, 3]
    result = list(free.sorted(data))
    assert len(result) == len(data)
    assert all(a <= b for a, b in free.zip(result, result[1:]))


def test_sorted_rejects_unorderable():
    with pytest.raises(TypeError):
        list(free.sorted([1, "a"]))