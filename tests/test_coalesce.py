import itertools

import pytest

from iteradapt.coalesce import (
    coalesce,
    dedup,
    dedup_by,
    dedup_by_with_count,
    dedup_with_count,
)

DATA = [1, 1, 2, 3, 3, 3, 1, 4, 4]


def test_dedup_matches_runs():
    result = list(dedup(DATA))
    assert result == [k for k, _ in itertools.groupby(DATA)]
    assert all(a != b for a, b in zip(result, result[1:]))


def test_dedup_pinned():
    assert list(dedup([1, 1, 2, 2, 1])) == [1, 2, 1]


def test_dedup_empty_and_single():
    assert list(dedup([])) == []
    assert list(dedup(["only"])) == ["only"]


def test_dedup_by_keeps_first_of_run():
    words = ["apple", "avocado", "banana", "blueberry", "apricot"]
    result = list(dedup_by(words, lambda a, b: a[0] == b[0]))
    assert result == ["apple", "banana", "apricot"]


def test_dedup_with_count_round_trip():
    counted = list(dedup_with_count(DATA))
    expanded = [item for count, item in counted for _ in range(count)]
    assert expanded == DATA
    assert sum(count for count, _ in counted) == len(DATA)
    assert [item for _, item in counted] == list(dedup(DATA))


def test_dedup_by_with_count():
    counted = list(dedup_by_with_count([1, 3, 2, 4, 5], lambda a, b: a % 2 == b % 2))
    assert [c for c, _ in counted] == [2, 2, 1]
    assert [v for _, v in counted] == [1, 2, 5]


def test_dedup_with_count_empty():
    assert list(dedup_with_count([])) == []


def test_coalesce_merges_adjacent():
    def join(a, b):
        if a[-1] + 1 == b:
            return (a + [b],)
        return (a, [b])

    runs = list(coalesce([[1], 2, 3, 7, 8, 10], join))
    assert [x for run in runs for x in run] == [1, 2, 3, 7, 8, 10]
    assert all(
        b - a == 1 for run in runs for a, b in zip(run, run[1:])
    )
    assert len(runs) == 3


def test_coalesce_bad_return():
    with pytest.raises(ValueError):
        list(coalesce([1, 2], lambda a, b: (a, b, a)))


def test_coalesce_is_lazy():
    source = itertools.count()
    result = coalesce(source, lambda a, b: (a, b))
    assert list(itertools.islice(result, 3)) == [0, 1, 2]