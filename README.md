# iteradapt

Extra building blocks for working with iterables: lazy grouping and
chunking, combinations, merging, interleaving, de-duplication, diffing,
and adaptors that work on streams of `Ok`/`Err` results. It has no
dependencies beyond the standard library.

## Install

```
pip install iteradapt
```

For running the tests:

```
pip install "iteradapt[test]"
pytest
```

## A quick tour

```python
from iteradapt.coalesce import dedup, dedup_with_count
from iteradapt.combinatorics import combinations, tuple_combinations
from iteradapt.groupby import group_by, chunks
from iteradapt.adaptors import interleave, merge
from iteradapt.formatting import format_items
from iteradapt.exactly_one import exactly_one, ExactlyOneError

list(dedup([1, 1, 2, 3, 3, 3]))            # [1, 2, 3]
list(dedup_with_count("aab"))              # [(2, 'a'), (1, 'b')]

list(combinations([1, 2, 3], 2))           # [[1, 2], [1, 3], [2, 3]]
list(tuple_combinations(range(4), 2))      # [(0, 1), (0, 2), ... (2, 3)]

for key, group in group_by([1, 3, 2, 4, 5], lambda x: x % 2):
    print(key, list(group))                # 1 [1, 3] / 0 [2, 4] / 1 [5]

for chunk in chunks(range(7), 3):
    print(list(chunk))                     # [0, 1, 2], [3, 4, 5], [6]

list(interleave([1, 2, 3], "ab"))          # [1, 'a', 2, 'b', 3]
list(merge([1, 4, 6], [2, 3, 7]))          # [1, 2, 3, 4, 6, 7]

str(format_items([1, 2, 3], ", "))         # '1, 2, 3'

exactly_one([42])                          # 42
try:
    exactly_one([1, 2, 3])
except ExactlyOneError as err:
    list(err)                              # [1, 2, 3] -- nothing is lost
```

## Modules

- `iteradapt.adaptors` – `PutBack` / `put_back`, `interleave`,
  `interleave_shortest`, `cartesian_product`, `batching`, `step`,
  `merge`, `merge_by`.
- `iteradapt.coalesce` – `coalesce`, `dedup`, `dedup_by`,
  `dedup_with_count`, `dedup_by_with_count`.
- `iteradapt.combinatorics` – `Combinations` / `combinations` (reads its
  source lazily), `combinations_with_replacement`,
  `multi_cartesian_product`, `cons_tuples`, `tuple_combinations`.
- `iteradapt.diff` – `diff_with` compares two iterables in lock step and
  returns `FirstMismatch`, `Shorter`, `Longer`, or `None` when they match.
- `iteradapt.duplicates` – `duplicates` and `duplicates_by` yield each
  element at its second occurrence only.
- `iteradapt.either_or_both` – `Left`, `Right` and `Both`, the three
  shapes of `EitherOrBoth`, with helpers such as `has_left`, `flip`,
  `map_any`, `or_`, `or_else` and `reduce`.
- `iteradapt.exactly_one` – `exactly_one` and `ExactlyOneError`.
- `iteradapt.formatting` – `format_items` / `Format` and `format_with` /
  `FormatWith`; each can be turned into text only once.
- `iteradapt.free` – function forms such as `fold`, `join`, `rev`,
  `sorted`, `max`, `min`.
- `iteradapt.groupby` – `group_by` / `GroupBy` and `chunks` /
  `IntoChunks`. Groups share one underlying iterator; elements are
  buffered only when a later group is read while an earlier one is still
  open. Call `close()` on a `Group` or `Chunk` you no longer need.
- `iteradapt.grouping` – `into_group_map`, `into_group_map_by`, `concat`.
- `iteradapt.results` – `Ok` and `Err` wrappers, and `map_ok`,
  `filter_ok`, `filter_map_ok`, `flatten_ok`, which act on `Ok` values
  and pass `Err` values through; plus `map_into`.
- `iteradapt.selection` – `take_while_ref` (puts the first failing
  element back into a `PutBack`), `while_some`, `positions`, `update`.

## Iris demo

The `iteradapt-iris` command reads iris data lines of the form
`a,b,c,d,species` from the file named on the command line, or from
standard input, groups the flowers by species and draws a text scatter
plot for every pair of the four columns:

```
iteradapt-iris iris.data
```

No data file is included; supply your own. On a line that cannot be
parsed the command prints the error and exits with status 1.