"""Parse, group and plot the iris flower dataset as text."""

from __future__ import annotations

import itertools
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from iteradapt.combinatorics import tuple_combinations
from iteradapt.formatting import format_items
from iteradapt.free import join
from iteradapt.groupby import group_by

_PLOT_SIZE = 30


class ParseError(ValueError):
    """A line of the dataset could not be parsed."""


@dataclass(frozen=True)
class Iris:
    """One flower: its species name and four measurements."""

    name: str
    data: tuple[float, float, float, float]


def parse_iris(line: str) -> Iris:
    """Parse ``a,b,c,d,name``; fields are trimmed, extra fields ignored."""
    parts = (part.strip() for part in line.split(","))
    data: list[float] = []
    for part in itertools.islice(parts, 4):
        try:
            data.append(float(part))
        except ValueError as err:
            raise ParseError(f"invalid float literal: {part!r}") from err
    name = next(parts, None)
    if name is None:
        raise ParseError("Missing name")
    data.extend([0.0] * (4 - len(data)))
    return Iris(name, (data[0], data[1], data[2], data[3]))


def _min_max(irises: Sequence[Iris], column: int) -> tuple[float, float]:
    values = [iris.data[column] for iris in irises]
    if not values:
        raise ValueError("Can't find min/max of empty iterator")
    return min(values), max(values)


def _round_to_grid(x: float, low: float, high: float, n: int) -> int:
    if high == low:
        return 0
    return max(0, int((x - low) / (high - low) * (n - 1)))


def _report(irises: list[Iris]) -> Iterator[str]:
    irises = sorted(irises, key=lambda iris: iris.name)
    symbols = itertools.cycle("+ox")
    symbol_map: dict[str, str] = {}

    for species, group in group_by(irises, lambda iris: iris.name):
        if species not in symbol_map:
            symbol_map[species] = next(symbols)
        yield f"{species} (symbol={symbol_map[species]})"
        for iris in group:
            yield format(format_items(iris.data, ", "), ">3.1f")

    n = _PLOT_SIZE
    for a, b in tuple_combinations(range(4), 2):
        yield f"Column {a} vs {b}:"
        plot = [" "] * (n * n)
        min_x, max_x = _min_max(irises, a)
        min_y, max_y = _min_max(irises, b)
        for iris in irises:
            ix = _round_to_grid(iris.data[a], min_x, max_x, n)
            iy = n - 1 - _round_to_grid(iris.data[b], min_y, max_y, n)
            plot[n * iy + ix] = symbol_map[iris.name]
        for row in range(n):
            yield join(plot[row * n:(row + 1) * n], " ")


def main(argv: Sequence[str] | None = None) -> int:
    """Read the dataset from the file named in ``argv`` (or stdin) and print the report."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    try:
        irises = [parse_iris(line) for line in text.splitlines()]
    except ParseError as err:
        print(f"Error parsing: {err}")
        return 1

    for line in _report(irises):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())