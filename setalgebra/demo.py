"""
Console demo for :class:`setalgebra.Set`.

Builds three sets of integers, prints them, then prints their union,
difference and intersection and whether the third set is a subset of the
first two:

    python -m setalgebra.demo --first 1 2 3 --second 3 4 --third 3
"""

from __future__ import annotations

import argparse

from ._set import Set

DEFAULT_FIRST = [1, 2, 3, 4, 5, 6]
DEFAULT_SECOND = [4, 5, 6, 7, 8, 9]
DEFAULT_THIRD = [2, 3, 4]


def print_set(items: Set[int], title: str) -> None:
    print(title, end='')
    for item in items:
        print(f'{item} ', end='')
    print()


def print_subset(is_subset: bool, target: str) -> None:
    if is_subset:
        print(f'The third set is a subset of the {target}.')
    else:
        print(f'The third set is not a subset of the {target}.')


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description='Print union, difference, intersection and subset checks of three sets.')
    parser.add_argument('--first', nargs='*', type=int, default=DEFAULT_FIRST, help='Elements of the first set.')
    parser.add_argument('--second', nargs='*', type=int, default=DEFAULT_SECOND, help='Elements of the second set.')
    parser.add_argument('--third', nargs='*', type=int, default=DEFAULT_THIRD, help='Elements of the third set.')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point."""
    args = _parse_args(argv)
    first: Set[int] = Set(args.first)
    second: Set[int] = Set(args.second)
    third: Set[int] = Set(args.third)

    union = Set.union(first, second)
    difference = Set.difference(first, second)
    intersection = Set.intersection(first, second)

    print_set(first, 'First set: ')
    print_set(second, 'Second set: ')
    print_set(third, 'Third set: ')

    print_set(union, 'Union of the first and second sets: ')
    print_set(difference, 'Difference of the first and second sets: ')
    print_set(intersection, 'Intersection of the first and second sets: ')

    print_subset(Set.subset(third, first), 'first')
    print_subset(Set.subset(third, second), 'second')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
