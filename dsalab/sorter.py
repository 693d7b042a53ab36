"""Generate test arrays and time the sorts on them."""

from __future__ import annotations

import random
import sys
import time
from typing import Sequence, TextIO

from dsalab.sorting import get_sort

USAGE = "Usage: Sorter SORT_TYPE ARRAY_SIZE [YES|NO]"
REPEATS = 3


def in_order(n: int) -> list[int]:
    """Return 0 .. n-1 in ascending order."""
    return list(range(n))


def reverse_order(n: int) -> list[int]:
    """Return n-1 .. 0 in descending order."""
    return list(range(n - 1, -1, -1))


def partially_ordered(n: int, stride: int = 2) -> list[int]:
    """Return 0 .. n-1 with elements swapped stride apart at every stride step."""
    if stride < 1:
        raise ValueError("stride must be positive")
    items = in_order(n)
    for i in range(0, n - stride, stride):
        items[i], items[i + stride] = items[i + stride], items[i]
    return items


def random_array(n: int, rng: random.Random) -> list[int]:
    """Return a random permutation of 0 .. n-1 drawn from rng."""
    pool = in_order(n)
    return [pool.pop(rng.randrange(len(pool))) for _ in range(n)]


def mid_random_array(n: int, rng: random.Random) -> list[int]:
    """Return 0 .. n-1 with the middle 98% replaced by random draws from 0 .. n-1."""
    if n < 0:
        return []
    items = in_order(n)
    pool = in_order(n)
    for i in range(int(0.01 * n), int(0.99 * n)):
        items[i] = pool.pop(rng.randrange(len(pool)))
    return items


def format_array(items: Sequence[int], name: str) -> str:
    """Return one 'name[i] = value' line per element."""
    return "".join(f"{name}[{i}] = {value}\n" for i, value in enumerate(items))


def run_sort(name: str, items: Sequence[int], print_out: bool,
             out: TextIO | None = None) -> list[int]:
    """Sort a copy of items with the named sort, report it to out, return the result."""
    out = out if out is not None else sys.stdout
    sort = get_sort(name)
    nums = list(items)
    if print_out:
        out.write("Initial:\n")
        out.write(format_array(nums, "items"))
    start = time.perf_counter_ns()
    sort(nums)
    elapsed = (time.perf_counter_ns() - start) // 1000
    if print_out:
        out.write("Sorted:\n")
        out.write(format_array(nums, "item"))
    out.write(f"Time (us): {elapsed}\n")
    return nums


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (2, 3):
        print(USAGE, file=sys.stderr)
        return 1
    sort_name = args[0]
    try:
        size = int(args[1])
    except ValueError:
        size = 0
    if size <= 0:
        print("Array size must be positive", file=sys.stderr)
        return 1
    print_out = True
    if len(args) == 3:
        if args[2] == "NO":
            print_out = False
        elif args[2] != "YES":
            print(USAGE, file=sys.stderr)
            return 1
    try:
        get_sort(sort_name)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1

    items = in_order(size)
    print(f"Ordered - {size}")
    for _ in range(REPEATS):
        run_sort(sort_name, items, print_out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())