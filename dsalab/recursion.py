"""Classic recursive exercises: counting, searching, number bases and Hanoi."""

from __future__ import annotations

import argparse
import time
from functools import cache
from typing import Sequence

HEX_DIGITS = "0123456789ABCDEF"


@cache
def find_blocks(n: int) -> int:
    """Count block arrangements with base cases f(1) = f(2) = 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n in (1, 2):
        return 1
    return find_blocks(n - 1) + find_blocks(n - 2)


@cache
def find_blocks2(n: int) -> int:
    """Count ways to fill length n with pieces of size 1 and 2."""
    if n == 0:
        return 1
    if n < 0:
        return 0
    return find_blocks2(n - 1) + find_blocks2(n - 2)


def binary_search(items: Sequence[int], x: int) -> int:
    """Return the index of x in the sorted sequence, or -1 if absent."""
    low, high = 0, len(items) - 1
    while high >= low:
        mid = low + (high - low) // 2
        if items[mid] == x:
            return mid
        if items[mid] > x:
            high = mid - 1
        else:
            low = mid + 1
    return -1


@cache
def binomial(k: int, n: int) -> int:
    """Return the binomial coefficient C(n, k) by Pascal's rule."""
    if k < 0 or k > n:
        raise ValueError("k must lie between 0 and n")
    if k == 0 or k == n:
        return 1
    return binomial(k - 1, n - 1) + binomial(k, n - 1)


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    return text[::-1]


def to_binary(n: int) -> str:
    """Return the base-2 digits of n; values below 2 are returned as is."""
    if n < 2:
        return str(n)
    digits = []
    while n >= 2:
        digits.append(str(n % 2))
        n //= 2
    digits.append(str(n))
    return "".join(reversed(digits))


def to_hex(n: int) -> str:
    """Return the upper-case hexadecimal digits of a non-negative n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = [HEX_DIGITS[n % 16]]
    while n >= 16:
        n //= 16
        digits.append(HEX_DIGITS[n % 16])
    return "".join(reversed(digits))


def is_palindrome(text: str) -> bool:
    """Return True if text reads the same forwards and backwards."""
    return all(a == b for a, b in zip(text, reversed(text)))


def bracket_search(value: int, items: Sequence[int]) -> int:
    """Search a sorted sequence by checking the ends of a shrinking bracket.

    Returns the index found, or -1 if value is absent.
    """
    if not items:
        return -1
    low, high = 0, len(items) - 1
    while True:
        if items[low] == value:
            return low
        if items[high] == value:
            return high
        if high <= low + 1:
            return -1
        mid = (low + high) // 2
        if items[mid] > value:
            high = mid
        else:
            low = mid


@cache
def catalan(n: int) -> int:
    """Return the n-th Catalan number."""
    if n <= 1:
        return 1
    return sum(catalan(i) * catalan(n - i - 1) for i in range(n))


def hanoi_moves(n: int, source: str, target: str, spare: str) -> list[tuple[int, str, str]]:
    """Return the moves (disk, from, to) that shift n disks from source to target."""
    if n <= 0:
        return []
    return [
        *hanoi_moves(n - 1, source, spare, target),
        (n, source, target),
        *hanoi_moves(n - 1, spare, target, source),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the recursion demonstrations.")
    parser.add_argument("number", nargs="?", type=int, default=179912,
                        help="non-negative integer to show in hexadecimal")
    args = parser.parse_args(argv)

    print(f"Findblocks 5 = {find_blocks(5)}")
    print(f"Findblocks2 5 = {find_blocks2(5)}")

    arr = [2, 3, 4, 10, 40]
    result = binary_search(arr, 10)
    if result == -1:
        print("Element is not present in array")
    else:
        print(f"Element is present at index {result}")

    print(binomial(3, 8))
    print(reverse_string("Iphone"))
    for value in (1, 2, 3, 4):
        print(to_binary(value))
    print(f"The number {args.number} in hexadecimal is {to_hex(args.number)}")
    print(is_palindrome("ABCDEA"))

    for value in (4, 5, 6, 7):
        print(f"catalan {value} = {catalan(value)}")

    for disks in range(1, 16):
        start = time.perf_counter()
        moves = hanoi_moves(disks, "A", "C", "B")
        if disks <= 3:
            for disk, frm, to in moves:
                print(f"Move disk {disk} from {frm} to {to}")
        print(f"{disks} takes {len(moves)} moves")
        elapsed = int((time.perf_counter() - start) * 1_000_000)
        print(f"Time elapsed: {elapsed} microseconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())