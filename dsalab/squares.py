"""Squares and a growable container that holds them."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

DEFAULT_CAPACITY = 10


@dataclass(eq=True)
class Square:
    """A square described by its side length."""

    size: int = 0

    def __lt__(self, other: Square) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return self.size < other.size


class SquareContainerError(IndexError):
    """Raised when a square is taken from an empty container."""


class SquareContainer:
    """A stack of squares whose capacity doubles when full and never shrinks."""

    def __init__(self, items: Iterable[Square] | None = None) -> None:
        self._capacity = DEFAULT_CAPACITY
        self._squares: list[Square] = []
        for item in items or ():
            self.insert_next(item)

    def insert_next(self, item: Square) -> None:
        """Append a copy of item, doubling the capacity if there is no room."""
        if len(self._squares) >= self._capacity:
            self._capacity *= 2
        self._squares.append(Square(item.size))

    def delete_last(self) -> Square:
        """Remove and return the most recently inserted square."""
        if not self._squares:
            raise SquareContainerError(
                "SquareContainer: Attempt to delete when empty.")
        return self._squares.pop()

    def capacity(self) -> int:
        return self._capacity

    def copy(self) -> SquareContainer:
        """Return an independent container with the same squares and capacity."""
        clone = SquareContainer()
        clone._capacity = self._capacity
        clone._squares = [Square(s.size) for s in self._squares]
        return clone

    def __len__(self) -> int:
        return len(self._squares)


def _drain(container: SquareContainer, label: str) -> None:
    try:
        for i in range(20):
            print(f"{label} {i} size is {container.delete_last().size}")
    except SquareContainerError as err:
        print(err, file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    print("Testing Square < Operator")
    s, s2 = Square(10), Square(20)
    print("s2 is bigger" if s < s2 else "s is bigger")

    c = SquareContainer(Square(i) for i in range(20))
    testcopying = c.copy()
    _drain(c, "Square")
    _drain(testcopying, "testcopySquare")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())