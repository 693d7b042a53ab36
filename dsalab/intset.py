"""A mutable set of non-negative integers."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

MAX_CONSTRUCTOR_VALUES = 5
END_OF_INPUT = -1


class IntSet:
    """A mathematical set of non-negative integers, including 0.

    The constructor takes up to five integers; negative values are ignored.
    """

    __hash__ = None  # mutable

    def __init__(self, *args: int) -> None:
        if len(args) > MAX_CONSTRUCTOR_VALUES:
            raise TypeError(
                f"IntSet takes at most {MAX_CONSTRUCTOR_VALUES} values")
        self._members: set[int] = {int(n) for n in args if int(n) >= 0}

    @classmethod
    def _of(cls, members: Iterable[int]) -> IntSet:
        result = cls()
        result._members = set(members)
        return result

    @classmethod
    def from_tokens(cls, tokens: Iterable[int | str] | str) -> IntSet:
        """Build a set from integer tokens, stopping at -1 and skipping other negatives."""
        if isinstance(tokens, str):
            tokens = tokens.split()
        result = cls()
        for token in tokens:
            value = int(token)
            if value == END_OF_INPUT:
                break
            if value >= 0:
                result._members.add(value)
        return result

    def is_empty(self) -> bool:
        return not self._members

    def __contains__(self, num: object) -> bool:
        return num in self._members

    def insert(self, num: int) -> None:
        """Add num to the set; negative values are rejected."""
        if num < 0:
            raise ValueError(f"cannot insert negative value {num}")
        self._members.add(num)

    def remove(self, num: int) -> bool:
        """Remove num if present; return whether it was a member."""
        if num in self._members:
            self._members.discard(num)
            return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self._members == other._members

    def __add__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self._of(self._members | other._members)

    def __sub__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self._of(self._members - other._members)

    def __mul__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        return self._of(self._members & other._members)

    def __iadd__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        self._members |= other._members
        return self

    def __isub__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        self._members -= other._members
        return self

    def __imul__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        self._members &= other._members
        return self

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def copy(self) -> IntSet:
        return self._of(self._members)

    def __str__(self) -> str:
        return "{" + "".join(f" {n}" for n in self) + "}"

    def __repr__(self) -> str:
        return f"IntSet({', '.join(str(n) for n in self)})"


def main(argv: Sequence[str] | None = None) -> int:
    a, b, c = IntSet(9), IntSet(15, 3), IntSet(10, 5, 8)
    d = IntSet(12, 5, 10, 12, -500)
    y = IntSet()

    a.insert(3)
    a.insert(7)
    b.insert(5)
    b.insert(9)
    b.insert(12)

    print(f"A = {a}")
    print(f"B = {b}\n")

    print("Compute  C = A + B")
    c = a + b
    print(f"C = {c}\n")

    print("Ask if  A == C")
    print("A == C" if a == c else "A is not == C")
    print()
    print("Ask if  A != C")
    print("A is not == C" if a != c else "A == C")
    print()

    print(f"Compute B - A = {b - a}")
    print(f"Compute A - B = {a - b}")
    print("Compute  D = (A * B) + D")
    before = str(d)
    d = (a * b) + d
    print(f"Before: D = {before}    After: D = {d}\n")

    print("Test assignment operators")
    c = d.copy()
    x = c.copy()
    a *= b
    y += a
    print(f"X = {x}    Y = {y}\n")

    print("0 in set" if 0 in d else "0 not in set")
    print("-1000 in set" if -1000 in d else "-1000 not in set")
    print("A empty" if a.is_empty() else "A not empty")
    try:
        d.insert(-20000)
    except ValueError:
        pass
    d.remove(20000)
    d.remove(-5000)
    d.insert(0)
    d.insert(20000)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())