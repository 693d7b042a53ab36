"""Small demonstrations of sequences, linked lists and ordered maps."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import MutableSequence, Sequence


def swap_bubble_sort(items: MutableSequence[int]) -> None:
    """Sort items in place, repeating passes until one makes no swap."""
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(items) - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True


@dataclass(frozen=True)
class ListDemo:
    """Snapshots of a linked list as it is built, trimmed, sorted and filtered."""

    initial: list[int]
    after_erase: list[int]
    ordered: list[int]
    evens: list[int]

    @property
    def front(self) -> int:
        return self.initial[0]

    @property
    def back(self) -> int:
        return self.initial[-1]


def list_demo() -> ListDemo:
    """Build a list from both ends, drop its third element, sort it, keep the evens."""
    nums: deque[int] = deque()
    for i in range(5):
        nums.append(1 + i * 2)
    for i in range(1, 6):
        nums.appendleft(i * 2)
    initial = list(nums)

    del nums[2]
    after_erase = list(nums)

    ordered = sorted(nums)
    evens = [n for n in ordered if n % 2 == 0]
    return ListDemo(initial, after_erase, ordered, evens)


def map_demo() -> list[list[tuple[str, int]]]:
    """Apply assignments and inserts to a map, returning its sorted contents after each."""
    table: dict[str, int] = {}
    snapshots: list[list[tuple[str, int]]] = []

    def snap() -> None:
        snapshots.append(sorted(table.items()))

    table["Hello world"] = 10
    table["Tissues"] = 20
    table["Coconut water"] = 30
    table["Differental equations"] = 40
    table["Notebook"] = 50
    snap()

    # insert never overwrites an existing key; assignment does.
    table.setdefault("Hello world", 60)
    snap()
    table.setdefault("Gatorade", 70)
    snap()
    table["Badminton"] = 10
    snap()
    table["Notebook"] = 20
    snap()
    table.setdefault("Tennis", 30)
    snap()
    table.setdefault("Hello world", 40)
    snap()
    return snapshots


def _joined(values: Sequence[int], sep: str) -> str:
    return "".join(f"{v}{sep}" for v in values)


def main(argv: Sequence[str] | None = None) -> int:
    first = [6, 32, 4, 18, 14]
    print("Elements in the array are ")
    print(_joined(first, " "))
    first.extend([37, 41, 3, 15, 21])
    print("Elements in array are ")
    print(_joined(first, " ") + f"Size of the vector is {len(first)}")
    print("Elements in array after sorting")
    swap_bubble_sort(first)
    print()
    print(_joined(first, " "))

    demo = list_demo()
    print("List elements: " + _joined(demo.initial, " , "))
    print(f"front number {demo.front}")
    print(f"back number {demo.back}")
    print("List after deleting the third element: " + _joined(demo.after_erase, " , "))
    print("List after sorting " + _joined(demo.ordered, " , "))
    print("List after deleting odd numbers" + _joined(demo.evens, " , "))

    for snapshot in map_demo():
        print("Printing out elements in array")
        print("".join(f"{key} {value} " for key, value in snapshot))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())