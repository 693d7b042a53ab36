"""In-place comparison sorts over mutable sequences of integers."""

from __future__ import annotations

import random
from functools import partial
from typing import Callable, MutableSequence

SortFunction = Callable[[MutableSequence[int]], None]


def bubble_sort(nums: MutableSequence[int]) -> None:
    """Sort nums in place by repeatedly bubbling the largest value to the end."""
    for end in range(len(nums) - 1, 0, -1):
        for j in range(end):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]


def early_exit_bubble_sort(nums: MutableSequence[int]) -> None:
    """Bubble sort that stops as soon as a pass makes no swap."""
    for end in range(len(nums) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(nums: MutableSequence[int]) -> None:
    """Sort nums in place by inserting each value into the sorted prefix."""
    for i in range(1, len(nums)):
        value = nums[i]
        j = i - 1
        while j >= 0 and nums[j] > value:
            nums[j + 1] = nums[j]
            j -= 1
        nums[j + 1] = value


def _merge(nums: MutableSequence[int], start: int, mid: int, end: int) -> None:
    left = list(nums[start:mid])
    right = list(nums[mid:end])
    li = ri = 0
    k = start
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            nums[k] = left[li]
            li += 1
        else:
            nums[k] = right[ri]
            ri += 1
        k += 1
    for value in left[li:]:
        nums[k] = value
        k += 1
    for value in right[ri:]:
        nums[k] = value
        k += 1


def _merge_sort(nums: MutableSequence[int], start: int, end: int) -> None:
    if end - start < 2:
        return
    mid = start + (end - start + 1) // 2
    _merge_sort(nums, start, mid)
    _merge_sort(nums, mid, end)
    _merge(nums, start, mid, end)


def merge_sort(nums: MutableSequence[int]) -> None:
    """Stable top-down merge sort, in place."""
    _merge_sort(nums, 0, len(nums))


def _partition(nums: MutableSequence[int], low: int, high: int,
               pivot_index: int, take_equal: bool) -> int:
    nums[pivot_index], nums[high] = nums[high], nums[pivot_index]
    pivot = nums[high]
    i = low - 1
    for j in range(low, high):
        if nums[j] < pivot or (take_equal and nums[j] == pivot):
            i += 1
            nums[i], nums[j] = nums[j], nums[i]
    nums[i + 1], nums[high] = nums[high], nums[i + 1]
    return i + 1


def _quick_sort(nums: MutableSequence[int],
                choose_pivot: Callable[[int, int], int],
                take_equal: bool) -> None:
    pending = [(0, len(nums) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            p = _partition(nums, low, high, choose_pivot(low, high), take_equal)
            pending.append((low, p - 1))
            pending.append((p + 1, high))


def quick_sort(nums: MutableSequence[int]) -> None:
    """Quicksort using the middle element of each range as pivot."""
    _quick_sort(nums, lambda low, high: low + (high - low) // 2, take_equal=False)


def random_pivot_quick_sort(nums: MutableSequence[int],
                            rng: random.Random | None = None) -> None:
    """Quicksort choosing each pivot uniformly at random from its range."""
    chooser = rng if rng is not None else random.Random()
    _quick_sort(nums, chooser.randint, take_equal=True)


def _gapped_insertion(nums: MutableSequence[int], gap: int) -> None:
    for i in range(gap, len(nums)):
        temp = nums[i]
        j = i
        while j >= gap and nums[j - gap] > temp:
            nums[j] = nums[j - gap]
            j -= gap
        nums[j] = temp


def shell_sort(nums: MutableSequence[int]) -> None:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    gap = len(nums) // 2
    while gap > 0:
        _gapped_insertion(nums, gap)
        gap //= 2


def knuth_shell_sort(nums: MutableSequence[int]) -> None:
    """Shell sort with Knuth's gap sequence 1, 4, 13, 40, ..."""
    gap = 1
    while gap < len(nums) // 3:
        gap = 3 * gap + 1
    while gap > 0:
        _gapped_insertion(nums, gap)
        gap = (gap - 1) // 3


_SORTS: dict[str, Callable[[], SortFunction]] = {
    "BubbleSort": lambda: bubble_sort,
    "BubbleSort1": lambda: bubble_sort,
    "MBubbleSort": lambda: early_exit_bubble_sort,
    "M2BubbleSort": lambda: early_exit_bubble_sort,
    "BubbleSort2": lambda: early_exit_bubble_sort,
    "BubbleSort3": lambda: early_exit_bubble_sort,
    "InsertionSort": lambda: insertion_sort,
    "MergeSort": lambda: merge_sort,
    "QuickSort": lambda: quick_sort,
    "RandomQuickSort": lambda: partial(random_pivot_quick_sort, rng=random.Random(1)),
    "ShellSort": lambda: shell_sort,
    "KnuthShellSort": lambda: knuth_shell_sort,
}

SORT_NAMES = tuple(_SORTS)


def get_sort(name: str) -> SortFunction:
    """Return the in-place sort registered under name."""
    try:
        factory = _SORTS[name]
    except KeyError:
        raise ValueError(
            f"unknown sort {name!r}; choose one of {', '.join(SORT_NAMES)}"
        ) from None
    return factory()