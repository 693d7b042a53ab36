import io
import random

import pytest

from dsalab.sorter import (
    format_array,
    in_order,
    main,
    mid_random_array,
    partially_ordered,
    random_array,
    reverse_order,
    run_sort,
)


def test_in_order_and_reverse_are_mirrors():
    assert in_order(6) == list(range(6))
    assert reverse_order(6) == list(reversed(in_order(6)))
    assert in_order(0) == []


@pytest.mark.parametrize("stride", [1, 2, 4])
def test_partially_ordered_is_permutation(stride):
    items = partially_ordered(23, stride)
    assert sorted(items) == in_order(23)
    assert items != in_order(23)


def test_partially_ordered_stride_four_small():
    assert partially_ordered(5, 4) == [4, 1, 2, 3, 0]


def test_partially_ordered_rejects_bad_stride():
    with pytest.raises(ValueError):
        partially_ordered(5, 0)


def test_random_array_is_seeded_permutation():
    first = random_array(50, random.Random(1))
    second = random_array(50, random.Random(1))
    assert first == second
    assert sorted(first) == in_order(50)


def test_mid_random_array_keeps_ends():
    n = 300
    items = mid_random_array(n, random.Random(3))
    assert len(items) == n
    assert items[:3] == [0, 1, 2]
    assert items[297:] == [297, 298, 299]
    assert all(0 <= v < n for v in items)


def test_format_array():
    assert format_array([5, 7], "items") == "items[0] = 5\nitems[1] = 7\n"
    assert format_array([], "x") == ""


def test_run_sort_prints_and_returns():
    out = io.StringIO()
    data = [3, 1, 2]
    result = run_sort("InsertionSort", data, True, out)
    assert result == [1, 2, 3]
    assert data == [3, 1, 2]
    text = out.getvalue()
    assert text.startswith("Initial:\nitems[0] = 3\n")
    assert "Sorted:\nitem[0] = 1\nitem[1] = 2\nitem[2] = 3\n" in text
    assert "Time (us): " in text


def test_run_sort_quiet():
    out = io.StringIO()
    result = run_sort("MergeSort", [2, 1], False, out)
    assert result == [1, 2]
    assert "Initial:" not in out.getvalue()


def test_run_sort_unknown_name():
    with pytest.raises(ValueError):
        run_sort("Nope", [1], False, io.StringIO())


def test_main_wrong_argument_count(capsys):
    assert main(["BubbleSort"]) == 1
    assert "Usage: Sorter SORT_TYPE ARRAY_SIZE [YES|NO]" in capsys.readouterr().err


def test_main_nonpositive_size(capsys):
    assert main(["BubbleSort", "0"]) == 1
    assert "Array size must be positive" in capsys.readouterr().err


def test_main_bad_print_flag(capsys):
    assert main(["BubbleSort", "5", "MAYBE"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_runs_three_times(capsys):
    assert main(["QuickSort", "4", "NO"]) == 0
    output = capsys.readouterr().out
    assert output.startswith("Ordered - 4\n")
    assert output.count("Time (us): ") == 3
    assert "item[" not in output


def test_main_unknown_sort(capsys):
    assert main(["Nope", "4"]) == 1
    assert "unknown sort" in capsys.readouterr().err