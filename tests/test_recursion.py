import math

import pytest

from dsalab.recursion import (
    binary_search,
    binomial,
    bracket_search,
    catalan,
    find_blocks,
    find_blocks2,
    hanoi_moves,
    is_palindrome,
    main,
    reverse_string,
    to_binary,
    to_hex,
)


@pytest.mark.parametrize("n", range(1, 15))
def test_find_blocks2_shifts_find_blocks(n):
    assert find_blocks2(n) == find_blocks(n + 1)


@pytest.mark.parametrize("n", range(3, 15))
def test_find_blocks_recurrence(n):
    assert find_blocks(n) == find_blocks(n - 1) + find_blocks(n - 2)


def test_find_blocks_rejects_non_positive():
    with pytest.raises(ValueError):
        find_blocks(0)


def test_find_blocks2_base_cases():
    assert find_blocks2(0) == 1
    assert find_blocks2(-1) == 0


def test_binary_search_finds_every_item():
    arr = [2, 3, 4, 10, 40]
    for x in arr:
        assert binary_search(arr, x) == arr.index(x)


@pytest.mark.parametrize("x", [1, 5, 41])
def test_binary_search_missing(x):
    assert binary_search([2, 3, 4, 10, 40], x) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


def test_bracket_search_finds_every_item():
    arr = [1, 4, 7, 9, 12, 18, 25, 30]
    for x in arr:
        assert bracket_search(x, arr) == arr.index(x)


@pytest.mark.parametrize("x", [0, 5, 31])
def test_bracket_search_missing(x):
    assert bracket_search(x, [1, 4, 7, 9, 12]) == -1


def test_bracket_search_empty():
    assert bracket_search(1, []) == -1


@pytest.mark.parametrize("n", range(0, 12))
def test_binomial_matches_comb(n):
    for k in range(n + 1):
        assert binomial(k, n) == math.comb(n, k)


def test_binomial_invalid():
    with pytest.raises(ValueError):
        binomial(5, 3)


def test_reverse_string_pinned():
    assert reverse_string("Iphone") == "enohpI"


@pytest.mark.parametrize("text", ["a", "ab", "hello world", ""])
def test_reverse_string_round_trip(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 17, 255, 1024])
def test_to_binary_round_trip(n):
    assert int(to_binary(n), 2) == n


def test_to_binary_base_case():
    assert to_binary(1) == "1"
    assert to_binary(0) == "0"


def test_to_hex_from_source_example():
    assert to_hex(179912) == "2BEC8"


@pytest.mark.parametrize("n", [0, 9, 15, 16, 255, 4096, 123456789])
def test_to_hex_round_trip(n):
    assert int(to_hex(n), 16) == n


def test_to_hex_negative():
    with pytest.raises(ValueError):
        to_hex(-1)


@pytest.mark.parametrize("text", ["ABCDEA", "racecar", "", "x", "abba", "ab"])
def test_is_palindrome(text):
    assert is_palindrome(text) == (text == text[::-1])


@pytest.mark.parametrize("n", range(0, 12))
def test_catalan_closed_form(n):
    assert catalan(n) == math.comb(2 * n, n) // (n + 1)


@pytest.mark.parametrize("n", range(0, 8))
def test_hanoi_moves_are_valid(n):
    moves = hanoi_moves(n, "A", "C", "B")
    assert len(moves) == 2 ** n - 1
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for disk, frm, to in moves:
        assert pegs[frm][-1] == disk
        pegs[frm].pop()
        assert not pegs[to] or pegs[to][-1] > disk
        pegs[to].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))


def test_hanoi_single_disk():
    assert hanoi_moves(1, "A", "C", "B") == [(1, "A", "C")]


def test_main_output(capsys):
    assert main(["255"]) == 0
    out = capsys.readouterr().out
    assert f"Findblocks 5 = {find_blocks(5)}" in out
    assert f"The number 255 in hexadecimal is {to_hex(255)}" in out
    assert "Move disk 1 from A to C" in out
    assert f"15 takes {2 ** 15 - 1} moves" in out