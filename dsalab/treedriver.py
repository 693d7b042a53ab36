"""Drivers that build search trees from word lists and report on them."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Sequence, TextIO

from dsalab.bintree import BinTree
from dsalab.nodedata import NodeData

END_OF_TREE = "$$"
SEPARATOR = "-" * 63
NOT_FOUND = NodeData("notFound")

_LOOKUPS = ("and", "not", "sss")
_REMOVALS = ("and", "iii", "r", "c", "b", "a")


def read_trees(stream: TextIO) -> Iterator[list[str]]:
    """Yield the words of each tree; every tree ends with a '$$' token.

    Words after the last '$$' do not form a complete tree and are dropped.
    """
    words: list[str] = []
    for line in stream:
        for token in line.split():
            if token == END_OF_TREE:
                yield words
                words = []
            else:
                words.append(token)


def build_tree(words: Iterable[str]) -> BinTree:
    """Return a search tree holding each distinct word once."""
    tree = BinTree()
    for word in words:
        tree.insert(NodeData(word))
    return tree


def _report(tree: BinTree, out: TextIO, first: BinTree, dup: BinTree) -> BinTree:
    """Write the full report for tree and return a copy taken before rebalancing."""
    out.write(f"Tree Inorder:\n{tree}\n")
    out.write(tree.sideways())

    for word in _LOOKUPS:
        found = tree.retrieve(NodeData(word)) is not None
        out.write(f"Retrieve --> {word}:  {'found' if found else 'not found'}\n")

    for word in _LOOKUPS:
        sibling = tree.get_sibling(NodeData(word))
        out.write(f"Sibling of {word}:  {sibling if sibling is not None else NOT_FOUND}\n")
    for word in _LOOKUPS:
        parent = tree.get_parent(NodeData(word))
        out.write(f"Parent of {word}:  {parent if parent is not None else NOT_FOUND}\n")

    snapshot = tree.copy()
    out.write(f"T == T2?     {'equal' if tree == snapshot else 'not equal'}\n")
    out.write(f"T != first?  {'not equal' if tree != first else 'equal'}\n")
    out.write(f"T == dup?    {'equal' if tree == dup else 'not equal'}\n")

    tree.from_array(tree.to_array())
    out.write(tree.sideways())
    return snapshot


def report_tree(tree: BinTree, out: TextIO) -> None:
    """Write lookups, family queries and equality checks for tree to out.

    The tree is left rebuilt as a balanced tree over the same items.
    """
    _report(tree, out, tree.copy(), tree.copy())


def report_removals(tree: BinTree, out: TextIO) -> None:
    """Remove a fixed series of words from tree, writing the tree after each."""
    out.write(f"Tree Inorder:\n{tree}\n")
    out.write(tree.sideways() + "\n")
    for word in _REMOVALS:
        try:
            tree.remove(NodeData(word))
            found = True
        except KeyError:
            found = False
        out.write(f"remove --> {word:<3}:  {'found' if found else 'not found'}\n")
        out.write(tree.sideways() + "\n")
    out.write(f"Tree Inorder:\n{tree}\n")


def _initial(words: Sequence[str], out: TextIO) -> None:
    shown = "".join(f"{word} " for word in words)
    out.write(f"Initial data:\n  {shown}{END_OF_TREE} \n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise the binary search tree.")
    parser.add_argument("datafile", nargs="?", default="data2.txt",
                        help="words for each tree, each tree ending with $$")
    parser.add_argument("--remove", action="store_true",
                        help="run the removal checks instead of the lookups")
    args = parser.parse_args(argv)

    try:
        with open(args.datafile, encoding="utf-8") as infile:
            groups = list(read_trees(infile))
    except OSError:
        print("File could not be opened.")
        return 1

    out = sys.stdout
    first: BinTree | None = None
    dup: BinTree | None = None
    for words in groups:
        _initial(words, out)
        tree = build_tree(words)
        if args.remove:
            report_removals(tree, out)
        else:
            if first is None:
                first, dup = tree.copy(), tree.copy()
            dup = _report(tree, out, first, dup)
        out.write(SEPARATOR + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())