"""An unbalanced binary search tree without duplicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence


@dataclass(slots=True)
class _Node:
    data: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _inorder(node: Optional[_Node]) -> Iterator[_Node]:
    stack: list[_Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder(node: Optional[_Node]) -> Iterator[_Node]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def _copy(node: Optional[_Node]) -> Optional[_Node]:
    if node is None:
        return None
    return _Node(node.data, _copy(node.left), _copy(node.right))


def _same(a: Optional[_Node], b: Optional[_Node]) -> bool:
    if a is None or b is None:
        return a is None and b is None
    return a.data == b.data and _same(a.left, b.left) and _same(a.right, b.right)


def _balanced(items: Sequence[Any], start: int, end: int) -> Optional[_Node]:
    if start > end:
        return None
    middle = (start + end) // 2
    return _Node(items[middle],
                 _balanced(items, start, middle - 1),
                 _balanced(items, middle + 1, end))


class BinTree:
    """A binary search tree: smaller items to the left, larger to the right.

    Duplicates are refused and the tree does not rebalance itself.
    """

    __hash__ = None  # mutable

    INDENT = " " * 9

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        """Remove every item."""
        self._root = None

    def copy(self) -> BinTree:
        """Return a tree with the same shape and items."""
        clone = BinTree()
        clone._root = _copy(self._root)
        return clone

    def insert(self, item: Any) -> bool:
        """Insert item; return False if an equal item is already present."""
        new = _Node(item)
        if self._root is None:
            self._root = new
            return True
        current = self._root
        while True:
            if item < current.data:
                if current.left is None:
                    current.left = new
                    return True
                current = current.left
            elif item > current.data:
                if current.right is None:
                    current.right = new
                    return True
                current = current.right
            else:
                return False

    def retrieve(self, target: Any) -> Any:
        """Return the stored item equal to target, or None if absent."""
        current = self._root
        while current is not None:
            if current.data == target:
                return current.data
            current = current.left if current.data > target else current.right
        return None

    def remove(self, target: Any) -> Any:
        """Remove and return the item equal to target.

        A node with two children takes the largest item of its left subtree.
        Raises KeyError if target is absent.
        """
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and not target == node.data:
            parent = node
            node = node.left if target < node.data else node.right
        if node is None:
            raise KeyError(target)
        removed = node.data
        if node.left is not None and node.right is not None:
            pred_parent, pred = node, node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.data = pred.data
            if pred_parent is node:
                pred_parent.left = pred.left
            else:
                pred_parent.right = pred.left
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        return removed

    def get_parent(self, target: Any) -> Any:
        """Return the item of target's parent, or None for the root or a missing item."""
        if self._root is None or self._root.data == target:
            return None
        for node in _preorder(self._root):
            for child in (node.left, node.right):
                if child is not None and child.data == target:
                    return node.data
        return None

    def get_sibling(self, target: Any) -> Any:
        """Return the item of target's sibling, or None if it has none."""
        if self._root is None or self._root.data == target:
            return None
        for node in _preorder(self._root):
            if node.left is not None and node.left.data == target:
                return node.right.data if node.right is not None else None
            if node.right is not None and node.right.data == target:
                return node.left.data if node.left is not None else None
        return None

    def to_array(self) -> list[Any]:
        """Return the items in ascending order and leave the tree empty."""
        items = list(self)
        self._root = None
        return items

    def from_array(self, items: Sequence[Any]) -> None:
        """Replace the contents with a balanced tree over the sorted items."""
        items = list(items)
        self._root = _balanced(items, 0, len(items) - 1)

    def sideways(self) -> str:
        """Render the tree rotated, root at the left and larger items on top."""
        lines: list[str] = []

        def walk(node: Optional[_Node], level: int) -> None:
            if node is None:
                return
            level += 1
            walk(node.right, level)
            lines.append(f"{self.INDENT * (level + 1)}{node.data}\n")
            walk(node.left, level)

        walk(self._root, 0)
        return "".join(lines)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _inorder(self._root))

    def __len__(self) -> int:
        return sum(1 for _ in _inorder(self._root))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinTree):
            return NotImplemented
        return _same(self._root, other._root)

    def __str__(self) -> str:
        return "".join(f"{item} " for item in self)

    def __repr__(self) -> str:
        return f"BinTree([{', '.join(repr(item) for item in self)}])"