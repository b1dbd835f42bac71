"""Binary search tree helpers: merging, median and minimum."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> Iterator[int]:
    """Yield the values of a tree in in-order sequence."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes in a tree."""
    return sum(1 for _ in inorder(root))


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    return list(heapq.merge(first, second))


def sorted_to_bst(values: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced BST from a sorted sequence."""

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        mid = (start + end) // 2
        return TreeNode(values[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(values) - 1)


def merge_trees(first: TreeNode | None, second: TreeNode | None) -> TreeNode | None:
    """Merge two BSTs into a new height-balanced BST."""
    return sorted_to_bst(merge_sorted(inorder(first), inorder(second)))


def find_median(root: TreeNode | None) -> float:
    """Return the median of the values of a non-empty BST."""
    values = list(inorder(root))
    if not values:
        raise ValueError("find_median() of an empty tree")
    half = len(values) // 2
    if len(values) % 2:
        return float(values[half])
    return (values[half - 1] + values[half]) / 2


def min_value(root: TreeNode | None) -> int:
    """Return the smallest value of a non-empty BST."""
    if root is None:
        raise ValueError("min_value() of an empty tree")
    while root.left is not None:
        root = root.left
    return root.data