"""Algorithms over singly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list, with an optional random link.

    Nodes compare and hash by identity.
    """

    val: int = 0
    next: ListNode | None = None
    random: ListNode | None = None

    def __iter__(self) -> Iterator[ListNode]:
        """Yield this node and every node after it; never ends on a cycle."""
        node: ListNode | None = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a list holding values in order; return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list in order."""
    if head is None:
        return []
    return [node.val for node in head]


def copy_random_list(head: ListNode | None) -> ListNode | None:
    """Deep-copy a list whose nodes also carry a random link."""
    if head is None:
        return None
    copies = {node: ListNode(node.val) for node in head}
    for original, copy in copies.items():
        if original.next is not None:
            copy.next = copies[original.next]
        if original.random is not None:
            copy.random = copies[original.random]
    return copies[head]


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    reversed_head: ListNode | None = None
    while head is not None:
        following = head.next
        head.next = reversed_head
        reversed_head = head
        head = following
    return reversed_head


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the values read the same both ways; the list is left intact."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = reverse_list(slow.next)
    try:
        return all(a.val == b.val for a, b in zip(head, second or ()))
    finally:
        slow.next = reverse_list(second)


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node from the end (counting from 1); return the head."""
    nodes = list(head) if head is not None else []
    if not 1 <= n <= len(nodes):
        raise ValueError(f"n must be between 1 and {len(nodes)}, got {n}")
    if n == len(nodes):
        return nodes[0].next
    nodes[-n - 1].next = nodes[-n].next
    return head


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list k places to the right; return the new head."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if head is None or head.next is None or k == 0:
        return head
    nodes = list(head)
    k %= len(nodes)
    if k == 0:
        return head
    new_tail = nodes[len(nodes) - k - 1]
    new_head = new_tail.next
    new_tail.next = None
    nodes[-1].next = head
    return new_head


def merge_two_lists(
    first: ListNode | None, second: ListNode | None
) -> ListNode | None:
    """Splice two sorted lists into one sorted list; return its head."""
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val <= second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None if the list ends."""
    if head is None or head.next is None:
        return None
    slow = fast = entry = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
        if slow is fast:
            while slow is not entry:
                slow = slow.next  # type: ignore[assignment]
                entry = entry.next  # type: ignore[assignment]
            return entry
    return None