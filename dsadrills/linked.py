"""Singly linked list exercises: loops, deletion, intersection, merging and sorting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Node:
    """A node of a singly linked list, compared by identity."""

    __slots__ = ("data", "next")

    def __init__(self, data: int, next: Node | None = None) -> None:
        self.data = data
        self.next = next

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node on, stopping if a node comes round again."""
        seen: set[int] = set()
        node: Node | None = self
        while node is not None and id(node) not in seen:
            seen.add(id(node))
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"Node({list(self)!r})"


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_iterable(values: Iterable[int]) -> Node | None:
    """Build a list holding ``values`` in order; None when there are none."""
    dummy = Node(0)
    tail = dummy
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return dummy.next


def to_list(head: Node | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def make_loop(head: Node | None, position: int) -> None:
    """Link the last node back to the node at 1-based ``position``; 0 leaves the list alone."""
    if position == 0 or head is None:
        return
    nodes = list(_nodes(head))
    if not 1 <= position <= len(nodes):
        raise IndexError(f"position {position} outside a list of {len(nodes)} nodes")
    nodes[-1].next = nodes[position - 1]


def detect_loop(head: Node | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever comes back to a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def delete_node(head: Node | None, x: int) -> Node | None:
    """Remove the node at 1-based position ``x`` and return the new head.

    Positions outside the list leave it unchanged.
    """
    if head is None or x <= 0:
        return head
    if x == 1:
        return head.next
    before = head
    for _ in range(x - 2):
        before = before.next
        if before is None:
            return head
    if before.next is not None:
        before.next = before.next.next
    return head


def delete_alternate(head: Node | None) -> None:
    """Remove the second, fourth, sixth ... nodes in place."""
    node = head
    while node is not None and node.next is not None:
        node.next = node.next.next
        node = node.next


def intersect_point(head1: Node | None, head2: Node | None) -> Node | None:
    """Return the first node of ``head2`` that also belongs to ``head1``, or None."""
    first = {id(node) for node in _nodes(head1)}
    return next((node for node in _nodes(head2) if id(node) in first), None)


def intersect_point_two_pointer(head1: Node | None, head2: Node | None) -> Node | None:
    """Find the shared node of two lists by walking both, each then the other."""
    p1, p2 = head1, head2
    while p1 is not p2:
        p1 = p1.next if p1 is not None else head2
        p2 = p2.next if p2 is not None else head1
    return p1


def sorted_intersection(head1: Node | None, head2: Node | None) -> Node | None:
    """Return a new list of the values common to two sorted lists."""
    dummy = Node(-1)
    tail = dummy
    t1, t2 = head1, head2
    while t1 is not None and t2 is not None:
        if t1.data > t2.data:
            t2 = t2.next
        elif t1.data < t2.data:
            t1 = t1.next
        else:
            tail.next = Node(t1.data)
            tail = tail.next
            t1, t2 = t1.next, t2.next
    return dummy.next


def get_middle(head: Node | None) -> int:
    """Value of the middle node (the second of two middles); -1 for an empty list."""
    if head is None:
        return -1
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow.data


def kth_from_last(head: Node | None, k: int) -> int:
    """Value of the ``k``-th node from the end; -1 when the list is shorter than ``k``."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    values = to_list(head)
    if k > len(values):
        return -1
    return values[-k]


def merge_sorted(list1: Node | None, list2: Node | None) -> Node | None:
    """Splice two sorted lists into one sorted list; ties take ``list1`` first."""
    dummy = Node(-1)
    tail = dummy
    t1, t2 = list1, list2
    while t1 is not None and t2 is not None:
        if t1.data > t2.data:
            tail.next, t2 = t2, t2.next
        else:
            tail.next, t1 = t1, t1.next
        tail = tail.next
    tail.next = t1 if t1 is not None else t2
    return dummy.next


def delete_all_duplicates(head: Node | None) -> Node | None:
    """Drop every value that appears more than once in a sorted list."""
    dummy = Node(0, head)
    prev = dummy
    node = head
    while node is not None:
        if node.next is not None and node.data == node.next.data:
            while node.next is not None and node.data == node.next.data:
                node = node.next
            prev.next = node.next
        else:
            prev = prev.next
        node = node.next
    return dummy.next


def delete_duplicates(head: Node | None) -> Node | None:
    """Keep one node of each run of equal values in a sorted list."""
    node = head
    while node is not None:
        follower = node.next
        while follower is not None and follower.data == node.data:
            follower = follower.next
        node.next = follower
        node = follower
    return head


def reversed_values(head: Node | None) -> list[int]:
    """Return the values of the list from last to first."""
    return to_list(head)[::-1]


def segregate(head: Node | None) -> Node | None:
    """Relink a list of 0s, 1s and 2s so all 0s come first, then 1s, then the rest."""
    if head is None or head.next is None:
        return head
    zero_d, one_d, two_d = Node(0), Node(0), Node(0)
    zero, one, two = zero_d, one_d, two_d
    for node in list(_nodes(head)):
        if node.data == 0:
            zero.next = node
            zero = node
        elif node.data == 1:
            one.next = node
            one = node
        else:
            two.next = node
            two = node
    zero.next = one_d.next if one_d.next is not None else two_d.next
    one.next = two_d.next
    two.next = None
    return zero_d.next