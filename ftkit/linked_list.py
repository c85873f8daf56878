"""A singly linked list whose algorithms take C-style comparison functions.

A comparison function ``cmp(a, b)`` returns a negative number, zero or a
positive number as ``a`` sorts before, equal to or after ``b``.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One element of a :class:`LinkedList`."""

    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list of arbitrary data."""

    def __init__(self, items=None):
        self.head = None
        if items is not None:
            for item in items:
                self.push_back(item)

    @classmethod
    def from_strs(cls, strs):
        """Build a list by pushing each string to the front, so the order is reversed."""
        lst = cls()
        if not strs:
            return lst
        for text in strs:
            lst.push_front(text)
        return lst

    def _nodes(self):
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def __iter__(self):
        return (node.data for node in self._nodes())

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, data):
        """Insert ``data`` at the start of the list."""
        self.head = Node(data, self.head)

    def push_back(self, data):
        """Append ``data`` at the end of the list."""
        node = Node(data)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self):
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def at(self, index):
        """The node at position ``index``, or None when there is none."""
        if index < 0:
            return None
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        return None

    def clear(self, free_fct):
        """Hand every element to ``free_fct`` and empty the list.

        Without a function the list is left untouched.
        """
        if free_fct is None:
            return
        node, self.head = self.head, None
        while node is not None:
            free_fct(node.data)
            node = node.next

    def print(self, print_fct):
        """Call ``print_fct`` on every element in order."""
        self.foreach(print_fct)

    def foreach(self, func):
        """Call ``func`` on every element in order."""
        if func is None:
            return
        for data in self:
            func(data)

    def foreach_if(self, func, data_ref, cmp):
        """Call ``func`` on every element that compares equal to ``data_ref``."""
        if data_ref is None or func is None or cmp is None:
            return
        for data in self:
            if cmp(data, data_ref) == 0:
                func(data)

    def find(self, data_ref, cmp):
        """The first node whose data compares equal to ``data_ref``, or None."""
        if cmp is None:
            return None
        return next(
            (node for node in self._nodes() if cmp(node.data, data_ref) == 0),
            None,
        )

    def remove_if(self, data_ref, cmp, free_fct):
        """Unlink every element equal to ``data_ref``, handing each to ``free_fct``."""
        if self.head is None or data_ref is None or cmp is None or free_fct is None:
            return
        prev = None
        node = self.head
        while node is not None:
            following = node.next
            if cmp(node.data, data_ref) == 0:
                free_fct(node.data)
                if prev is None:
                    self.head = following
                else:
                    prev.next = following
            else:
                prev = node
            node = following

    def merge(self, other):
        """Append the nodes of ``other`` to this list; ``other`` is left empty."""
        if other is None or other.head is None or other is self:
            return
        tail = self.last()
        if tail is None:
            self.head = other.head
        else:
            tail.next = other.head
        other.head = None

    def reverse(self):
        """Reverse the order of the elements in place."""
        prev = None
        node = self.head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self.head = prev

    def sort(self, cmp):
        """Sort the elements in place with a quicksort using the first element as pivot."""
        if self.head is None or cmp is None:
            return
        nodes = list(self._nodes())
        pending = [(0, len(nodes) - 1)]
        while pending:
            low, high = pending.pop()
            if low >= high:
                continue
            pivot = _partition(nodes, low, high, cmp)
            if pivot != low:
                pending.append((low, pivot))
            if pivot + 1 <= high:
                pending.append((pivot + 1, high))

    def sorted_insert(self, data, cmp):
        """Insert ``data`` after every element that does not sort after it."""
        if data is None or cmp is None:
            return
        current = self.head
        if current is None or cmp(data, current.data) < 0:
            self.push_front(data)
            return
        prev = None
        while current is not None and cmp(data, current.data) >= 0:
            prev, current = current, current.next
        prev.next = Node(data, current)

    def sorted_merge(self, other, cmp):
        """Insert every element of ``other`` into this sorted list."""
        if other is None or cmp is None:
            return
        for data in list(other):
            self.sorted_insert(data, cmp)

    def to_strs(self, length):
        """The first ``length`` elements as a list of strings.

        Returns None for an empty list or a zero length.
        """
        if self.head is None or length <= 0:
            return None
        result = []
        for data in self:
            if len(result) >= length:
                break
            if not isinstance(data, str):
                raise TypeError(f"element {data!r} is not a string")
            result.append(data)
        return result


def _partition(nodes, low, high, cmp):
    pivot_data = nodes[low].data
    pre = low
    for current in range(low + 1, high + 1):
        if cmp(nodes[current].data, pivot_data) < 0:
            pre += 1
            nodes[current].data, nodes[pre].data = nodes[pre].data, nodes[current].data
    nodes[low].data, nodes[pre].data = nodes[pre].data, nodes[low].data
    return pre