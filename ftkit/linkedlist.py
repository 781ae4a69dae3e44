"""A singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list addressed through its head node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(Node(content))

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head. ``None`` is ignored."""
        if node is None:
            return
        if self.head is not None:
            node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Link ``node`` after the current tail. ``None`` is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the tail node, or None for an empty list."""
        tail = None
        for tail in self.nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]]) -> None:
        """Pass every content to ``delete`` in order and empty the list.

        Without a ``delete`` callable the list is left untouched.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            node = following
        self.head = None

    def iterate(self, func: Optional[Callable[[Any], None]]) -> None:
        """Call ``func`` on every content from head to tail."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None],
    ) -> "LinkedList":
        """Return a new list of ``func`` applied to each content.

        If ``func`` raises, the contents already produced are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(Node(func(content)))
        except BaseException:
            result.clear(delete)
            raise
        return result