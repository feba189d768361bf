"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a list: a value and the node that follows it."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: T) -> Node[T]:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: T) -> Node[T]:
        """Append ``content`` at the end and return its node."""
        node: Node[T] = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node[T]]:
        """Return the final node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """Return a new list holding ``func`` applied to every value, in order."""
        return LinkedList(func(content) for content in self)

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Empty the list, passing each value to ``delete`` first when it is given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None