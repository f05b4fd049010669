"""A singly linked last-in, first-out stack, plus the node helpers the other lists share."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    elem: T
    next: Optional["_Node[T]"] = None


def _walk(node: Any) -> Iterator[Any]:
    """Yield ``node`` and every node reachable through ``next`` links."""
    while node is not None:
        yield node
        node = node.next


def _elem_of(node: Any) -> Any:
    """Return the element held by ``node``, or ``None`` when there is no node."""
    return None if node is None else node.elem


def _replace(node: Any, value: Any, action: str) -> None:
    """Store ``value`` in ``node``; an absent node means the container is empty."""
    if node is None:
        raise IndexError(f"{action} on an empty container")
    node.elem = value


def _repr(container: Any, head: Any) -> str:
    items = [node.elem for node in _walk(head)]
    return f"{type(container).__name__}({items!r})"


class Stack(Generic[T]):
    """A stack built from singly linked nodes; the newest element is on top."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0

    def push(self, elem: T) -> None:
        """Put ``elem`` on top of the stack."""
        self._head = _Node(elem, self._head)
        self._size += 1

    def pop(self) -> Optional[T]:
        """Remove and return the top element, or ``None`` if the stack is empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        self._size -= 1
        return node.elem

    def peek(self) -> Optional[T]:
        """Return the top element without removing it, or ``None`` if empty."""
        return _elem_of(self._head)

    def set_top(self, value: T) -> None:
        """Replace the top element with ``value``."""
        _replace(self._head, value, "set_top")

    def update_each(self, func: Callable[[T], T]) -> None:
        """Replace every element, top to bottom, with ``func(element)``."""
        for node in _walk(self._head):
            node.elem = func(node.elem)

    def drain(self) -> Iterator[T]:
        """Yield elements top to bottom, removing each one as it is yielded."""
        while self:
            yield self.pop()  # type: ignore[misc]

    def __iter__(self) -> Iterator[T]:
        return (node.elem for node in _walk(self._head))

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return _repr(self, self._head)