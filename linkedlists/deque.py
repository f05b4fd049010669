"""A doubly linked double-ended queue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

from .stack import _elem_of, _replace, _repr

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("elem", "next", "prev")

    def __init__(self, elem: T) -> None:
        self.elem = elem
        self.next: Optional[_Node[T]] = None
        self.prev: Optional[_Node[T]] = None


@dataclass(frozen=True)
class _End:
    """Names the attributes that describe one end of the deque."""

    near: str  # the deque's pointer to this end
    far: str  # the deque's pointer to the other end
    inward: str  # link from an end node towards the middle
    outward: str  # link from a node towards this end


_FRONT = _End("_head", "_tail", "next", "prev")
_BACK = _End("_tail", "_head", "prev", "next")


class Deque(Generic[T]):
    """A queue that can be pushed to and popped from at either end."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0

    def _push(self, elem: T, end: _End) -> None:
        node = _Node(elem)
        old = getattr(self, end.near)
        if old is None:
            setattr(self, end.far, node)
        else:
            setattr(old, end.outward, node)
            setattr(node, end.inward, old)
        setattr(self, end.near, node)
        self._size += 1

    def _pop(self, end: _End) -> Optional[T]:
        node = getattr(self, end.near)
        if node is None:
            return None
        new = getattr(node, end.inward)
        setattr(self, end.near, new)
        if new is None:
            setattr(self, end.far, None)
        else:
            setattr(new, end.outward, None)
        setattr(node, end.inward, None)
        self._size -= 1
        return node.elem

    def push_front(self, elem: T) -> None:
        """Insert ``elem`` at the front."""
        self._push(elem, _FRONT)

    def push_back(self, elem: T) -> None:
        """Insert ``elem`` at the back."""
        self._push(elem, _BACK)

    def pop_front(self) -> Optional[T]:
        """Remove and return the front element, or ``None`` if empty."""
        return self._pop(_FRONT)

    def pop_back(self) -> Optional[T]:
        """Remove and return the back element, or ``None`` if empty."""
        return self._pop(_BACK)

    def peek_front(self) -> Optional[T]:
        """Return the front element, or ``None`` if empty."""
        return _elem_of(self._head)

    def peek_back(self) -> Optional[T]:
        """Return the back element, or ``None`` if empty."""
        return _elem_of(self._tail)

    def set_front(self, value: T) -> None:
        """Replace the front element with ``value``."""
        _replace(self._head, value, "set_front")

    def set_back(self, value: T) -> None:
        """Replace the back element with ``value``."""
        _replace(self._tail, value, "set_back")

    def drain(self) -> "DequeDrain[T]":
        """Return an iterator that removes elements from either end."""
        return DequeDrain(self)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return _repr(self, self._head)


class DequeDrain(Generic[T]):
    """Consumes a deque from the front with ``next`` and from the back with ``next_back``."""

    def __init__(self, deque: Deque[T]) -> None:
        self._deque = deque

    def __iter__(self) -> "DequeDrain[T]":
        return self

    def __next__(self) -> T:
        if not self._deque:
            raise StopIteration
        return self._deque.pop_front()  # type: ignore[return-value]

    def next_back(self) -> Optional[T]:
        """Remove and return the back element, or ``None`` when exhausted."""
        return self._deque.pop_back()

    def __reversed__(self) -> Iterator[T]:
        while self._deque:
            yield self._deque.pop_back()  # type: ignore[misc]