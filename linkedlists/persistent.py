"""An immutable, structurally shared singly linked list."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

from .stack import _Node, _elem_of, _repr, _walk

T = TypeVar("T")


class PersistentList(Generic[T]):
    """A list whose operations return new lists that share their tails."""

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None

    @classmethod
    def _from_node(cls, node: Optional[_Node[T]]) -> "PersistentList[T]":
        lst = cls()
        lst._head = node
        return lst

    def prepend(self, elem: T) -> "PersistentList[T]":
        """Return a new list with ``elem`` in front of this one."""
        return self._from_node(_Node(elem, self._head))

    def tail(self) -> "PersistentList[T]":
        """Return the list without its first element; empty stays empty."""
        return self._from_node(None if self._head is None else self._head.next)

    def head(self) -> Optional[T]:
        """Return the first element, or ``None`` if the list is empty."""
        return _elem_of(self._head)

    def __iter__(self) -> Iterator[T]:
        return (node.elem for node in _walk(self._head))

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return _repr(self, self._head)