"""Linked containers: a stack, a persistent list and a doubly linked deque."""

__version__ = "0.1.0"
__all__ = ["deque", "persistent", "stack"]