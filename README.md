# linkedlists

This package provides three small linked containers in plain Python:

- `linkedlists.stack.Stack` is a singly linked last-in, first-out stack.
- `linkedlists.persistent.PersistentList` is an immutable list that shares its
  structure. `prepend` and `tail` return new lists and leave the original
  unchanged.
- `linkedlists.deque.Deque` is a doubly linked deque. You can push to and pop
  from either end. `Deque.drain()` returns a `DequeDrain` that consumes the
  deque from the front or from the back.

If a container is empty, popping from it or peeking at it returns `None`.
If a container is empty, replacing an end element (`set_top`, `set_front`,
`set_back`) raises `IndexError`.

## Installation

```
pip install .
```

## Stack

```python
from linkedlists.stack import Stack

stack = Stack()
stack.push(1)
stack.push(2)
stack.push(3)

stack.peek()          # 3
len(stack)            # 3
stack.set_top(42)     # replace the top element
stack.pop()           # 42
list(stack)           # [2, 1]: iterating leaves the stack unchanged
stack.update_each(lambda x: x * 10)
list(stack.drain())   # [20, 10]: drain empties the stack
stack.pop()           # None
bool(stack)           # False
```

## Persistent list

```python
from linkedlists.persistent import PersistentList

base = PersistentList().prepend(1).prepend(2)
longer = base.prepend(3)

longer.head()         # 3
list(longer)          # [3, 2, 1]
list(base)            # [2, 1]: the original is unchanged
longer.tail().head()  # 2
PersistentList().tail().head()  # None: the tail of an empty list is empty
```

## Deque

```python
from linkedlists.deque import Deque

deque = Deque()
deque.push_front(1)
deque.push_front(2)
deque.push_back(0)

deque.peek_front()    # 2
deque.peek_back()     # 0
len(deque)            # 3

deque.set_back(5)     # replace the back element
deque.pop_back()      # 5
deque.push_back(0)

drain = deque.drain()
next(drain)           # 2
drain.next_back()     # 0
next(drain)           # 1
drain.next_back()     # None: the deque is now empty
```

If you iterate over a drain, it takes elements from the front. If you call
`reversed()` on a drain, it takes elements from the back. Either way, the
elements it returns are removed from the deque.

## Running the tests

```
pip install .[test]
pytest
```