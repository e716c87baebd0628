# dsakit

Small, capacity-bounded data structures. Operations return their results and
raise exceptions on misuse; nothing is printed.

## Installation

```
pip install dsakit
```

## What is inside

### `dsakit.fixed_array`

`FixedArray(items=(), capacity=10)` holds at most `capacity` values.

- `insert_begin(value)`, `insert_end(value)`, `insert_at(index, value)` add a
  value, shifting later elements right. They raise `ArrayFullError` when the
  array is full; `insert_at` raises `IndexError` when `index` is outside
  `0..len(array)`.
- `delete_begin()`, `delete_end()`, `delete_at(index)` remove and return a
  value. They raise `ArrayEmptyError` on an empty array; `delete_at` raises
  `IndexError` for an index outside the array.
- `update(index, value)` overwrites an element (`IndexError` if out of range).
- `fill_range(count)` replaces the contents with `0, 1, ...`, stopping at
  `count` or at the capacity, whichever is smaller, and returns how many were
  written.
- `render()` returns the elements separated by single spaces.
- Supports `len()`, iteration, indexing and a read-only `capacity` property.
  Creating an array with more items than its capacity raises `ArrayFullError`.

### `dsakit.linked_list`

`LinkedList(values=())` is a singly linked list of `Node` cells (`data`,
`next`). Positions are counted from 1.

- `insert_begin(value)`, `insert_end(value)`, `insert_at(value, position)`;
  `insert_at` raises `IndexError` when the position cannot be reached.
- `delete_begin()`, `delete_end()`, `delete_at(position)` remove and return a
  value; they raise `ListEmptyError` on an empty list, and `delete_at` raises
  `IndexError` for a position below 1 or past the end.
- `render()` returns the list drawn as `10 -> 20 -> NULL`.
- Supports `len()` and iteration; the first cell is available as `head`.

### `dsakit.stack`

`BoundedStack(capacity=5)`: `push(value)` raises `StackOverflowError` when
full; `pop()` and `peek()` raise `StackUnderflowError` when empty. Iteration
goes from top to bottom, and `render()` returns the values top to bottom
separated by spaces, or `Stack is empty`.

### `dsakit.bounded_queue`

`BoundedQueue(capacity=5)`: `enqueue(value)` raises `QueueFullError` when
full; `dequeue()` returns the front value or raises `QueueEmptyError`.
Iteration goes from front to rear.

### `dsakit.hash_table`

`LinearProbingTable(size=10)` stores integer keys with home slot
`key % size` and linear probing.

- `insert(key)` returns the slot used, or raises `TableFullError`.
- `search(key)` returns the slot holding the key, or raises `KeyError`.
- `delete(key)` empties that slot and returns its index (`KeyError` if
  absent).
- `key in table` tests membership; `slots()` returns a copy of every slot,
  with `None` for empty ones.

### `dsakit.binary_tree`

`TreeNode(data, left=None, right=None)` and the generator functions
`inorder(root)`, `preorder(root)` and `postorder(root)`, each yielding the
node values in that order (nothing for `None`).

## Example

```python
from dsakit.fixed_array import FixedArray
from dsakit.linked_list import LinkedList
from dsakit.stack import BoundedStack
from dsakit.hash_table import LinearProbingTable
from dsakit.binary_tree import TreeNode, inorder

array = FixedArray([10, 20, 30, 40, 50], capacity=10)
array.insert_at(2, 25)
print(array.render())          # 10 20 25 30 40 50

items = LinkedList([10, 20, 30, 40])
items.delete_begin()
print(items.render())          # 20 -> 30 -> 40 -> NULL

stack = BoundedStack(5)
stack.push(10)
stack.push(20)
print(stack.pop())             # 20

table = LinearProbingTable()
table.insert(5)
print(table.insert(15))        # 6

root = TreeNode(10, TreeNode(20), TreeNode(30))
print(list(inorder(root)))     # [20, 10, 30]
```

## What it does not do

dsakit is a library only: it has no command-line program and does not print
anything. The structures live in memory and are not saved anywhere.

## Running the tests

```
pip install -e ".[test]"
pytest
```