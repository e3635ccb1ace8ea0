# nodekit

Small, dependency-free data structures built from linked nodes, plus the
classic algorithms that go with them.

## Install

    pip install nodekit

For running the tests:

    pip install "nodekit[test]"
    pytest

## What is inside

### `nodekit.listnode`

`ListNode(val=0, next=None)` is one node of a singly linked chain. Nodes
compare by identity, and iterating over a node yields the values from that
node to the end of the chain.

- `from_iterable(values)` builds a chain and returns its head, or `None`
  when `values` is empty.
- `to_list(head)` returns the values of an acyclic chain as a list.
- `has_cycle(head)` tells whether following `next` ever loops.
- `remove_elements(head, val)` returns a new chain without the values equal
  to `val`; the input chain is not changed.
- `reverse_list(head)` reverses the chain in place and returns the new head.
- `merge_two_lists(list1, list2)` splices two sorted chains into one sorted
  chain; on equal values the node from `list1` comes first.
- `is_palindrome(head)` tells whether the values read the same both ways;
  the chain is left as it was.
- `delete_duplicates(head)` drops repeated neighbours of a sorted chain in
  place and returns its head.
- `middle_node(head)` returns the middle node, the second of the two
  middles for an even length.

### `nodekit.stack`

`Stack(items=())` is a LIFO stack with `push`, `pop`, `peek`, `is_empty`
and `len()`. Items given at construction are pushed in order; iteration
goes from top to bottom.

### `nodekit.queue_`

`Queue(items=())` is a FIFO queue with `enqueue`, `dequeue`, `front`,
`is_empty` and `len()`. Iteration goes from front to back.

### `nodekit.singly_linked`

`LinkedList(items=())` supports `push_front`, `push_back`, `pop_front`,
`pop_back` (both return the removed item), `insert(data, pos)` for
`0 <= pos <= len`, `remove(data)` for the first equal item, `front`,
`back`, `is_empty`, `len()`, `in` and iteration. `str()` gives the items
separated by spaces followed by the size, e.g. `"1 3 5  (3)"`.

### `nodekit.doubly_linked`

`DoublyLinkedList(items=())` has the same interface plus `reversed()`
iteration. `str()` gives the items, then the size, head and tail when the
list is not empty, e.g. `"1 2  (2)  head: (1)  tail: (2)"`;
`format_reversed()` does the same with the items listed tail to head.

### `nodekit.brackets`

- `is_valid(s)` tells whether `s` is a non-empty, properly nested run of
  `()[]{}`.
- `is_vps(s)` tells whether `s` is a valid string of round parentheses;
  any character other than `(` closes the most recent open one.
- `answer_vps(lines)` returns `"YES"` or `"NO"` for each string.

### `nodekit.stack_commands`

- `parse_input(text)` reads a command count followed by that many commands
  (`push X`, `pop`, `size`, `empty`, `top`) and returns `(name, arg)` pairs.
- `execute(commands)` runs them against an empty stack and returns what
  they report: `pop` and `top` give -1 on an empty stack, `empty` gives 1
  or 0, `size` gives the count. Unknown commands are ignored.

## Errors

Taking from an empty stack, queue or list (`pop`, `peek`, `dequeue`,
`front`, `back`, `pop_front`, `pop_back`) raises `IndexError`, as does
`insert` with a position outside `0..len`. `remove` raises `ValueError`
when the item is not in the list.

## Examples

```python
from nodekit.listnode import from_iterable, to_list, reverse_list, merge_two_lists

head = from_iterable([1, 2, 3])
print(to_list(reverse_list(head)))            # [3, 2, 1]

merged = merge_two_lists(from_iterable([1, 2, 4]), from_iterable([1, 3, 4]))
print(to_list(merged))                        # [1, 1, 2, 3, 4, 4]
```

```python
from nodekit.stack import Stack
from nodekit.queue_ import Queue

s = Stack([1, 2, 3])
s.pop()        # 3

q = Queue([1, 2, 3])
q.dequeue()    # 1
```

```python
from nodekit.singly_linked import LinkedList

items = LinkedList([1, 3, 5])
items.insert(2, 1)
list(items)    # [1, 2, 3, 5]
5 in items     # True
```

```python
from nodekit.brackets import is_valid, is_vps

is_valid("()[]{}")   # True
is_vps("(()")        # False
```

## Command-line tools

Both read standard input, split on whitespace: first the number of cases
or commands, then the cases or commands themselves.

    nodekit-vps < cases.txt      # prints YES or NO for each parenthesis string
    nodekit-stack < commands.txt # prints one line per pop, size, empty or top

Malformed input (a missing count, or fewer items than announced) ends the
command with a usage error.