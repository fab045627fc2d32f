# dsworkbench

A small collection of classic data structures in pure Python, each with a
command that demonstrates it. There are no dependencies outside the standard
library.

| Module | What it provides |
| --- | --- |
| `dsworkbench.bstree` | `BSTree`, `TreeNode`: binary search tree with pre-, in-, post- and level-order traversals; `format_traversal`, `format_report` |
| `dsworkbench.disjoint_set` | `DisjointSet`: union-find with path compression and union by rank; `run_commands` |
| `dsworkbench.linked_stack` | `LinkedStack`: stack built from linked nodes; `StackEmptyError` |
| `dsworkbench.linked_list` | `LinkedList`: singly linked list with head/tail insertion and removal; `ListEmptyError` |
| `dsworkbench.huffman_table` | `build_huffman_table`, `HTNode`, `format_table`: Huffman tree kept as a table of index links |
| `dsworkbench.huffman_codes` | `build_huffman_tree`, `HuffmanNode`, `huffman_codes`, `format_codes`: heap-built Huffman tree and its codes |
| `dsworkbench.threaded_tree` | `parse_preorder`, `inorder_thread`, `inorder_traverse`, `preorder_thread`, `preorder_traverse`, `ThreadNode`, `Tag` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

### Binary search tree

```python
from dsworkbench.bstree import BSTree, format_report

tree = BSTree([10, 20, 30, 5, 15, 25])
print(tree.inorder())      # [5, 10, 15, 20, 25, 30]
print(tree.level_order())  # [10, 5, 20, 15, 30, 25]
print(15 in tree, len(tree))
print(format_report(tree))
```

`insert` returns `False` and leaves the tree unchanged when the value is
already present.

### Disjoint sets

```python
from dsworkbench.disjoint_set import DisjointSet, run_commands

sets = DisjointSet(5)
sets.union(0, 1)
sets.union(1, 2)
print(sets.connected(0, 2))  # True
print(sets.connected(0, 4))  # False

print(run_commands("5 2\n0 0 1\n1 0 1\n"))  # ['Yes']
```

Elements are the integers `0 .. size-1`; any other element raises
`IndexError`. `union` returns `False` when the two elements were already in
the same set.

### Linked stack and list

```python
from dsworkbench.linked_stack import LinkedStack

stack = LinkedStack()
stack.push(1)
stack.push(2)
print(stack.pop())   # 2
print(list(stack))   # [1], from the top down
```

Popping or peeking an empty stack raises `StackEmptyError` (a subclass of
`IndexError`).

```python
from dsworkbench.linked_list import LinkedList

items = LinkedList([1, 2, 1, 3])
items.insert_head(0)
print(items.remove_at(1))     # 0; positions count from 1
print(items.remove_value(1))  # 2, the number of nodes removed
print(list(items))            # [2, 3]
```

`remove_at` raises `ListEmptyError` on an empty list and `IndexError` for a
position outside `1 .. len(list)`.

### Huffman trees

```python
from dsworkbench.huffman_table import build_huffman_table, format_table

table = build_huffman_table([10, 20, 30, 40])
print(format_table(table, 4))
```

The table has `2 * n` rows: row 0 is unused, rows `1 .. n` are the leaves in
input order, and the last row is the root. Links are row numbers, with 0
meaning none.

```python
from dsworkbench.huffman_codes import build_huffman_tree, huffman_codes

root = build_huffman_tree("abcdef", [5, 9, 12, 13, 16, 45])
print(huffman_codes(root))
```

Left edges are coded `0`, right edges `1`; internal nodes carry the symbol
`$`.

### Threaded binary trees

Trees are read in pre-order, one character per node, with `#` marking an
empty child; whitespace is ignored.

```python
from dsworkbench.threaded_tree import parse_preorder, inorder_thread, inorder_traverse

root = parse_preorder("1 2 4 # # 5 # # 3 6 # # 7 # #")
inorder_thread(root)
print(inorder_traverse(root))  # ['4', '2', '5', '1', '6', '3', '7']
```

`preorder_thread` and `preorder_traverse` do the same for pre-order.
`parse_preorder` raises `ValueError` if the input ends before the tree is
complete.

## Commands

| Command | What it does |
| --- | --- |
| `dsworkbench-bst [VALUE ...]` | builds a tree (by default from 10 20 30 5 15 25) and prints its four traversals |
| `dsworkbench-dsu` | answers union-find queries read from standard input |
| `dsworkbench-stack` | pushes 1 and 2, pops and prints what remains |
| `dsworkbench-list` | builds a short list, removes by position and by value, prints the rest |
| `dsworkbench-huffman-table [WEIGHT ...]` | builds a Huffman table (by default from 10 20 30 40) and prints its leaf rows |
| `dsworkbench-huffman-codes [--symbols S] [--freqs F ...]` | prints the code of each symbol (by default `abcdef` with 5 9 12 13 16 45) |
| `dsworkbench-threaded [--preorder]` | reads a tree from standard input and prints its in-order (or, with `--preorder`, pre-order) threaded traversal |

`dsworkbench-dsu` reads a line `n m` with the number of elements and of
operations, then `m` lines `op x y`, where `op` is `0` to join the sets of `x`
and `y` and `1` to ask whether they are in the same set (answered `Yes` or
`No`).

```
printf '5 3\n0 0 1\n1 0 1\n1 0 2\n' | dsworkbench-dsu
```

```
echo "1 2 4 # # 5 # # 3 6 # # 7 # #" | dsworkbench-threaded
```

## Limits

The structures live in memory only; nothing is saved to disk. The Huffman
modules build trees and codes but do not encode or decode data.