# dsbasics

A compact collection of classic data structures and algorithms with a
plain Python interface. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

Add the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsbasics.formatting`: `format_value`, `format_sequence` and
  `print_sequence` render values and sequences as `prefix[a, b, c]`.
- `dsbasics.arrays`: `array_insert`, `insert`, `insertion_sort`, `merge`,
  `merge_sort` and `counting_sort`. The sorts work on a list in place.
  `array_insert` and `insert` raise `IndexError` for a bad index.
  `counting_sort(items, k)` raises `ValueError` for a value outside
  `range(k)`.
- `dsbasics.linked_list.Node`: a singly linked list behind a sentinel head
  node. It has `insert_after`, `find_predecessor`, `to_list` and iteration
  over the values that follow the node.
- `dsbasics.stack.Stack` and `dsbasics.ring_queue.RingQueue`: containers
  with a fixed capacity. `pop` and `dequeue` return the value they remove.
  Reading from an empty container raises `IndexError`, and adding to a
  full one raises `OverflowError`.
- `dsbasics.binary_tree`: linked trees built from `BinaryTree` nodes, or
  with `make_binary_tree`. An empty subtree is `None`.
- `dsbasics.complete_tree.CompleteBT`: a view of a list as a complete
  binary tree, with `value`, `parent`, `left`, `right` and `subtree`. An
  empty view is falsy.
- `dsbasics.bst`: `bst_insert`, and `bst_search`, which returns the subtree
  holding the largest value that does not exceed the one searched for.
- `dsbasics.traversal`: `height`, the generators `iter_depth_first`
  (in-order) and `iter_breadth_first`, and `df_traversal` and
  `bf_traversal`, which call a function on each subtree.
- `dsbasics.tree_print`: `binary_tree_lines` draws a tree as lines of
  text, and `print_binary_tree` prints that drawing.
- `dsbasics.heap`: `heap_sift_up`, `heap_sift_down`, `build_heap` and
  `heap_sort`. The default comparison `operator.gt` gives a max-heap and
  sorts in ascending order.
- `dsbasics.priority_queue`: `priority_enqueue`, and `priority_dequeue`,
  which returns the top element. Both work on a list kept as a heap.
- `dsbasics.hash_table.HashTable`: a hash table with separate chaining and
  a hash function you can replace. It has `insert`, `get` (which returns
  `None` for a missing key), `slot_sizes`, and `describe`, which returns a
  text summary of the chain lengths.
- `dsbasics.graph`: `Hop`, the sample graphs `TEST_GRAPH` and
  `SPARSE_TEST_GRAPH`, `graph_to_sparse`, `to_dot` (Graphviz dot text) and
  `print_graph`.
- `dsbasics.shortest_paths`: `relax`, `bellman_ford`, `dijkstra`,
  `dijkstra_priority` and `floyd_warshall`, on adjacency matrices.
  - A result lists a `Hop(distance, predecessor)` for each vertex.
  - `bellman_ford` returns a `BellmanFordResult(paths, has_negative_cycle)`.
- `dsbasics.lsh`: locality-sensitive hashing for cosine distance. It has
  `LSHFamily`, `LSHTable`, `LSHResult`, `naive_retrieve` and `benchmark`.

## Examples

```python
from dsbasics.arrays import merge_sort

values = [5, 3, 0, 1, 5, 3]
merge_sort(values, 0, len(values))
print(values)  # [0, 1, 3, 3, 5, 5]
```

```python
from dsbasics.bst import bst_insert, bst_search
from dsbasics.tree_print import print_binary_tree

tree = None
for x in (12, 5, 18, 2, 9, 15, 19, 13, 17):
    tree = bst_insert(tree, x)
print_binary_tree(tree)
print(bst_search(tree, 6).value)  # 5
```

```python
from dsbasics.priority_queue import priority_enqueue, priority_dequeue

queue = []
for x in (15, 9, 3, 23):
    priority_enqueue(queue, x)
print(priority_dequeue(queue))  # 23, the largest element
```

```python
from dsbasics.graph import TEST_GRAPH
from dsbasics.shortest_paths import dijkstra

for vertex, hop in enumerate(dijkstra(TEST_GRAPH, 2)):
    print(vertex, hop)
```

## LSH benchmark

The package installs a command that builds LSH tables over random unit
vectors. It compares their retrieval quality and speed-up with a linear
scan and prints a table of the results:

```
dsbasics-lsh
dsbasics-lsh --dataset-size 2000 --queryset-size 200 --seed 1
```

## What it does not do

The LSH benchmark is the only command. Graphs are printed as Graphviz dot
text only; the package does not render or display them.