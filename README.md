# algobox

Classic algorithms and data structures in plain Python, using only the
standard library. Every function takes its input as arguments and returns
its result; sorting functions return new lists and leave their input alone.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algobox.sequences` | `add_binary`, `equal_sum_xor_count`, `Job` and `schedule_jobs`, `largest_value`, `longest_unique_substring`, `min_operations_to_equalize`, `max_disjoint_intervals`, `sliding_window_max`, `median_of_sorted`, `count_power_sums`, `power_set`, `min_length_after_replacements`, `primes_up_to`, `max_window_sum` |
| `algobox.histogram` | `largest_rectangle_area`, `max_rectangle_in_binary_matrix` |
| `algobox.min_heap` | `MinHeap` (fixed capacity, `insert`, `extract_min`, `peek`, `decrease_key`, `delete_key`) and `HeapOverflowError` |
| `algobox.dp` | `binomial_coefficient`; coin change as `min_coins`, `count_coin_sequences` (ordered) and `count_coin_combinations` (unordered), each with alternative implementations; `count_tilings`, `count_domino_tilings_3xn`; `subset_sum_table`, `count_possible_sums`; `longest_increasing_subsequence`; `max_prefix_sum`, `max_subarray_sum_divide`, `kadane` |
| `algobox.numeric` | `catalan`, `max_points_on_line`, `factorial_mod` (modulo 1 000 000 009), `power_mod` (modulo 1 000 000 007), `rotate_matrix`, `running_medians`, `distance_point_rectangle` |
| `algobox.linked_list` | `Node` and `LinkedList` |
| `algobox.doubly_linked_list` | `DoubleNode` and `DoublyLinkedList` |
| `algobox.trees` | `TreeNode`, `bst_insert`, `insert_level_order`, `build_from_preorder_inorder`, `kth_smallest`, `height`, `level_order`, `lowest_common_ancestor`, `has_path_sum`, `is_symmetric`, `top_view`, `inorder`, `preorder`, `postorder` |
| `algobox.max_stack` | `MaxStack`, a stack whose `maximum()` is constant time |
| `algobox.graphs` | `directed_adjacency_list`, `undirected_adjacency_list`, `format_adjacency_list`, `is_bipartite` |
| `algobox.mst` | `DisjointSets`, `kruskal_mst`, `prim_mst` |
| `algobox.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort` (each with a variant), `merge_sort`, `quick_sort_first_pivot`, `quick_sort_last_pivot`, `quick_sort_middle_pivot` |

## Examples

```python
from algobox.sequences import add_binary, primes_up_to, sliding_window_max
from algobox.dp import kadane
from algobox.sorting import merge_sort
from algobox.min_heap import MinHeap

add_binary("11", "1")                               # "100"
primes_up_to(20)                                    # [2, 3, 5, 7, 11, 13, 17, 19]
sliding_window_max([12, 1, 78, 90, 57, 89, 56], 3)  # [78, 90, 90, 90, 89]
kadane([2, -1, 2, 3, 4, -5])                        # 10
merge_sort([1, 5, 2, 3, 6, 8, 12, 11])              # [1, 2, 3, 5, 6, 8, 11, 12]

heap = MinHeap(11)
for key in (3, 2, 15, 5):
    heap.insert(key)
heap.extract_min()                                  # 2
heap.peek()                                         # 3
```

`MinHeap.insert` raises `HeapOverflowError` once the capacity is reached;
`extract_min` and `peek` raise `IndexError` on an empty heap.

Trees are built from `TreeNode` values:

```python
from algobox.trees import bst_insert, inorder, level_order

root = None
for key in (50, 30, 20, 40, 70, 60, 80):
    root = bst_insert(root, key)
inorder(root)                                       # [20, 30, 40, 50, 60, 70, 80]
level_order(root)                                   # [50, 30, 70, 20, 40, 60, 80]
```

Linked lists behave like iterables:

```python
from algobox.linked_list import LinkedList

items = LinkedList([1, 2, 3, 4, 5])
items.insert_before(8, 2)
items.remove(5)
items.reverse()
list(items)                                         # [4, 3, 2, 8, 1]
```

Minimum spanning trees take an edge list or an adjacency matrix.
`kruskal_mst(vertex_count, edges)` takes `(u, v, weight)` edges and stops
after `vertex_count - 1` edges; it returns the total weight and the chosen
edges. `prim_mst(matrix)` treats 0 as "no edge" and returns
`(parent, vertex, weight)` for every vertex but 0:

```python
from algobox.mst import kruskal_mst, prim_mst

kruskal_mst(3, [(1, 2, 1), (2, 3, 3), (1, 3, 4)])   # (4, [(1, 2, 1), (2, 3, 3)])
prim_mst([[0, 2, 0], [2, 0, 3], [0, 3, 0]])         # [(0, 1, 2), (1, 2, 3)]
```

## What it does not do

algobox is a library only. It has no command-line program: nothing reads
numbers from standard input or prints results, so inputs are passed to the
functions directly and results come back as return values (or, for
`format_adjacency_list`, as a string you can print yourself).