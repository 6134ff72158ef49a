# algocollection

A small, dependency-free library of classic algorithms and data structures,
grouped by topic:

| Module | What it offers |
| --- | --- |
| `algocollection.sequences` | `max_subarray_sum`, `range_sums`, `count_primes`, `z_array`, `z_search`, `shortest_uncommon_subsequence` |
| `algocollection.sorting` | `bubble_sort`, `binary_insertion_sort`, `insertion_position` |
| `algocollection.dynamic` | `partition_cost` (divide-and-conquer optimisation), `max_profit_schedule` (weighted job scheduling) |
| `algocollection.shapes` | `Rectangle` and `Cuboid` |
| `algocollection.stacks` | `BoundedStack`, `BoundedQueue`, `evaluate_postfix` |
| `algocollection.binary_tree` | `TreeNode`, traversals, `levels`, `right_side_view`, `invert_tree`, tree reconstruction, `nth_inorder`, `nth_postorder` |
| `algocollection.bst` | `bst_insert`, `is_valid_bst`, `lowest_common_ancestor`, `bst_to_min_heap` |
| `algocollection.graphs` | `adjacency`, `bfs_distances`, `dijkstra`, `message_route`, `is_connected`, `find_cycle` |
| `algocollection.labyrinth` | `parse_grid`, `solve_labyrinth` and a command-line solver |
| `algocollection.linked_list` | `ListNode` and list algorithms: rotation, alternate-k reversal, insertion sort, merging, cycle detection, k-th from end, middle |
| `algocollection.sorted_ring` | `SortedRing`, a circular doubly linked list of distinct values kept in ascending order |
| `algocollection.crane_game` | `run_crane`, a crane moving boxes between stacks by a command string |

## Installation

```
pip install algocollection
```

To run the test suite:

```
pip install "algocollection[test]"
pytest
```

## Examples

```python
from algocollection.sequences import count_primes, max_subarray_sum, z_search
from algocollection.stacks import evaluate_postfix

max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])   # 7
count_primes(10)                                   # 4 (2, 3, 5, 7)
z_search("Hacktoberfest is Awesome", "Awesome")    # [17]
evaluate_postfix("23*4+")                          # 10
```

```python
from algocollection.linked_list import from_iterable, rotate, values_of

head = rotate(from_iterable([10, 20, 30, 40, 50, 60]), 4)
values_of(head)                                    # [50, 60, 10, 20, 30, 40]
```

Graph functions take the number of nodes `n` and a list of edges over nodes
numbered `1..n`; the graphs are undirected. `dijkstra` maps unreachable nodes
to `None`, and `message_route` and `find_cycle` return `None` when there is no
route or no cycle.

## Errors

Errors are raised as exceptions. Pushing onto a full `BoundedStack` raises
`StackOverflowError`, popping or peeking an empty one raises
`StackUnderflowError`; `BoundedQueue` raises `QueueOverflowError` and
`QueueUnderflowError` in the same way. Note that a `BoundedQueue` uses each of
its slots once: after `capacity` values have been enqueued it stays full.
`evaluate_postfix` accepts single-digit operands and the operators
`+ - * / ^` (division truncates toward zero) and raises `PostfixError` for a
malformed expression. Out-of-range arguments elsewhere raise `ValueError` or
`IndexError`.

## Command line

The labyrinth solver is installed as a command. It reads the maze from a file
named as its argument, or from standard input when none is given: first the
number of rows and columns, then the grid cells, where `A` marks the start,
`B` the goal and `.` open floor; any other cell is a wall. Whitespace between
cells is ignored.

```
algocollection-labyrinth maze.txt
algocollection-labyrinth < maze.txt
```

It prints `YES`, the length of a shortest path and the moves (`U`, `D`, `L`,
`R`) when the goal can be reached, and `NO` otherwise. A malformed grid is
reported as a usage error.

No other module has a command; everything else is used as a library.