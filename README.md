# algolab

Classic data structures and algorithms in plain Python, with no
third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.sorting` | `straight_insert_sort`, `binary_insert_sort`, `bubble_sort`, `quick_sort`; each returns a new ascending list |
| `algolab.hashing` | `ClosedHashTable` (division method, linear probing, deletion markers), `OpenHashTable` (separate chaining, new keys at the head of their chain) |
| `algolab.dp` | `knapsack` (0/1 knapsack), `max_subsequence_sum_brute` (O(n²)), `max_subsequence_sum` (O(n)) |
| `algolab.scheduling` | `Job`, `hrn`, `sjf`, `fcfs`, `average_wait`, `format_schedule` |
| `algolab.union_find` | `UnionFind` with union by size |
| `algolab.linked_list` | `LinkedList` with 1-based positions |
| `algolab.seq_list` | `SeqList`, a bounded list with 1-based positions |
| `algolab.circular_queue` | `CircularQueue`, a fixed-capacity ring |
| `algolab.static_list` | `StaticList`, a linked list whose links are array indices |
| `algolab.seq_stack` | `SeqStack`, a bounded stack |
| `algolab.trains` | `dispatch`, moving train cars through a stack-shaped station |
| `algolab.min_heap` | `MinHeap`, a bounded binary min-heap |
| `algolab.polynomial` | `Term`, `Polynomial` with `+`, `-` and `*` |
| `algolab.sparse_matrix` | `Triple`, `TriSparseMatrix` with `simple_transpose` and `fast_transpose` |
| `algolab.cross_list` | `CrossList`, a sparse matrix linked by rows and columns |
| `algolab.gen_list` | `GenList`, generalized lists parsed from text such as `((a,b),c,d,(e,()))`, with `depth()` |
| `algolab.graph` | `DirectedGraph` on adjacency lists |
| `algolab.undirected_graph` | `UndirectedGraph` with `dfs` and `bfs`, one list per connected component |
| `algolab.topo_sort` | `topological_order`, `CycleError` |
| `algolab.networks` | `Network`, `DirectedNetwork`, `UndirectedNetwork` on weight matrices |
| `algolab.spanning_tree` | `kruskal`, `prim`, `SpanEdge`, `DisconnectedError` |
| `algolab.critical_path` | `ActivityNetwork`, `critical_path`, `CriticalPathResult` |
| `algolab.shortest_path` | `bellman_ford`, `dijkstra`, `floyd`, `SingleSourcePaths`, `AllPairsPaths` |

Failing operations raise exceptions: `IndexError` for a position out of
range or an empty container, `OverflowError` for a full one, `KeyError`
or `ValueError` for a missing key or element.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algolab.dp import knapsack, max_subsequence_sum
from algolab.union_find import UnionFind

best = knapsack([2, 3, 4], [3, 4, 5], 5)                # 7
largest = max_subsequence_sum([-2, 11, -4, 13, -5, -2])  # 20

sets = UnionFind("ABCDE")
sets.union("D", "E")
sets.union("C", "E")
sets.is_different("C", "D")   # False
```

Graph algorithms work on the graph and network classes:

```python
from algolab.networks import DirectedNetwork, UndirectedNetwork
from algolab.shortest_path import dijkstra
from algolab.spanning_tree import kruskal

network = UndirectedNetwork("ABCD")
network.insert_arc(0, 1, 5)
network.insert_arc(1, 2, 3)
network.insert_arc(2, 3, 4)
network.insert_arc(0, 3, 9)
tree = kruskal(network)       # list of SpanEdge, lightest first

roads = DirectedNetwork("XYZ")
roads.insert_arc(0, 1, 2)
roads.insert_arc(1, 2, 2)
paths = dijkstra(roads, 0)
paths.distances               # [0, 2, 4]
paths.route(2)                # ['X', 'Y', 'Z']
```

A network marks a missing arc with its `infinity` weight (100 unless
given otherwise).

## Command-line tools

- `algolab-schedule [FILE]` reads, from FILE or standard input, a job
  count followed by a name, an arrival time and a running time for each
  job (jobs in order of arrival). It prints the highest-response-ratio,
  shortest-job-first and first-come-first-served schedules, each with its
  average waiting time.
- `algolab-trains [ARRIVALS DEPARTURES]` takes an arrival order and a
  departure order of cars, one letter per car, as arguments, or asks for
  them when they are left out, and prints each move into and out of the
  station.
- `algolab-sparse [FILE]` reads, from FILE or standard input, a row
  count, a column count and a number of entries, then each entry as row,
  column and value, and prints the matrix and its transpose.
- `algolab-graph [FILE]` starts with a small directed graph on `A`, `B`,
  `C` and reads one-character commands, ignoring whitespace, from FILE or
  standard input: `1` shows the graph, `2` inserts a vertex, `3` and `4`
  insert and delete an arc, `5` deletes a vertex, `6` and `7` print the
  first and next adjacent vertex, and `0` stops.

Program messages and table titles are printed in Chinese.

## What it does not do

The knapsack, maximum-subsequence, polynomial, hashing, list, queue,
heap and graph-algorithm modules are library code only; there is no
command that reads their input from a terminal. Nothing is stored
between runs.