# dsalab

A collection of classic data-structure and algorithm exercises. Each
module is usable as a library, and most have a demonstration command.
The package uses only the standard library.

## Modules

- `dsalab.recursion` – `find_blocks`, `find_blocks2`, `binary_search`,
  `bracket_search`, `binomial`, `reverse_string`, `to_binary`, `to_hex`,
  `is_palindrome`, `catalan` and `hanoi_moves` (which returns the list of
  `(disk, from, to)` moves).
- `dsalab.timespan` – `TimeSpan`, built from `()`, `(seconds)`,
  `(minutes, seconds)` or `(hours, minutes, seconds)`; fractional values
  are folded into whole seconds. Supports `+`, `-`, unary `-`, `==`,
  `set_time` (raises `ValueError` outside its bounds) and `is_positive`.
- `dsalab.squares` – `Square` (ordered by `size`) and `SquareContainer`,
  a stack whose `capacity()` starts at 10 and doubles when full.
  `delete_last` raises `SquareContainerError` (an `IndexError`) when the
  container is empty.
- `dsalab.sorting` – in-place sorts: `bubble_sort`,
  `early_exit_bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`,
  `random_pivot_quick_sort`, `shell_sort` and `knuth_shell_sort`.
  `get_sort(name)` looks one up by name (for example `"MergeSort"`,
  `"QuickSort"`, `"RandomQuickSort"`, `"KnuthShellSort"`) and raises
  `ValueError` for an unknown name.
- `dsalab.sorter` – input generators `in_order`, `reverse_order`,
  `partially_ordered`, `random_array` and `mid_random_array`, plus
  `format_array` and `run_sort`, which sorts a copy and reports timing.
- `dsalab.intset` – `IntSet`, a set of non-negative integers with union
  (`+`, `+=`), intersection (`*`, `*=`), difference (`-`, `-=`), `in`,
  `insert` (raises `ValueError` for negatives), `remove` (returns whether
  the value was present) and `IntSet.from_tokens`, which stops at `-1`.
- `dsalab.nodedata` – `NodeData`, an ordered string payload;
  `NodeData.from_stream` reads one line and raises `EOFError` at the end.
- `dsalab.bintree` – `BinTree`, an unbalanced binary search tree without
  duplicates: `insert`, `retrieve`, `remove` (raises `KeyError` if absent),
  `get_parent`, `get_sibling`, `to_array` (empties the tree),
  `from_array` (builds a balanced tree), `sideways`, `copy`, `clear`,
  in-order iteration and structural `==`.
- `dsalab.treedriver` – `read_trees`, `build_tree`, `report_tree` and
  `report_removals`.
- `dsalab.containers` – `swap_bubble_sort`, `list_demo` and `map_demo`.
- `dsalab.graphl` – `GraphL`, a weighted directed graph with Dijkstra
  shortest paths: `build_graph`, `find_shortest_path`, `distance`,
  `path`, `display` and `display_all` (the last two return text).
- `dsalab.graphm` – `GraphM`, an unweighted directed graph:
  `build_graph`, `display_graph` (returns text) and `depth_first_search`
  (returns the node order).
- `dsalab.graph_driver` – `run_shortest_paths` and `run_depth_first`,
  which report on every graph in a stream.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from dsalab.recursion import catalan, binomial, to_hex
from dsalab.timespan import TimeSpan
from dsalab.intset import IntSet

catalan(4)          # 14
binomial(3, 8)      # 56
to_hex(179912)      # '2BEC8'

print(TimeSpan(1.5, 4, -10))   # Hours: 1, Minutes: 33, Seconds: 50

a = IntSet(9)
a.insert(3)
a.insert(7)
print(a)            # { 3 7 9}
```

## Commands

Each command prints its demonstration to standard output.

```
dsalab-recursion [NUMBER]         # recursion examples; NUMBER is shown in hex
dsalab-timespan [H M S]           # TimeSpan walkthrough; prompts if H M S omitted
dsalab-squares                    # Square and SquareContainer walkthrough
dsalab-intset                     # IntSet operations
dsalab-containers                 # list and map demonstrations
dsalab-trees [DATAFILE] [--remove]
dsalab-graphs [WEIGHTED] [UNWEIGHTED]
```

`dsalab-trees` reads `data2.txt` by default: whitespace-separated words,
each tree ending with `$$`. With `--remove` it runs a fixed series of
removals instead of lookups.

`dsalab-graphs` reads `data31.txt` and `data32.txt` by default. Each graph
begins with the node count, then one description line per node, then
`from to cost` triples (or `from to` pairs for the depth-first file),
ending with a group whose first value is `0`.

The sorter takes a sort name, an array size and optionally whether to
print the arrays. It sorts an in-order array of that size three times and
reports the time of each run in microseconds:

```
dsalab-sorter MergeSort 20 YES
dsalab-sorter QuickSort 10000 NO
```

## Limitations

- Graphs are fixed once read: there is no adding or removing of edges
  and no comparison of graphs.
- The sorter command only times in-order input; the other generators are
  available from `dsalab.sorter` for use in your own code.