# algolab

A collection of classic algorithms and data structures in plain Python,
with no runtime dependencies. Each module is small and self-contained.
Invalid input is reported with `ValueError` (or `OSError` for files).

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### Greedy and dynamic programming

- `algolab.activities`: activity selection. `Activity(start, finish)` is a
  frozen, ordered dataclass. `get_max_activities(activities)` returns a
  largest set of non-overlapping activities using `greedy`; the exhaustive
  `native` checks every subset.
- `algolab.change`: `get_change(denominations, amount)` returns a list of
  coins of minimal length summing to `amount`. It raises `ValueError` for a
  negative amount, a non-positive denomination, or an amount that cannot be
  made.
- `algolab.lcs`: longest common subsequence. `lcs(first, second)` uses the
  table-based `dynamic`; the recursive `native` is also available.

### Sorting, searching and uniqueness

- `algolab.count_sort`: `count_sort(array, minimum, maximum)`; an item
  outside `[minimum, maximum]` raises `ValueError`.
- `algolab.all_unique`: `all_unique(items)` is `True` for a non-empty
  sequence with no repeats (an empty sequence gives `False`).
- `algolab.duplicates`: `has_duplicates(data)` and
  `get_duplicates(data, naive=False)`. The default returns repeated values
  sorted; `naive=True` compares pairs and returns them in order of first
  appearance.

### Geometry

- `algolab.point`: `Point(x, y)` with `distance`, and equality and ordering
  (by x, then y) that tolerate differences below `EPS = 1e-8`. Points are
  not hashable.
- `algolab.closest_pair`: `closest_pair(points)` returns the two nearest
  points by divide and conquer; fewer than two points raise `ValueError`.
  `native`, `divide_and_conquer` and `closest_pair_between` are exposed too.

### Hashing and containers

- `algolab.sha256`: a pure-Python SHA-256. `Sha256(message=b"")` has
  `update`, `digest` and `hexdigest`; `sha256(text)` returns the hex digest
  of a string (UTF-8) or bytes.
- `algolab.bruteforce`: `bruteforce(password_hash, alphabet, max_length)`
  tries every string over `alphabet` of length 1 to `max_length` and returns
  the one whose SHA-256 hex digest equals `password_hash`, or `""`.
- `algolab.dictionary`: `Dictionary(hash_function=None, num_of_buckets=1000)`,
  a separate-chaining string-to-string table with `set`, `get` (a missing
  key gives `""`), `clear(num_of_buckets=1000)` and `len()`. Without a hash
  function it uses Python's `hash`. Sample hash functions: `hash_1`,
  `hash_2`, `hash_3`.
- `algolab.random_string`: `random_string(size, alphabet=DEFAULT_ALPHABET)`.
- `algolab.bst_set`: `IntSet`, a set of integers on an unbalanced binary
  search tree, with `insert`, `find`, `in` and `len()`.

### Graphs

- `algolab.digraph`: directed graph `Digraph` (`add_vertex`, `add_arc`,
  `vertices`, `adjacent_vertices`, `has_vertex`, `has_arc`) and
  `path_exists(graph, start_vertex, end_vertex)`.
- `algolab.ugraph`: undirected graph `Graph` without loops (`add_vertex`,
  `add_edge`, `vertices`, `adjacent_vertices`, `has_vertex`, `has_edge`),
  `connected_components`, breadth-first `shortest_path` (a vertex to itself
  gives `[v, v]`, no path gives `[]`), and `random_graph(size)`.
- `algolab.weighted_graph`: undirected weighted graph
  `WeightedGraph(edges=None)` with `add_vertex`, `add_edge`, `vertices`,
  `adjacent_vertices`, `adjacent_edges`, `has_vertex`, `has_edge`,
  `edge_weight` (raises `ValueError` for a missing edge), `remove_vertex`
  and `remove_edge`.
- `algolab.mst`: `min_spanning_tree(graph, start_vertex=0)` (Prim) returns
  `(vertex, parent)` edges; a missing start vertex or a disconnected graph
  raises `ValueError`.
- `algolab.weighted_path`: Dijkstra's `shortest_path` (returns `[]` when
  there is no path or start equals end) and `build_path`.
- `algolab.tsp`: travelling salesman tours. `tsp(graph, start_vertex)` uses
  branch and bound (`tsp_bnb`) and returns `[]` when no tour exists. Also
  `native` (all permutations), `greedy` (nearest neighbour),
  `tsp_local_search` (2-opt), and the helpers `path_length`, `min_path`,
  `lower_bound`, `bnb`, `transform`, `two_opt`, `check_non_adjacent_pair`.

### Compression

- `algolab.huffman`: `default_alphabet()`, `get_alphabet(text)`,
  `TreeNode`, `build_tree(alphabet)`, `code_table(root)` and
  `HuffmanCoder(alphabet=None)` (default alphabet when none is given), with
  `HuffmanCoder.from_text(text)`, the `table` property, `encode` and
  `decode`. Unknown symbols or bad codes raise `ValueError`.

### Benchmarks and file tools

- `algolab.benchmark`: `shuffled_sequence`, `random_sequence` (seeded, so
  repeatable), `run_containers(n)` and `measure_sort(size)`.
- `algolab.people_search`: `Person(name, surname, age)`, `read_persons`,
  `read_keys`, `build_dictionary` (keyed by surname, first one kept) and
  `search`.
- `algolab.people_sort`: `BirthDate`, `Person`, `read_persons`,
  `write_persons` and `sort_persons` (by name).

## Example

```python
from algolab.lcs import lcs
from algolab.weighted_graph import WeightedGraph
from algolab.weighted_path import shortest_path

print(lcs("nahybser", "iunkayxbis"))  # naybs

graph = WeightedGraph([(0, 1, 2.5), (0, 2, 1.0), (2, 1, 0.7)])
print(shortest_path(graph, 0, 1))  # [0, 2, 1]
```

## Command-line tools

- `algolab-huffman`: reads lines from standard input and prints each
  line's encoding with the default alphabet and the decoded text; an empty
  line ends the session.
- `algolab-components [MAX_POWER]`: times `connected_components` and
  `shortest_path` on random graphs of 10 to 10**MAX_POWER vertices
  (default 5).
- `algolab-containers [N]`: compares insertion and lookup times for a list,
  a deque and a set over `N` items (default 10).
- `algolab-sort-timing [MAX_POWER]`: times sorting random lists of 10 to
  10**MAX_POWER numbers (default 6).
- `algolab-people-search [INPUT] [KEYS]`: loads `name surname age` records
  from `INPUT` (default `input_1e3.txt`) into a dictionary keyed by
  surname, counts how many keys from `KEYS` (default `keys.txt`) are
  found, and reports the time each step took.
- `algolab-people-sort [INPUT] [OUTPUT]`: reads
  `name surname year month day` records from `INPUT` (default
  `input_1e3.txt`), sorts them by name, writes them to `OUTPUT` (default
  `output.txt`) and reports the time taken.

## Limitations

The SHA-256 and brute-force search are written in pure Python and are
meant for study, not speed. The benchmark commands print timings only;
they do not save results or draw charts.