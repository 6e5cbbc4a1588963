# algokit

Classic algorithms and data structures in pure Python, with no runtime
dependencies. Python 3.10 or later.

## Modules

- `algokit.imath`: `dot_product` (wrapped to 32 bits), `m_based` (base-m
  digits of a 64-bit key, least significant first, padded to `KLEN` = 64),
  `exp_mod` (modular exponentiation), `zeros_r` (trailing zero bits of a 32-bit
  value; zero gives 32), and the primality tests `test_prime` (trial division),
  `miller_rabin_test` (three random witnesses, optional `random.Random`) and
  `is_prime` (both combined).
- `algokit.integer`: `Integer`, an unsigned integer with a fixed number of
  16-bit components, least significant first. `Integer.from_string` parses
  decimal text into a value just wide enough to hold it; `to_string`,
  `is_zero`, `compare`, indexing of components and `len()` are provided. It
  supports `+` and `-` with another `Integer`, `*` with an `Integer` or a
  16-bit `int`, `//` by a 16-bit `int`, and `%` by an `Integer` (giving an
  `Integer`) or by a 16-bit `int` (giving an `int`). Results keep a fixed width,
  so subtraction wraps around within the left operand's width.
- `algokit.byteorder`: `is_big_endian`, `byte_swap2`, `byte_swap4`,
  `byte_swap8`, and the GB18030 helpers `gb18030_read` (returns the code word
  and its byte length) and `gb18030_bytes` (the bytes of a code word).
- `algokit.b64`: `encode_base64` (standard padded base64), `index_of_code`, and
  `decode_base64`, a lenient decoder: unknown characters, `=` included, count
  as zero, a trailing incomplete group is ignored, and each decoded 3-byte
  group stops at its first zero byte.
- `algokit.lru_cache`: `LRUCache`, holding at most `capacity` entries (default
  10). `get` and `put` both make a key the most recently used; `get` on a
  missing key raises `KeyError`. `items()` lists entries from most to least
  recently used.
- `algokit.bst`: `BST`, an unbalanced binary search tree that keeps duplicate
  keys. `find` returns a `(key, value)` pair or `None`, `get` raises
  `KeyError`, `delete` returns whether an entry was removed, `items()` yields
  pairs in key order and `render()` draws the tree sideways as text.
- `algokit.bounded_queue`: `BoundedQueue`, a FIFO queue of fixed capacity.
  `enqueue` returns `False` when full; `dequeue` and `front` on an empty queue
  raise `QueueEmptyError`.
- `algokit.sorting`: `insertion_sort`, `bubble_sort`, `quick_sort`,
  `selection_sort`, `merge_sort` and `heap_sort` take an optional
  `comp(a, b)` that is true when `a` belongs after `b` (default ascending);
  `shell_sort`, `remove_dup` (keeps first occurrences in order) and
  `random_select` (the k-th smallest item, 1-based, by quickselect). All return
  new lists and leave their input alone.
- `algokit.btree`: `BTree`, a B-tree of signed 32-bit keys of minimum degree
  255 stored in a file of 4096-byte blocks, with the root always at offset 0.
  `search` returns a `SearchResult(offset, index)` or `None`; `insert` keeps
  duplicates; `delete` ignores absent keys. It is a context manager and has
  `close()`.
- `algokit.text`: `longest_palindrome` (the earliest longest palindromic
  substring) and `SuffixArray`, built by prefix doubling. Indexing gives the
  start of the i-th smallest suffix, and `lcp_length(x, y)` the length of the
  longest common prefix of two suffixes.
- `algokit.graph`: `UndirectedGraph`, a weighted graph with at most one edge
  between two vertices, keeping insertion order. `add_vertex`, `add_edge`,
  `delete_vertex` and `delete_edge` return whether they changed the graph;
  `neighbors`, `weight`, `vertices`, `vertex_count`, `edge_count` and `in` are
  provided, and `random_graph` builds a random test graph on vertices
  1..n.
- `algokit.graph_search`: `bfs(graph, source)` returns the reachable vertices
  in visiting order mapped to their distance in edges; `dfs(graph)` returns one
  list per search tree of `(vertex, discovery_time, finish_time)` in finishing
  order.
- `algokit.maxflow`: `EdmondsKarp` and `RelabelToFront` take either a graph
  with `vertices()`, `neighbors()` and `weight()` or a mapping
  `{u: {v: capacity}}` (which allows directed networks). `run(source, sink)`
  returns the maximum flow; `RelabelToFront.run_push_relabel` computes it by a
  plain sweep; `residual(u, v)` gives residual capacity after the last run.
- `algokit.mst`: `prim(graph, source)` and `kruskal(graph)` return a new
  `UndirectedGraph` holding a minimum spanning tree (or forest for `kruskal`).

## Installation

```
pip install .
```

## Examples

```python
from algokit.lru_cache import LRUCache

cache = LRUCache(2)
cache.put("a", 1)
cache.put("b", 2)
cache.get("a")          # "a" becomes the most recently used entry
cache.put("c", 3)       # evicts "b", the least recently used entry
"b" in cache            # False
```

```python
from algokit.graph import UndirectedGraph
from algokit.mst import prim

g = UndirectedGraph()
for v in (1, 2, 3):
    g.add_vertex(v)
g.add_edge(1, 2, 4)
g.add_edge(2, 3, 1)
g.add_edge(1, 3, 7)
tree = prim(g, 1)
tree.edge_count()       # 2
```

```python
from algokit.maxflow import EdmondsKarp

network = {"s": {"a": 3, "b": 2}, "a": {"t": 2}, "b": {"t": 3}}
EdmondsKarp(network).run("s", "t")   # 4
```

```python
from algokit.btree import BTree

with BTree("keys.dat") as tree:
    for k in range(100):
        tree.insert(k)
    tree.search(42)     # SearchResult(offset=..., index=...)
```

## What it does not do

- There are no command-line programs; everything is used as a library.
- `BTree` marks freed blocks but never reuses them, so its file only grows.
  It stores keys only, with no values attached.
- The only graph class is `UndirectedGraph`; directed networks can be given to
  the max-flow classes as plain mappings.

## Running the tests

```
pip install .[test]
pytest
```