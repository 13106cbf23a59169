# routefinder

A small collection of classic data structures and graph algorithms, together
with an interactive shortest-route finder for maps of coordinates.

## What is inside

- `routefinder.linked_list.DoublyLinkedList`: a doubly linked list built
  from any iterable. It has `prepend`, `append`, `insert(data, index)`,
  `remove(index)`, `search(data)` (which returns the index or -1), indexing
  and item assignment, `len`, iteration, `is_empty`, `copy` and `concat`.
  Bad indices raise `IndexError`. `str()` joins the items with `", "`.
- `routefinder.hashing.HashFunction`: `get_hash(key)` returns
  `key % table_size`. The table size defaults to 10, and a size that is not
  positive raises `ValueError`.
- `routefinder.rbtree.RBTree`: a red-black tree with `insert`, `remove`,
  `search`, `in`, `len`, `is_empty`, `copy`, `tree_min`, `tree_max` and the
  generators `pre_order`, `in_order` and `post_order`. Iterating over the tree
  yields its values in order. Equal values go to the right. Removing from an
  empty tree, or asking an empty tree for its minimum or maximum, raises
  `EmptyTreeError`. Removing a missing value raises `ValueNotInTreeError`.
  The nodes are `RBTreeNode` objects, each with a `Color`.
- `routefinder.graph.Graph`: a directed graph over vertices numbered from 1.
  - It has `add_edge`, `remove_edge`, `edge_in`, `add_vertex`,
    `delete_vertex` and `copy`.
  - `breadth_first_search(s)` maps each reachable vertex to
    `(distance, parent)`.
  - `depth_first_search(sort=False)` maps each vertex to
    `(discovery, finish, parent)`. The parent is -1 for vertices that have
    none. With `sort=True` it stores a topological ordering, which
    `get_ordering()` returns.
  - `format_adjacency_list()` renders the graph as text.
  - `Graph.read(stream)` reads `n m` followed by `m` pairs `u v`.
  - A missing edge or vertex raises `EdgeError`. Adding a vertex that already
    exists raises `VertexError`.
- `routefinder.priority_queue.PriorityQueue`: a binary min-heap of distinct
  node ids.
  - It has `insert`, `extract_min`, `decrease_key`, `is_empty`, `len`, `in`,
    `copy` and `format_heap`.
  - Indexing returns the `(node, priority)` entry in a heap slot.
  - A duplicate insert raises `ValueError`.
  - Extracting from an empty queue raises `IndexError`.
  - Decreasing the key of an unknown node raises `KeyError`. A priority that
    is not lower is ignored.
- `routefinder.weighted_graph.WeightedGraph`: a weighted directed graph whose
  vertices carry `(x, y)` coordinates.
  - It has `add_vertex`, `add_edge`, `edge_in`, `id_from_coords` (which returns
    `None` when no vertex is at the point), `find_node`, `dijkstras(start, end)`,
    `path_weight(path)`, `format_adjacency_list`, `copy`, `read` and
    `read_file`.
  - Unknown coordinates raise `ValueError`.
  - When the end cannot be reached, the path holds only the end coordinate.
- `routefinder.cli`: the interactive route finder. It provides
  `run_route_finder(input_stream, output_stream)` and
  `format_path(path)`, which renders `(x, y) -> (x, y)`.

## Installing

```
pip install .
```

## Using the library

```python
from routefinder.weighted_graph import WeightedGraph

graph = WeightedGraph()
graph.add_vertex(1, 0.0, 0.0)
graph.add_vertex(2, 1.0, 0.0)
graph.add_vertex(3, 2.0, 0.0)
graph.add_edge(1, 2, 4.0)
graph.add_edge(2, 3, 1.5)
graph.add_edge(3, 1, 2.0)

path = graph.dijkstras((0.0, 0.0), (2.0, 0.0))
print(path)                    # [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
print(graph.path_weight(path)) # 5.5
```

## Graph files

`WeightedGraph.read_file` and `WeightedGraph.read` take text in this form:

```
<vertex count> <edge count>
<id> <x> <y>          one line per vertex
<u> <v> <weight>      one line per edge
```

Edge lines that do not hold an edge are skipped. A file that cannot be opened
raises `FileNotFoundError`.

## The route finder

```
routefinder
```

The route finder works like this:

1. It prints a welcome and asks for a graph file. If the file cannot be
   loaded, it prints the error and stops.
2. It asks for a start coordinate and then an end coordinate, each written as
   `x y`. It asks again until the coordinates match a vertex.
3. It prints the shortest path with its total weight. When the total weight is
   0, it prints `No path between these points` instead.
4. It goes back to step 2 and asks for the next start coordinate.

Typing `q` at any prompt quits, and so does the end of input.

## Limitations

The package has no hash map container: `HashFunction` only computes slots.
The route finder loads a single graph per run and keeps nothing between runs.