# treegraph

Small data structures and algorithms with no dependencies outside the standard
library:

- **`treegraph.graph`**: a directed graph stored as an adjacency list. Each
  vertex holds a unique string, and edges can be one-way or two-way.
- **`treegraph.traversal`**: depth-first and breadth-first traversal from the
  first vertex added to the graph.
- **`treegraph.heap`**: a binary min-heap built from linked `BinaryTreeNode`
  objects and ordered by a comparison function you supply.
- **`treegraph.treeprint`**: ASCII drawings of binary trees and red-black trees.
- **`treegraph.huffman`**: builds a Huffman tree and the codes that come from it.
- **`treegraph.cli`**: a small command that shows a sample graph and walks it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Graphs

```python
from treegraph.graph import EdgeType, Graph
from treegraph.traversal import breadth_first_traverse, depth_first_traverse

graph = Graph()
for city in ("San Francisco", "Seattle", "New York", "Las Vegas"):
    graph.add_vertex(city)

graph.add_edge("San Francisco", "Las Vegas", EdgeType.BIDIRECTIONAL)
graph.add_edge("Las Vegas", "New York", EdgeType.UNIDIRECTIONAL)

graph.display()          # prints the adjacency list
text = str(graph)        # the same listing as a string

def show(vertex, depth):
    print(" " * depth * 4 + f"[{vertex.index}] {vertex.content}")

print("Depth:", depth_first_traverse(graph, show))
print("Depth:", breadth_first_traverse(graph, show))
```

`Graph.add_vertex` returns the new `Vertex`, whose `index` is its position in
the graph. `len(graph)` counts the vertices, iterating over the graph yields
them in insertion order, `"Seattle" in graph` tests membership and
`graph.vertex("Seattle")` looks one up (raising `KeyError` if it is absent).
`graph.clear()` removes every vertex and edge.

`GraphError` is raised when you add a vertex that already exists or whose
content is not a string, when you connect vertices that are not in the graph,
and when the edge type is not an `EdgeType`. Adding an edge that is already
there does nothing; for a two-way edge, an existing forward edge means no
reverse edge is added either.

Both traversals start at the first vertex and only reach what is connected to
it. They call the action (which may be `None`) with each vertex and its depth,
and return the greatest depth reached, or 0 for an empty graph or `None`.

## Heaps

```python
from treegraph.heap import Heap

heap = Heap(lambda a, b: a - b)
for n in (34, 2, 98, 12):
    heap.insert(n)
print(heap.extract())  # 2
print(len(heap))       # 3
```

The comparison function returns a negative number when its first argument
should come first. `insert` returns the new node; `extract` removes and
returns the data at the root and raises `IndexError` on an empty heap;
`clear` drops every node. With `Heap(None)` no reordering takes place.

## Huffman coding

```python
from treegraph.huffman import format_huffman_codes, huffman_codes, huffman_tree

data = ["a", "b", "c", "d", "e", "f"]
freq = [6, 11, 12, 13, 16, 36]
print(format_huffman_codes(data, freq), end="")
codes = huffman_codes(data, freq)   # {character: code}
root = huffman_tree(data, freq)     # BinaryTreeNode holding Symbol objects
```

`huffman_tree` raises `ValueError` when the inputs are empty or of different
lengths; `huffman_codes` and `format_huffman_codes` return an empty result for
empty inputs. A single symbol gets the code `1`. The lower-level steps,
`huffman_priority_queue` and `huffman_extract_and_insert`, are available too.

## Tree printing

`format_binary_tree(root, format_data)` returns a drawing of a tree of
`BinaryTreeNode` objects, with `format_data` turning each node's data into its
label. `format_rb_tree(tree)` draws a tree of `RBNode` objects, labelling each
node with its colour and value, for example `B(042)`. Both return an empty
string for an empty tree. Children must have their `parent` set for the
connecting lines to be drawn correctly.

## Command line

```
treegraph
treegraph dfs
treegraph bfs
```

Each builds a fixed sample graph of eight cities and prints its adjacency list.
`dfs` first adds an unconnected "Los Angeles" vertex, then prints a depth-first
traversal; `bfs` prints a breadth-first traversal. Both finish with the depth
reached. Run `treegraph --help` to see the options.

## What it does not do

The command only works on its built-in sample graph; nothing reads graphs from
or writes them to files. The Huffman module produces trees and codes but does
not encode or decode data with them.