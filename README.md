# sdpgraph

Colouring graphs and finding cliques with semidefinite programming (SDP)
relaxations, with simple greedy algorithms alongside for comparison.

- **SDP colouring** (`Graph.color`): solves the vector-colouring relaxation,
  then rounds it with random unit vectors, one colour class per round.
- **Delta+1 colouring** (`Graph.greedy_color`): greedy colouring, last vertex
  first, with at most `max_degree + 1` colours.
- **SDP clique** (`Graph.find_max_clique`): solves a relaxation for the maximum
  clique, rounds it with a random hyperplane and repairs any conflicts.
- **Greedy clique** (`Graph.greedy_clique`): starts from vertex 0 and adds, in
  order, every vertex adjacent to all vertices chosen so far.
- **Lovász theta** (`Graph.lovasz`): computes the theta number of the graph.

## Installation

```
pip install .
```

## Graph files

A graph is stored as an adjacency matrix. The first line holds the number of
vertices `n`. It is followed by `n` rows of `n` entries, each a single
character separated by single spaces; `1` marks an edge:

```
3
0 1 1
1 0 0
1 0 0
```

A missing row, or a row shorter than `2n - 1` characters, raises
`GraphFormatError`.

## Commands

### `sdpgraph [options] FILE`

| option           | action                                        |
|------------------|-----------------------------------------------|
| `-print`         | print the vertex count, edge count and edges  |
| `-delta_color`   | colour the graph with the delta+1 algorithm   |
| `-color`         | colour the graph with the SDP algorithm       |
| `-greedy_clique` | find a clique with the greedy algorithm       |
| `-clique`        | find a clique with the SDP algorithm          |

Options may be combined; each result is printed in the order above.

```
sdpgraph -delta_color -clique examples/random_prob/graph10_0.50
```

### `sdpgraph-generate [DIRECTORY] [--seed SEED]`

Writes random graphs to `DIRECTORY` (default `examples/random_prob`), named
`graph<n>_<p>` with `p` to two decimals, for every `n` from 5 to 95 in steps
of 5 and every `p` from 0.00 to 0.95 in steps of 0.05. Each entry on or above
the diagonal, the diagonal included, is 1 with probability `p`.

### `sdpgraph-tester [DIRECTORY] [OUT_DIR] [--repeats N]`

Reads the generated graphs with `n` from 5 to 45 from `DIRECTORY` (default
`examples/random_prob`) and runs every algorithm on each, keeping the best of
`N` tries (default 3) of the randomised ones; SDP colouring is run with
`delta` of -0.2, 0 and 0.2. It writes `results_by_n` and `results_by_p` into
`OUT_DIR` (default `examples`). Each line holds the group's `n` or `p`
followed by the averages of: greedy colours, SDP colours for each `delta`,
greedy clique size, SDP clique size and maximum degree. A failed run counts
as -1.

### `sdpgraph-visualize OPTION FILE`

Opens a matplotlib window showing the graph with its vertices on a circle,
coloured by the chosen algorithm or with the found clique drawn in red.
`OPTION` is exactly one of `-delta_color`, `-color`, `-greedy_clique`,
`-clique`.

## Library use

```python
from sdpgraph.graph import Graph

g = Graph.from_text("3\n0 1 1\n1 0 0\n1 0 0\n", seed=1)
count, colors = g.greedy_color()   # (2, [1, 2, 2])
clique = g.greedy_clique()         # [0, 1]
theta = g.lovasz()
```

`Graph(n, edges, seed)` builds a graph directly from an edge list, and
`Graph.from_file(path, seed)` reads an adjacency-matrix file. Colouring
methods return `(number_of_colours, colours)` with colours starting at 1;
clique methods return the list of vertices. When a result fails its own
check, a `ValueError` is raised. `Graph.vector_coloring()` returns the unit
vectors of the vector colouring and the vector chromatic number.

`sdpgraph.visualize` provides `circle_layout`, `draw_coloring` and
`draw_clique` for drawing onto a matplotlib `Axes`.

`sdpgraph.sdp.solve_sdp(c, constraints, b, tol, max_iter)` is a dense
primal–dual interior-point solver on numpy, returning an `SDPResult` or
raising `SDPError`. It is meant for small and medium-sized graphs.

## Limitations

- Only the adjacency-matrix file format is read; there is no edge-list input.
- The SDP solver works on dense matrices of size about `n + m`, so large
  graphs are slow and memory-hungry.