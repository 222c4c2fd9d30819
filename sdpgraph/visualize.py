"""Draw colourings and cliques of a graph with its vertices on a circle."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Sequence

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from .graph import Graph, GraphFormatError
from .sdp import SDPError

__all__ = ["PALETTE", "circle_layout", "draw_coloring", "draw_clique", "main"]

WIDTH, HEIGHT = 1000, 800
VERTEX_RADIUS = 30
EDGE_WIDTH = 3.0
CLIQUE_COLOR = "#e62937"
PALETTE = (
    "#000000",
    "#e62937",
    "#00e430",
    "#0079f1",
    "#ffa100",
    "#fdf900",
    "#0052ac",
    "#701f7e",
    "#873cbe",
    "#66bfff",
    "#7f6a4f",
)


def circle_layout(n: int, cx: float = 500, cy: float = 400, radius: float = 300) -> list[tuple[float, float]]:
    """Positions of ``n`` vertices spaced evenly on a circle."""
    if n <= 0:
        return []
    step = 2 * math.pi / n
    return [(cx + radius * math.cos(step * i), cy + radius * math.sin(step * i)) for i in range(n)]


def _prepare(ax: Axes | None) -> Axes:
    if ax is None:
        ax = Figure(figsize=(10, 8)).add_subplot()
    ax.set_xlim(0, WIDTH)
    ax.set_ylim(HEIGHT, 0)
    ax.set_aspect("equal")
    ax.axis("off")
    return ax


def _draw_edges(ax: Axes, graph: Graph, pos) -> None:
    for i, j in graph.edges:
        ax.plot([pos[i][0], pos[j][0]], [pos[i][1], pos[j][1]], color="black", linewidth=EDGE_WIDTH, zorder=1)


def _draw_labels(ax: Axes, pos) -> None:
    for i, (x, y) in enumerate(pos):
        ax.text(x, y, str(i), color="white", fontsize=12, ha="center", va="center", zorder=4)


def draw_coloring(graph: Graph, colors: Sequence[int], ax: Axes | None = None) -> Axes:
    """Draw the graph with every vertex filled in its colour."""
    if len(colors) != graph.n:
        raise ValueError("need one colour per vertex")
    ax = _prepare(ax)
    pos = circle_layout(graph.n)
    _draw_edges(ax, graph, pos)
    for (x, y), c in zip(pos, colors):
        fill = PALETTE[c % len(PALETTE)]
        ax.add_patch(Circle((x, y), VERTEX_RADIUS, facecolor=fill, edgecolor=fill, zorder=2))
    _draw_labels(ax, pos)
    return ax


def draw_clique(graph: Graph, clique: Sequence[int], ax: Axes | None = None) -> Axes:
    """Draw the graph with the clique's vertices and edges highlighted."""
    members = list(clique)
    if any(not 0 <= v < graph.n for v in members):
        raise ValueError("clique vertex out of range")
    ax = _prepare(ax)
    pos = circle_layout(graph.n)
    _draw_edges(ax, graph, pos)
    for x, y in pos:
        ax.add_patch(Circle((x, y), VERTEX_RADIUS, facecolor="black", edgecolor="black", zorder=2))
    for k, a in enumerate(members):
        for b in members[k + 1 :]:
            ax.plot(
                [pos[a][0], pos[b][0]],
                [pos[a][1], pos[b][1]],
                color=CLIQUE_COLOR,
                linewidth=EDGE_WIDTH,
                zorder=1.5,
            )
    for v in members:
        ax.add_patch(Circle(pos[v], VERTEX_RADIUS, facecolor=CLIQUE_COLOR, edgecolor=CLIQUE_COLOR, zorder=3))
    _draw_labels(ax, pos)
    return ax


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sdpgraph-visualize",
        usage="%(prog)s option file",
        description="Show a colouring or clique of a graph.",
        allow_abbrev=False,
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("-delta_color", action="store_true", help="color the graph with delta+1 algorithm")
    group.add_argument("-color", action="store_true", help="color the graph with SDP algorithm")
    group.add_argument("-greedy_clique", action="store_true", help="find clique using greedy algorithm")
    group.add_argument("-clique", action="store_true", help="find clique using SDP algorithm")
    parser.add_argument("file", help="adjacency matrix file")
    args = parser.parse_args(argv)

    try:
        graph = Graph.from_file(args.file)
    except (OSError, GraphFormatError) as exc:
        print(f"Failed to load {args.file}: {exc}", file=sys.stderr)
        return 1

    try:
        if args.delta_color:
            colors, clique = graph.greedy_color()[1], None
        elif args.color:
            colors, clique = graph.color(0.0)[1], None
        elif args.greedy_clique:
            colors, clique = None, graph.greedy_clique()
        else:
            colors, clique = None, graph.find_max_clique()
    except (ValueError, SDPError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(10, 8))
    manager = fig.canvas.manager
    if manager is not None:
        manager.set_window_title("Graphs")
    if colors is not None:
        draw_coloring(graph, colors, ax)
    else:
        draw_clique(graph, clique, ax)
    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())