"""Compare greedy and semidefinite colouring and clique search over random graphs."""

from __future__ import annotations

import argparse
import os
from collections import defaultdict
from dataclasses import astuple, dataclass
from pathlib import Path
from typing import Callable, Hashable, Mapping, Sequence

from . import generate
from .generate import graph_filename
from .graph import Graph

__all__ = ["GraphStats", "evaluate_graph", "results_by_n", "results_by_p", "run", "main"]

DELTAS = (-0.2, 0.0, 0.2)
SIZES = tuple(range(5, 50, 5))
PROBABILITIES = generate.PROBABILITIES


@dataclass(frozen=True)
class GraphStats:
    """Results of every algorithm on one graph."""

    greedy_colors: int
    sdp_colors_low: int
    sdp_colors_zero: int
    sdp_colors_high: int
    greedy_clique: int
    sdp_clique: int
    delta: float

    def as_row(self) -> tuple:
        return astuple(self)


def _count(attempt: Callable[[], int]) -> int:
    try:
        return attempt()
    except ValueError:
        return -1


def evaluate_graph(graph: Graph, repeats: int = 3) -> GraphStats:
    """Run every algorithm, keeping the best of ``repeats`` tries of the randomised ones."""
    greedy = _count(lambda: graph.greedy_color()[0])
    sdp_colors = []
    for delta in DELTAS:
        best = graph.n
        for _ in range(repeats):
            best = min(best, _count(lambda: graph.color(delta)[0]))
        sdp_colors.append(best)
    greedy_clique = _count(lambda: len(graph.greedy_clique()))
    best_clique = 0
    for _ in range(repeats):
        best_clique = max(best_clique, _count(lambda: len(graph.find_max_clique())))
    return GraphStats(
        greedy,
        sdp_colors[0],
        sdp_colors[1],
        sdp_colors[2],
        greedy_clique,
        best_clique,
        float(graph.max_degree()),
    )


def _averages(stats: Mapping[tuple[int, float], GraphStats], key: Callable) -> list[tuple[Hashable, tuple[float, ...]]]:
    groups: dict = defaultdict(list)
    for ident, entry in stats.items():
        groups[key(ident)].append(entry.as_row())
    rows = []
    for name in sorted(groups):
        members = groups[name]
        rows.append((name, tuple(sum(column) / len(members) for column in zip(*members))))
    return rows


def results_by_n(stats: Mapping[tuple[int, float], GraphStats]) -> list[tuple[int, tuple[float, ...]]]:
    """Average every result over the probabilities, one row per vertex count."""
    return _averages(stats, lambda ident: ident[0])


def results_by_p(stats: Mapping[tuple[int, float], GraphStats]) -> list[tuple[float, tuple[float, ...]]]:
    """Average every result over the vertex counts, one row per probability."""
    return _averages(stats, lambda ident: ident[1])


def _number(value) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def _format_rows(rows) -> str:
    return "".join(" ".join(_number(v) for v in (name, *values)) + "\n" for name, values in rows)


def run(
    directory: str | os.PathLike = generate.DEFAULT_DIRECTORY,
    out_dir: str | os.PathLike = "examples",
    repeats: int = 3,
) -> dict[tuple[int, float], GraphStats]:
    """Evaluate every generated graph and write the averaged result tables."""
    folder = Path(directory)
    stats = {}
    for n in SIZES:
        for p in PROBABILITIES:
            graph = Graph.from_file(folder / graph_filename(n, p))
            stats[(n, p)] = evaluate_graph(graph, repeats)
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    (out / "results_by_n").write_text(_format_rows(results_by_n(stats)))
    (out / "results_by_p").write_text(_format_rows(results_by_p(stats)))
    return stats


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare graph algorithms on generated random graphs.")
    parser.add_argument("directory", nargs="?", default=str(generate.DEFAULT_DIRECTORY))
    parser.add_argument("out_dir", nargs="?", default="examples")
    parser.add_argument("--repeats", type=int, default=3)
    args = parser.parse_args(argv)
    run(args.directory, args.out_dir, args.repeats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())