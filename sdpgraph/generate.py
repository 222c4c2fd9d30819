"""Generate random graphs as adjacency-matrix files."""

from __future__ import annotations

import argparse
import os
import random
from pathlib import Path
from typing import Sequence

__all__ = [
    "SIZES",
    "PROBABILITIES",
    "graph_filename",
    "generate_adjacency",
    "format_adjacency",
    "write_graph",
    "main",
]

DEFAULT_DIRECTORY = Path("examples") / "random_prob"
SIZES = tuple(range(5, 100, 5))
PROBABILITIES = tuple(round(k * 0.05, 2) for k in range(20))


def graph_filename(n: int, p: float) -> str:
    """Name of the file holding the random graph with ``n`` vertices and edge probability ``p``."""
    return f"graph{n}_{p:.2f}"


def generate_adjacency(n: int, p: float, rng: random.Random | None = None) -> list[list[int]]:
    """Symmetric 0/1 matrix where each entry on or above the diagonal is 1 with probability ``p``."""
    if n < 0:
        raise ValueError("vertex count must be non-negative")
    if rng is None:
        rng = random.Random()
    matrix = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i, n):
            bit = int(rng.random() <= p)
            matrix[i][j] = bit
            matrix[j][i] = bit
    return matrix


def format_adjacency(matrix: Sequence[Sequence[int]]) -> str:
    """Render a square matrix as a vertex count line followed by its rows."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    lines = [str(n)]
    lines.extend(" ".join(str(int(v)) for v in row) for row in matrix)
    return "\n".join(lines) + "\n"


def write_graph(
    directory: str | os.PathLike,
    n: int,
    p: float,
    rng: random.Random | None = None,
) -> Path:
    """Write one random graph into ``directory`` and return its path."""
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / graph_filename(n, p)
    path.write_text(format_adjacency(generate_adjacency(n, p, rng)))
    return path


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate random graphs for every size and probability.")
    parser.add_argument("directory", nargs="?", default=str(DEFAULT_DIRECTORY), help="output directory")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    for n in SIZES:
        for p in PROBABILITIES:
            write_graph(args.directory, n, p, rng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())