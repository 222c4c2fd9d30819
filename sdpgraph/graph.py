"""Undirected graphs with greedy and semidefinite colouring and clique search."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np

from .sdp import factor_gram, solve_sdp

__all__ = ["GraphFormatError", "Graph", "parse_adjacency"]

_TOL = 1e-6
_MAX_ITER = 200


class GraphFormatError(ValueError):
    """Raised when an adjacency-matrix file is malformed."""


def parse_adjacency(text: str) -> list[list[bool]]:
    """Parse a vertex count line followed by rows of space separated 0/1 entries."""
    lines = text.splitlines()
    if not lines or not lines[0].split():
        raise GraphFormatError("missing vertex count")
    token = lines[0].split()[0]
    if not token.isdigit():
        raise GraphFormatError(f"invalid vertex count {token!r}")
    n = int(token)
    rows = lines[1 : n + 1]
    if len(rows) < n:
        raise GraphFormatError("Invalid file format")
    matrix = []
    for i, line in enumerate(rows):
        if len(line) < 2 * n - 1:
            raise GraphFormatError(f"line {i} too short {len(line)} {2 * n}")
        matrix.append([line[2 * j] == "1" for j in range(n)])
    return matrix


class Graph:
    """An undirected graph on vertices ``0 .. n-1``."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], seed: int | None = None):
        if n < 0:
            raise ValueError("vertex count must be non-negative")
        self.n = n
        self._adj: list[set[int]] = [set() for _ in range(n)]
        self._loops: set[int] = set()
        for a, b in edges:
            if not (0 <= a < n and 0 <= b < n):
                raise ValueError(f"edge ({a}, {b}) out of range")
            if a == b:
                self._loops.add(a)
            else:
                self._adj[a].add(b)
                self._adj[b].add(a)
        self._upper = [sorted(j for j in self._adj[i] if j > i) for i in range(n)]
        self._rng = np.random.default_rng(seed)
        self._vectors: np.ndarray | None = None
        self._vector_k: float | None = None

    @classmethod
    def from_text(cls, text: str, seed: int | None = None) -> "Graph":
        matrix = parse_adjacency(text)
        n = len(matrix)
        edges = [(i, j) for i, row in enumerate(matrix) for j in range(i, n) if row[j]]
        return cls(n, edges, seed)

    @classmethod
    def from_file(cls, path: str | os.PathLike, seed: int | None = None) -> "Graph":
        return cls.from_text(Path(path).read_text(), seed)

    @property
    def edges(self) -> list[tuple[int, int]]:
        return [(i, j) for i in range(self.n) for j in self._upper[i]]

    @property
    def m(self) -> int:
        return sum(len(u) for u in self._upper)

    def _non_edges(self) -> list[tuple[int, int]]:
        return [(i, j) for i in range(self.n) for j in range(i + 1, self.n) if j not in self._adj[i]]

    def describe(self) -> str:
        """Vertex and edge counts followed by one line per edge."""
        lines = [f"{self.n} {self.m}"]
        lines.extend(f"{i} {j}" for i, j in self.edges)
        return "\n".join(lines) + "\n"

    def neighbours(self, vertex: int) -> list[int]:
        return sorted(self._adj[vertex])

    def non_neighbours(self, vertex: int) -> list[int]:
        return [u for u in range(self.n) if u != vertex and u not in self._adj[vertex]]

    def max_degree(self) -> int:
        """Largest number of ones in a row of the adjacency matrix."""
        return max((len(self._adj[i]) + (i in self._loops) for i in range(self.n)), default=0)

    def vector_coloring(self) -> tuple[np.ndarray, float]:
        """Unit vectors (rows) of a vector colouring and its vector chromatic number."""
        if self._vectors is not None:
            return self._vectors, self._vector_k
        n = self.n
        if n == 0:
            self._vectors, self._vector_k = np.zeros((0, 0)), 0.0
            return self._vectors, self._vector_k
        edges = self.edges
        size = n + len(edges) + 1
        u = size - 1
        c = np.zeros((size, size))
        c[u, u] = 1.0
        constraints, rhs = [], []
        for i in range(n):
            a = np.zeros((size, size))
            a[i, i] = 1.0
            constraints.append(a)
            rhs.append(1.0)
        for e, (i, j) in enumerate(edges):
            a = np.zeros((size, size))
            a[i, j] = a[j, i] = 0.5
            a[n + e, n + e] = 1.0
            a[u, u] = -1.0
            constraints.append(a)
            rhs.append(-1.0)
        res = solve_sdp(c, constraints, rhs, tol=_TOL, max_iter=_MAX_ITER)
        t = res.x[u, u] - 1.0
        self._vector_k = 1.0 - 1.0 / t if t < 0 else float("inf")
        self._vectors = factor_gram(res.x[:n, :n])
        return self._vectors, self._vector_k

    def color(self, delta: float = 0.0) -> tuple[int, list[int]]:
        """Colour by rounding the vector colouring with random hyperplanes."""
        if delta > 1:
            raise ValueError("delta must not exceed 1")
        vectors, _ = self.vector_coloring()
        n = self.n
        colors = [0] * n
        colored = 0
        nc = 1
        while colored != n:
            used = False
            while not used:
                r = self._rng.standard_normal(n)
                r /= np.linalg.norm(r)
                proj = vectors @ r
                for i in range(n):
                    if colors[i] == 0 and proj[i] >= delta:
                        colors[i] = nc
                        colored += 1
                        used = True
                for i in range(n):
                    if colors[i] != nc:
                        continue
                    for j in self._upper[i]:
                        if colors[j] == nc:
                            if proj[i] > proj[j]:
                                colors[j] = 0
                                colored -= 1
                            else:
                                colors[i] = 0
                                colored -= 1
                                break
            nc += 1
        if not self.is_valid_coloring(colors):
            raise ValueError("error while SDP-coloring graph")
        return nc - 1, colors

    def greedy_color(self) -> tuple[int, list[int]]:
        """Colour with at most max_degree + 1 colours, last vertex first."""
        colors = [0] * self.n
        highest = 0
        limit = self.max_degree() + 1
        for i in reversed(range(self.n)):
            taken = {colors[j] for j in self._upper[i] if colors[j]}
            for c in range(1, limit + 1):
                if c not in taken:
                    colors[i] = c
                    highest = max(highest, c)
                    break
        if not self.is_valid_coloring(colors):
            raise ValueError("error while (delta+1)-coloring graph")
        return highest, colors

    def greedy_clique(self) -> list[int]:
        """Grow a clique from vertex 0 by adding every compatible vertex in order."""
        if self.n == 0:
            return []
        clique = [0]
        for i in range(1, self.n):
            if all(i in self._adj[v] for v in clique):
                clique.append(i)
        if not self.is_clique(clique):
            raise ValueError("error while finding clique using greedy algorithm")
        return clique

    def find_max_clique(self) -> list[int]:
        """Find a clique by rounding a semidefinite relaxation."""
        n = self.n
        if n == 0:
            return []
        size = n + 1
        c = np.zeros((size, size))
        for i in range(n):
            c[i, i] = -0.5
            c[i, n] = c[n, i] = -0.25
        constraints, rhs = [], []
        for i in range(size):
            a = np.zeros((size, size))
            a[i, i] = 1.0
            constraints.append(a)
            rhs.append(1.0)
        non_edges = self._non_edges()
        for j, l in non_edges:
            w = np.zeros(size)
            w[[j, l, n]] = 1.0
            constraints.append(np.outer(w, w))
            rhs.append(1.0)
        res = solve_sdp(c, constraints, rhs, tol=_TOL, max_iter=_MAX_ITER)
        vectors = factor_gram(res.x)
        u = self._rng.standard_normal(size)
        u /= np.linalg.norm(u)
        sign = [1 if p >= 0 else -1 for p in vectors @ u]
        for i, l in non_edges:
            if abs(sign[i] + sign[l] + sign[n]) != 1:
                if abs(sign[i] - sign[n]) > abs(sign[l] - sign[n]):
                    sign[i] = -sign[i]
                else:
                    sign[l] = -sign[l]
        clique = [i for i in range(n) if sign[i] == sign[n]]
        if not self.is_clique(clique):
            raise ValueError("error while finding clique using SDP algorithm")
        return clique

    def lovasz(self) -> float:
        """Maximum of sum(X) over PSD X with unit trace and zeros on edges."""
        n = self.n
        if n == 0:
            return 0.0
        constraints, rhs = [np.eye(n)], [1.0]
        for i, j in self.edges:
            a = np.zeros((n, n))
            a[i, j] = a[j, i] = 0.5
            constraints.append(a)
            rhs.append(0.0)
        res = solve_sdp(-np.ones((n, n)), constraints, rhs, tol=_TOL, max_iter=_MAX_ITER)
        return -res.primal_objective

    def is_valid_coloring(self, colors: Sequence[int]) -> bool:
        return all(colors[i] != colors[j] for i, j in self.edges)

    def is_clique(self, vertices: Sequence[int]) -> bool:
        vs = list(vertices)
        return all(b in self._adj[a] for k, a in enumerate(vs) for b in vs[k + 1 :] if a != b)