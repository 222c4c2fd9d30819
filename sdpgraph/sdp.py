"""A small dense primal-dual interior point solver for semidefinite programs.

The primal problem is::

    minimise    <C, X>
    subject to  <A_i, X> = b_i   for every constraint i
                X positive semidefinite

and its dual is::

    maximise    b . y
    subject to  C - sum_i y_i A_i positive semidefinite
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

import numpy as np

__all__ = ["SDPError", "SDPResult", "solve_sdp", "symmetric_from_packed", "factor_gram"]


class SDPError(RuntimeError):
    """Raised when the solver cannot reach a solution."""


@dataclass(frozen=True)
class SDPResult:
    """Primal matrix, dual vector and objective values of a solved program."""

    x: np.ndarray
    y: np.ndarray
    z: np.ndarray
    primal_objective: float
    dual_objective: float
    iterations: int


def _max_step(mat: np.ndarray, direction: np.ndarray) -> float:
    lower = np.linalg.cholesky(mat)
    inv = np.linalg.inv(lower)
    scaled = inv @ direction @ inv.T
    smallest = float(np.linalg.eigvalsh((scaled + scaled.T) / 2).min())
    if smallest >= 0:
        return 1.0
    return min(1.0, 0.95 / -smallest)


def solve_sdp(
    c: np.ndarray,
    constraints: Sequence[np.ndarray],
    b: Sequence[float],
    tol: float = 1e-7,
    max_iter: int = 100,
) -> SDPResult:
    """Solve the program given by ``c``, the constraint matrices and ``b``."""
    cmat = np.asarray(c, dtype=float)
    if cmat.ndim != 2 or cmat.shape[0] != cmat.shape[1]:
        raise ValueError("objective matrix must be square")
    n = cmat.shape[0]
    if n == 0:
        raise ValueError("objective matrix must not be empty")
    cmat = (cmat + cmat.T) / 2
    mats = [np.asarray(a, dtype=float) for a in constraints]
    if not mats:
        raise ValueError("at least one constraint is required")
    if any(a.shape != (n, n) for a in mats):
        raise ValueError("constraint matrices must match the objective's shape")
    avec_3d = np.array([(a + a.T) / 2 for a in mats])
    bvec = np.asarray(b, dtype=float).reshape(-1)
    m = len(mats)
    if bvec.shape[0] != m:
        raise ValueError("need one right-hand side value per constraint")
    avec = avec_3d.reshape(m, n * n)

    scale = max(10.0, float(np.linalg.norm(cmat)), float(np.abs(bvec).max()), float(np.sqrt(n)))
    x = scale * np.eye(n)
    z = scale * np.eye(n)
    y = np.zeros(m)
    sigma = 0.3
    norm_b = float(np.linalg.norm(bvec))
    norm_c = float(np.linalg.norm(cmat))

    for iteration in range(max_iter + 1):
        rp = bvec - avec @ x.ravel()
        rd = cmat - z - np.tensordot(y, avec_3d, axes=1)
        pobj = float(np.sum(cmat * x))
        dobj = float(bvec @ y)
        if not (np.isfinite(pobj) and np.isfinite(dobj)):
            raise SDPError("solver diverged")
        gap = abs(pobj - dobj) / (1.0 + abs(pobj) + abs(dobj))
        pinf = float(np.linalg.norm(rp)) / (1.0 + norm_b)
        dinf = float(np.linalg.norm(rd)) / (1.0 + norm_c)
        if gap < tol and pinf < tol and dinf < tol:
            return SDPResult(x, y, z, pobj, dobj, iteration)
        if iteration == max_iter:
            break
        try:
            mu = float(np.sum(x * z)) / n
            zinv = np.linalg.inv(z)
            schur = np.empty((m, m))
            for i in range(m):
                g = x @ avec_3d[i] @ zinv
                schur[:, i] = avec @ g.T.ravel()
            schur = (schur + schur.T) / 2
            rhs = rp - avec @ (sigma * mu * zinv - x - x @ rd @ zinv).ravel()
            try:
                dy = np.linalg.solve(schur, rhs)
            except np.linalg.LinAlgError:
                dy = np.linalg.lstsq(schur, rhs, rcond=None)[0]
            dz = rd - np.tensordot(dy, avec_3d, axes=1)
            dx = sigma * mu * zinv - x - x @ dz @ zinv
            dx = (dx + dx.T) / 2
            dz = (dz + dz.T) / 2
            ap = _max_step(x, dx)
            ad = _max_step(z, dz)
        except np.linalg.LinAlgError as exc:
            if gap < np.sqrt(tol) and pinf < np.sqrt(tol) and dinf < np.sqrt(tol):
                return SDPResult(x, y, z, pobj, dobj, iteration)
            raise SDPError("numerical breakdown in the solver") from exc
        x = x + ap * dx
        y = y + ad * dy
        z = z + ad * dz
        x = (x + x.T) / 2
        z = (z + z.T) / 2
        sigma = min(0.5, max(0.1, (1.0 - min(ap, ad)) ** 2))
    raise SDPError(f"no convergence within {max_iter} iterations")


def symmetric_from_packed(n: int, entries: Mapping[int, float] | Iterable[tuple[int, float]]) -> np.ndarray:
    """Build a symmetric matrix from lower-triangular packed indices.

    Index ``i*(i+1)/2 + j`` (with ``j <= i``) names entry ``(i, j)`` and its mirror.
    """
    items = entries.items() if isinstance(entries, Mapping) else entries
    mat = np.zeros((n, n))
    limit = n * (n + 1) // 2
    for index, value in items:
        if not 0 <= index < limit:
            raise ValueError(f"packed index {index} out of range for size {n}")
        row = int((np.sqrt(8 * index + 1) - 1) // 2)
        while row * (row + 1) // 2 > index:
            row -= 1
        while (row + 1) * (row + 2) // 2 <= index:
            row += 1
        col = index - row * (row + 1) // 2
        mat[row, col] = value
        mat[col, row] = value
    return mat


def factor_gram(x: np.ndarray) -> np.ndarray:
    """Return ``V`` whose rows are vectors with ``V @ V.T`` close to ``x``."""
    mat = np.asarray(x, dtype=float)
    vals, vecs = np.linalg.eigh((mat + mat.T) / 2)
    return vecs * np.sqrt(np.clip(vals, 0.0, None))