import numbers
from typing import List, Optional, Sequence

import numpy as np

from add_edge import add_edge
from node import Node


def _is_missing(x) -> bool:
    # None in nested lists, NaN in float arrays
    return x is None or x != x


def _as_weight_matrix(raw, idx: int) -> np.ndarray:
    """
    Object matrix holding an exact int per arc and None where there is no
    arc.  Entries never go through float, so large integers stay exact.
    """
    obj = np.asarray(raw, dtype=object)
    if obj.ndim != 2:
        raise ValueError(f"weights[{idx}] must be 2-D, got shape {obj.shape}")

    mat = np.full(obj.shape, None, dtype=object)
    for pos, x in np.ndenumerate(obj):
        if _is_missing(x):
            continue
        if not isinstance(x, numbers.Real):
            raise ValueError(f"weights[{idx}] contains non-numeric weight {x!r}")
        if x == np.inf or x == -np.inf:
            raise ValueError(f"weights[{idx}] contains infinite weights")
        if x < 0:
            raise ValueError(f"weights[{idx}] contains negative weights")
        if int(x) != x:
            raise ValueError(f"weights[{idx}] contains non-integral weights")
        mat[pos] = int(x)
    return mat


def build_rows(
    weights: Sequence,
    names: Optional[Sequence[Sequence[str]]] = None,
) -> List[List[Node]]:
    """
    Build the layered graph from per-layer weight matrices.

    Parameters
    ----------
    weights : sequence of 2-D matrices (anything np.asarray accepts).
              weights[i][a, b] is the weight of the arc from node a of row i
              to node b of row i+1; NaN / None means "no arc".
    names : (optional) one label per node, row by row.
            Defaults to "r{row}c{col}".

    Returns
    -------
    rows of nodes, len(weights) + 1 of them.
    """
    if len(weights) == 0:
        raise ValueError("at least one weight matrix is required; use single_row() for a one-row graph")

    mats = [_as_weight_matrix(w, i) for i, w in enumerate(weights)]

    # ---------------- row sizes ----------------
    for i in range(len(mats) - 1):
        if mats[i].shape[1] != mats[i + 1].shape[0]:
            raise ValueError(
                f"weights[{i}] has {mats[i].shape[1]} columns but "
                f"weights[{i + 1}] has {mats[i + 1].shape[0]} rows"
            )
    sizes = [m.shape[0] for m in mats] + [mats[-1].shape[1]]

    if names is not None:
        if [len(r) for r in names] != sizes:
            raise ValueError(f"names must match row sizes {sizes}")

    rows: List[List[Node]] = [
        [
            Node(name=names[r][c] if names is not None else f"r{r}c{c}")
            for c in range(size)
        ]
        for r, size in enumerate(sizes)
    ]

    # ---------------- arcs ----------------
    for r, mat in enumerate(mats):
        for (a, b), w in np.ndenumerate(mat):
            if w is not None:
                add_edge(rows[r][a], rows[r + 1][b], w)

    return rows


def single_row(n: int) -> List[List[Node]]:
    """One row of n nodes without arcs."""
    return [[Node(name=f"r0c{c}") for c in range(n)]]


def from_square_matrix(matrix) -> List[List[Node]]:
    """
    N rows of N nodes, the same NxN matrix giving the weights between
    every pair of consecutive rows.
    """
    mat = np.asarray(matrix, dtype=object)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError(f"expected a square matrix, got shape {mat.shape}")
    n = mat.shape[0]
    if n == 0:
        raise ValueError("matrix must not be empty")
    # checked even when a 1x1 matrix yields no arcs
    _as_weight_matrix(mat, 0)
    if n == 1:
        return single_row(1)
    return build_rows([mat] * (n - 1))
