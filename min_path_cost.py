from typing import Optional, Sequence

from logger import get_logger
from node import Node

logger = get_logger(__name__)

Rows = Sequence[Sequence[Node]]


def solve(rows: Rows) -> Optional[int]:
    """
    Least total weight of a path from any row-0 node to any last-row node.

    Single forward sweep over the rows: since every arc goes from row i to
    row i+1, a node's `min_path` is final once the rows before it have been
    processed, so each arc is relaxed exactly once.

    Parameters
    ----------
    rows : rows of nodes, row 0 first.
           Arcs must only lead to the next row and carry non-negative
           weights.  This is assumed, not checked.

    Returns
    -------
    The minimum path weight, or None when no path exists (including the
    one-row case, where there are no arcs at all).

    `min_path` is written in place on every node reachable from row 0.
    """
    if not rows:
        return None

    best: Optional[int] = None
    last_row = len(rows) - 1
    relaxed = 0

    for row_idx, row in enumerate(rows):
        for node in row:
            if row_idx != 0 and node.min_path is None:
                # not reachable from row 0
                continue

            if row_idx == last_row:
                # ---------------- terminal row: fold ----------------
                if node.min_path is not None and (best is None or node.min_path < best):
                    best = node.min_path
                continue

            # ---------------- relax outgoing arcs ----------------
            # row-0 nodes are path starts, their implicit cost is 0
            base = 0 if row_idx == 0 else node.min_path
            for e in node.edges:
                candidate = base + e.weight
                dest = e.destination
                if dest.min_path is None or candidate < dest.min_path:
                    dest.min_path = candidate
                    relaxed += 1

    logger.debug(
        "solved %d rows: %d relaxations, min path cost %s",
        len(rows), relaxed, best,
    )
    return best


def reset_min_paths(rows: Rows) -> None:
    """
    Forget every `min_path` so the same graph can be solved from scratch.
    """
    for row in rows:
        for node in row:
            node.min_path = None
