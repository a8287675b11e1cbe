import random
from typing import List, Optional

from add_edge import add_edge
from node import Node


def random_rows(rng: random.Random, max_rows: int = 4, max_width: int = 4,
                max_weight: int = 9, arc_prob: float = 0.5) -> List[List[Node]]:
    """Random layered graph; some nodes end up unreachable or dead-ended."""
    n_rows = rng.randint(1, max_rows)
    rows = [
        [Node(name=f"r{r}c{c}") for c in range(rng.randint(1, max_width))]
        for r in range(n_rows)
    ]
    for r in range(n_rows - 1):
        for src in rows[r]:
            for dst in rows[r + 1]:
                if rng.random() < arc_prob:
                    add_edge(src, dst, rng.randint(0, max_weight))
    return rows


def brute_force_costs(rows: List[List[Node]]) -> List[int]:
    """Weight of every row-0 to last-row path, by explicit enumeration."""
    if len(rows) < 2:
        return []
    last = set(id(n) for n in rows[-1])
    costs = []

    def walk(node, depth, acc):
        if depth == len(rows) - 1:
            if id(node) in last:
                costs.append(acc)
            return
        for e in node.edges:
            walk(e.destination, depth + 1, acc + e.weight)

    for start in rows[0]:
        walk(start, 0, 0)
    return costs


def first_path_cost(rows: List[List[Node]]) -> Optional[int]:
    """Weight of the first complete path met by a depth-first walk, if any."""
    if len(rows) < 2:
        return None

    def walk(node, depth):
        if depth == len(rows) - 1:
            return 0
        for e in node.edges:
            rest = walk(e.destination, depth + 1)
            if rest is not None:
                return e.weight + rest
        return None

    for start in rows[0]:
        cost = walk(start, 0)
        if cost is not None:
            return cost
    return None
