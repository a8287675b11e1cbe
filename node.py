from typing import List, Optional

from edge import Edge


class Node:
    """
    One vertex of the layered graph.
    `min_path` is the lightest known weight to reach this node from row 0;
    None means "not reached yet", which is different from a cost of 0.
    """

    __slots__ = (
        "edges",      # outgoing arcs, in order
        "min_path",   # memo filled in by the solver
        "name",       # optional label, only used for display / networkx
    )

    def __init__(
        self,
        edges: Optional[List[Edge]] = None,
        name: Optional[str] = None,
    ) -> None:
        self.edges: List[Edge] = [] if edges is None else edges
        self.min_path: Optional[int] = None
        self.name = name

    def is_reached(self) -> bool:
        return self.min_path is not None

    def label(self) -> str:
        return self.name if self.name is not None else f"Node@{id(self):x}"

    def __repr__(self) -> str:
        return (
            f"Node({self.label()}, edges={len(self.edges)}, "
            f"min_path={self.min_path})"
        )
