from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from node import Node


class Edge:
    """
    One directed, weighted arc of the layered graph.
    The source node is implicit (the node whose `edges` list holds this arc);
    `destination` is shared, several arcs may lead to the same node.
    """

    __slots__ = (
        "weight",        # non-negative arc weight
        "destination",   # node in the next row
    )

    def __init__(self, weight: int, destination: "Node") -> None:
        self.weight = weight
        self.destination = destination

    # ------------------------------------------------------------------ dunder

    def __repr__(self) -> str:
        return f"Edge(→{self.destination.label()}, weight={self.weight})"
