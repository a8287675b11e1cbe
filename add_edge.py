from edge import Edge
from node import Node

def add_edge(src: Node, dst: Node, weight: int) -> Edge:
    """
    Append the arc src -> dst to src's adjacency list and return it.
    Row adjacency is not checked here.
    """
    edge = Edge(weight, dst)
    src.edges.append(edge)
    return edge
