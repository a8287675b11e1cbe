from typing import Optional

import networkx as nx

from min_path_cost import Rows

SOURCE = "__source__"
SINK = "__sink__"


def to_networkx(rows: Rows) -> nx.DiGraph:
    """
    Directed graph with a virtual SOURCE feeding every row-0 node and every
    last-row node draining into a virtual SINK (both with weight 0).
    Graph nodes are the Node objects themselves.
    """
    G = nx.DiGraph()
    G.add_node(SOURCE)
    G.add_node(SINK)

    for row in rows:
        for node in row:
            G.add_node(node, label=node.label())
            for e in node.edges:
                # parallel arcs collapse to the lightest one
                if G.has_edge(node, e.destination) and G[node][e.destination]["weight"] <= e.weight:
                    continue
                G.add_edge(node, e.destination, weight=e.weight)

    if rows:
        for node in rows[0]:
            G.add_edge(SOURCE, node, weight=0)
        for node in rows[-1]:
            G.add_edge(node, SINK, weight=0)
    return G


def reference_min_path_cost(rows: Rows) -> Optional[int]:
    """
    Same answer as min_path_cost.solve, computed with networkx's Dijkstra.
    Leaves `min_path` untouched.
    """
    # a single row has no arcs, hence no path
    if len(rows) < 2:
        return None

    G = to_networkx(rows)
    try:
        return nx.shortest_path_length(G, SOURCE, SINK, weight="weight")
    except nx.NetworkXNoPath:
        return None
