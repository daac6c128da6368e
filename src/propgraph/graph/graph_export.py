from __future__ import annotations

import networkx as nx

from propgraph.graph.graph_store import GraphStore


def to_networkx(store: GraphStore) -> nx.MultiDiGraph:
    """
    Snapshot a GraphStore as a networkx MultiDiGraph.

    Node attributes are copies of the node props; each edge is added
    under its own key with `label` alongside its props. Edges with a
    missing endpoint are left out.
    """
    g = nx.MultiDiGraph()

    for key, node in store.nodes.items():
        g.add_node(key)
        g.nodes[key].update(node.props)

    for key, edge in store.edges.items():
        if edge.start not in store.nodes or edge.end not in store.nodes:
            continue
        g.add_edge(edge.start, edge.end, key=key)
        attrs = g.edges[edge.start, edge.end, key]
        attrs.update(edge.props)
        attrs["label"] = edge.label

    return g
