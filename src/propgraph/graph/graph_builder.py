from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

from propgraph.graph.graph_store import GraphStore

NodeSpec = Tuple[str, Optional[Dict[str, Any]]]
EdgeSpec = Tuple[str, str, str, str, Optional[Dict[str, Any]]]


class GraphBuilder:
    """
    Loads nodes and edges into a store from structured inputs.

    Edges are merged after their endpoints, so add_nodes must run first.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def add_nodes(self, nodes: Iterable[NodeSpec]) -> None:
        for key, props in nodes:
            self.store.merge_node(key, props)

    def add_edges(self, edges: Iterable[EdgeSpec]) -> None:
        for edge_key, label, start, end, props in edges:
            self.store.merge_edge(edge_key, label, start, end, props)
