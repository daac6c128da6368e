from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from propgraph.errors import NotFoundError
from propgraph.graph.graph_schema import Node, Edge
from propgraph.graph.legacy_index import LegacyIndex

logger = logging.getLogger("propgraph.graph")


class GraphStore:
    """
    Authoritative in-memory directed property graph.

    Owns every Node and Edge, keyed by their unique keys, and keeps each
    node's adjacency index in sync on edge insert and delete:

        nodes[e.start].out[e.key] == e.label
        nodes[e.end].in_[e.key] == e.label

    Lookups are strict (NotFoundError / PropertyNotFoundError). Deletes
    are liberal: unknown keys are ignored. Node deletion does not cascade
    to edges; callers remove dependent edges themselves.
    """

    def __init__(self) -> None:
        self.nodes: Dict[str, Node] = {}
        self.edges: Dict[str, Edge] = {}
        self.legacy_index = LegacyIndex()

    # -------------------- Nodes --------------------

    def has_node(self, key: str) -> bool:
        return key in self.nodes

    def get_node(self, key: str) -> Node:
        try:
            return self.nodes[key]
        except KeyError:
            raise NotFoundError("node", key) from None

    def get_node_prop(self, key: str, prop: str) -> Any:
        return self.get_node(key).get(prop)

    def get_node_props(self, key: str) -> Dict[str, Any]:
        return self.get_node(key).props

    def get_nodes(self) -> List[Node]:
        return list(self.nodes.values())

    def merge_node(
        self,
        key: str,
        props: Optional[Dict[str, Any]] = None,
    ) -> Node:
        """
        Create the node if it does not exist, otherwise merge `props`
        into it (last write wins per property).
        """
        node = self.nodes.get(key)

        if node is None:
            node = Node.create(key, props)
            self.nodes[key] = node
            logger.debug("created node %s", key)
            return node

        if props is None:
            return node

        for prop, value in props.items():
            node.set_property(prop, value)

        return node

    def delete_node(self, key: str) -> None:
        if self.nodes.pop(key, None) is not None:
            logger.debug("deleted node %s", key)

    # -------------------- Edges --------------------

    def has_edge(self, key: str) -> bool:
        return key in self.edges

    def get_edge(self, key: str) -> Edge:
        try:
            return self.edges[key]
        except KeyError:
            raise NotFoundError("edge", key) from None

    def get_edge_prop(self, key: str, prop: str) -> Any:
        return self.get_edge(key).get(prop)

    def get_edge_props(self, key: str) -> Dict[str, Any]:
        return self.get_edge(key).props

    def get_edges(self) -> List[Edge]:
        return list(self.edges.values())

    def merge_edge(
        self,
        edge_key: str,
        label: str,
        start: str,
        end: str,
        props: Optional[Dict[str, Any]] = None,
    ) -> Edge:
        """
        Create the edge if it does not exist, otherwise merge `props`
        into it.

        Creation requires both endpoints to exist and raises
        NotFoundError("node", ...) otherwise, leaving the graph unchanged.
        The label and endpoints of an existing edge are never updated.
        """
        edge = self.edges.get(edge_key)

        if edge is None:
            start_node = self.get_node(start)
            end_node = self.get_node(end)

            edge = Edge.create(edge_key, label, start, end, props)
            self.edges[edge_key] = edge
            start_node.add_out_edge(edge_key, label)
            end_node.add_in_edge(edge_key, label)
            logger.debug(
                "created edge %s (%s)-[%s]->(%s)", edge_key, start, label, end
            )
            return edge

        if props is None:
            return edge

        for prop, value in props.items():
            edge.set_property(prop, value)

        return edge

    def delete_edge(self, key: str) -> None:
        edge = self.edges.get(key)
        if edge is None:
            return

        # Endpoints may already be gone after a non-cascading delete_node
        start_node = self.nodes.get(edge.start)
        if start_node is not None:
            start_node.remove_out_edge(key)

        end_node = self.nodes.get(edge.end)
        if end_node is not None:
            end_node.remove_in_edge(key)

        del self.edges[key]
        logger.debug("deleted edge %s", key)

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    # -------------------- Cloning --------------------

    def clone(self) -> "GraphStore":
        g = GraphStore()
        g.nodes = {key: node.copy() for key, node in self.nodes.items()}
        g.edges = {key: edge.copy() for key, edge in self.edges.items()}
        return g
