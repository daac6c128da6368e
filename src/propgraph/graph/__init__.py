"""
Graph subsystem for propgraph.

Defines the property graph entities and the store that owns them:
- Node / Edge property bags with by-key adjacency
- GraphStore with strict lookups and liberal deletes
- bulk loading and networkx export helpers
"""

from propgraph.graph.graph_schema import Node, Edge
from propgraph.graph.legacy_index import LegacyIndex
from propgraph.graph.graph_store import GraphStore
from propgraph.graph.graph_builder import GraphBuilder
from propgraph.graph.graph_export import to_networkx

__all__ = [
    "Node",
    "Edge",
    "LegacyIndex",
    "GraphStore",
    "GraphBuilder",
    "to_networkx",
]
