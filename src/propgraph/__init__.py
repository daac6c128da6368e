"""
propgraph
=========

An embedded, in-memory directed property graph with a chainable
traversal engine.

Core idea:
- Branch a traversal per node, work on each branch, then fold the
  branches back into the parent.

Public API:
- GraphStore
- Query
- load_config
"""

from propgraph.errors import PropgraphError, NotFoundError, PropertyNotFoundError
from propgraph.config.settings import QueryConfig, PropgraphConfig, load_config
from propgraph.graph.graph_schema import Node, Edge
from propgraph.graph.graph_store import GraphStore
from propgraph.graph.graph_builder import GraphBuilder
from propgraph.graph.graph_export import to_networkx
from propgraph.query.query import Query

__all__ = [
    "PropgraphError",
    "NotFoundError",
    "PropertyNotFoundError",
    "QueryConfig",
    "PropgraphConfig",
    "load_config",
    "Node",
    "Edge",
    "GraphStore",
    "GraphBuilder",
    "to_networkx",
    "Query",
]

__version__ = "0.1.0"
