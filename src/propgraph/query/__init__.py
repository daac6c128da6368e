"""
Query engine for propgraph.

Chainable traversal, filtering, projection and per-node branching
over a GraphStore.
"""

from propgraph.query.query import Query
from propgraph.query.resolver import ReferenceResolver

__all__ = [
    "Query",
    "ReferenceResolver",
]
