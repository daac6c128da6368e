from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from propgraph.config.settings import QueryConfig
from propgraph.graph.graph_schema import Node
from propgraph.graph.graph_store import GraphStore
from propgraph.query.resolver import ReferenceResolver

logger = logging.getLogger("propgraph.query")

NodePredicate = Callable[[Dict[str, Any]], bool]
QueryPredicate = Callable[["Query"], bool]


class Query:
    """
    Chainable traversal over a GraphStore.

    A query is a tree. A *flat* query holds its working set of nodes
    directly; a *branched* query has handed its work to one child query
    per node that was in its result when `deepen` was called, keyed by
    that node's key. Every chain operation mutates the query in place
    and returns it.

    Traversal, filtering and projection recurse down to the flat leaves.
    `flatten` and `deep_filter` change the shape of the tree, so they act
    only on the level sitting directly above the flat leaves.

    Example::

        q = (
            Query(graph, "alice")
            .out("knows")
            .deepen("friends")
            .out("likes")
            .get("likes", "name")
            .flatten(True)
        )
        q.cache["friends"]  # {friend_key: {"likes": {...}}}
    """

    def __init__(
        self,
        graph: Optional[GraphStore],
        *starts: str,
        config: Optional[QueryConfig] = None,
    ) -> None:
        self.graph = graph
        self.config = config or QueryConfig()
        self.cache: Dict[str, Any] = {}
        self.key = ""
        self.queries: Dict[str, Query] = {}
        self._resolver = ReferenceResolver(self.config)
        self._result: Dict[str, Node] = {}

        for start in starts:
            if graph is None or not graph.has_node(start):
                continue
            node = graph.get_node(start)
            self._result[node.key] = node

    @classmethod
    def empty(cls, config: Optional[QueryConfig] = None) -> "Query":
        return cls(None, config=config)

    def _branch(self, start: str) -> "Query":
        child = Query(self.graph, start, config=self.config)
        # The whole tree reports skips through the root
        child._resolver = self._resolver
        return child

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    def is_deep(self) -> bool:
        return len(self.queries) > 0

    def is_double_deep(self) -> bool:
        if not self.is_deep():
            return False
        return any(q.is_deep() for q in self.queries.values())

    def depth(self) -> int:
        if not self.is_deep():
            return 0
        return 1 + max(q.depth() for q in self.queries.values())

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def result(self) -> Dict[str, Node]:
        """
        Current flat working set. Meaningless while the query is
        branched: it keeps whatever it held before `deepen`.
        """
        return dict(self._result)

    def keys(self) -> List[str]:
        return sorted(self._result)

    def output(self) -> Dict[str, Node]:
        return {key: node.copy() for key, node in self._result.items()}

    @property
    def skipped(self) -> int:
        """Dangling references skipped anywhere in this query tree."""
        return self._resolver.skipped

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def out(self, label: str) -> "Query":
        """Replace the result with the end nodes of outgoing `label` edges."""
        if self.is_deep():
            for q in self.queries.values():
                q.out(label)
            return self

        self._result = self._hop(label, outgoing=True)
        return self

    def in_(self, label: str) -> "Query":
        """Replace the result with the start nodes of incoming `label` edges."""
        if self.is_deep():
            for q in self.queries.values():
                q.in_(label)
            return self

        self._result = self._hop(label, outgoing=False)
        return self

    def _hop(self, label: str, *, outgoing: bool) -> Dict[str, Node]:
        new_result: Dict[str, Node] = {}

        for node in self._result.values():
            adjacency = node.out if outgoing else node.in_

            for edge_key, edge_label in adjacency.items():
                if edge_label != label:
                    continue

                edge = self._resolver.edge(self.graph, edge_key)
                if edge is None:
                    continue

                other = self._resolver.node(
                    self.graph, edge.end if outgoing else edge.start
                )
                if other is None:
                    continue

                new_result[other.key] = other

        return new_result

    # ------------------------------------------------------------------
    # Filtering & projection
    # ------------------------------------------------------------------

    def filter_nodes(self, predicate: NodePredicate) -> "Query":
        if self.is_deep():
            for q in self.queries.values():
                q.filter_nodes(predicate)
            return self

        self._result = {
            key: node for key, node in self._result.items() if predicate(node.props)
        }
        return self

    def get(self, name: str, *keys: str) -> "Query":
        """
        Store `{node_key: {prop: value}}` for every result node under
        `cache[name]`. Properties a node does not have are left out.
        """
        if self.is_deep():
            for q in self.queries.values():
                q.get(name, *keys)
            return self

        self.cache[name] = {
            node_key: _project(node, keys)
            for node_key, node in self._result.items()
        }
        return self

    def get_one(self, name: str, *keys: str) -> "Query":
        """
        Store `{prop: value}` for the single result node under
        `cache[name]`. Does nothing unless the result holds exactly
        one node.
        """
        if self.is_deep():
            for q in self.queries.values():
                q.get_one(name, *keys)
            return self

        if len(self._result) != 1:
            return self

        (node,) = self._result.values()
        self.cache[name] = _project(node, keys)
        return self

    # ------------------------------------------------------------------
    # Branching
    # ------------------------------------------------------------------

    def deepen(self, name: str) -> "Query":
        """
        Branch the query: one flat child per result node, rooted at
        that node. Child caches are folded under `name` by `flatten`.
        """
        if self.is_deep():
            for q in self.queries.values():
                q.deepen(name)
            return self

        self.queries = {node_key: self._branch(node_key) for node_key in self._result}
        self.key = name
        logger.debug("deepen %r into %d branches", name, len(self.queries))
        return self

    def flatten(self, save_cache: bool) -> "Query":
        """
        Collapse the deepest branching level.

        With `save_cache`, the children's caches are stored as
        `cache[key] = {node_key: child.cache}` before they are dropped.
        The flat result is not recomputed from the children. A tree of
        depth N needs N calls to become flat again.
        """
        if not self.is_deep():
            return self

        if self.is_double_deep():
            for q in self.queries.values():
                q.flatten(save_cache)
            return self

        if save_cache:
            self.cache[self.key] = {
                node_key: q.cache for node_key, q in self.queries.items()
            }

        logger.debug("flatten %r (%d branches)", self.key, len(self.queries))
        self.key = ""
        self.queries = {}
        return self

    def deep_filter(self, keep_query: QueryPredicate) -> "Query":
        """
        Drop whole branches for which `keep_query(child)` is false,
        removing the same node keys from this level's flat result.
        """
        if not self.is_deep():
            return self

        if self.is_double_deep():
            for q in self.queries.values():
                q.deep_filter(keep_query)
            return self

        discard = [
            node_key for node_key, q in self.queries.items() if not keep_query(q)
        ]
        for node_key in discard:
            self._result.pop(node_key, None)
            del self.queries[node_key]

        logger.debug("deep_filter %r dropped %d branches", self.key, len(discard))
        return self

    def __repr__(self) -> str:
        if self.is_deep():
            return f"Query(key={self.key!r}, branches={sorted(self.queries)!r})"
        return f"Query(result={self.keys()!r})"


def _project(node: Node, keys: tuple) -> Dict[str, Any]:
    return {key: node.props[key] for key in keys if key in node.props}
