from __future__ import annotations

import logging
from typing import Optional

from propgraph.config.settings import QueryConfig
from propgraph.errors import NotFoundError
from propgraph.graph.graph_schema import Node, Edge
from propgraph.graph.graph_store import GraphStore

logger = logging.getLogger("propgraph.query")


class ReferenceResolver:
    """
    Resolves edge and node keys for traversal.

    A dangling reference (an edge or endpoint that no longer exists)
    yields None and bumps `skipped`, unless the config asks for strict
    references, in which case the NotFoundError propagates.
    """

    def __init__(self, config: QueryConfig) -> None:
        self.config = config
        self.skipped = 0

    def edge(self, graph: GraphStore, key: str) -> Optional[Edge]:
        try:
            return graph.get_edge(key)
        except NotFoundError as exc:
            return self._skip(exc)

    def node(self, graph: GraphStore, key: str) -> Optional[Node]:
        try:
            return graph.get_node(key)
        except NotFoundError as exc:
            return self._skip(exc)

    def _skip(self, exc: NotFoundError) -> None:
        if self.config.strict_references:
            raise exc
        self.skipped += 1
        if self.config.log_skips:
            logger.warning("skipping dangling %s reference %s", exc.kind, exc.key)
        return None
