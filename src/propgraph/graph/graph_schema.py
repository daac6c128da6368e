from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from propgraph.errors import PropertyNotFoundError


@dataclass
class Node:
    """
    Property-bag vertex with its adjacency index.

    `out` and `in_` map edge keys to edge labels. They are maintained
    by the GraphStore; a node never repairs them on its own.
    """

    key: str
    props: Dict[str, Any] = field(default_factory=dict)
    out: Dict[str, str] = field(default_factory=dict)
    in_: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def create(key: str, props: Optional[Dict[str, Any]] = None) -> "Node":
        return Node(key=key, props=dict(props or {}))

    def get(self, prop: str) -> Any:
        try:
            return self.props[prop]
        except KeyError:
            raise PropertyNotFoundError(self.key, prop) from None

    def set_property(self, prop: str, value: Any) -> None:
        self.props[prop] = value

    # -------------------- Adjacency --------------------

    def add_out_edge(self, edge_key: str, label: str) -> None:
        self.out[edge_key] = label

    def add_in_edge(self, edge_key: str, label: str) -> None:
        self.in_[edge_key] = label

    def remove_out_edge(self, edge_key: str) -> None:
        self.out.pop(edge_key, None)

    def remove_in_edge(self, edge_key: str) -> None:
        self.in_.pop(edge_key, None)

    def copy(self) -> "Node":
        return Node(
            key=self.key,
            props=dict(self.props),
            out=dict(self.out),
            in_=dict(self.in_),
        )


@dataclass
class Edge:
    """
    Directed, labeled relationship between two node keys.

    Label and endpoints are fixed at creation; only props change.
    """

    key: str
    label: str
    start: str
    end: str
    props: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def create(
        key: str,
        label: str,
        start: str,
        end: str,
        props: Optional[Dict[str, Any]] = None,
    ) -> "Edge":
        return Edge(
            key=key,
            label=label,
            start=start,
            end=end,
            props=dict(props or {}),
        )

    def get(self, prop: str) -> Any:
        try:
            return self.props[prop]
        except KeyError:
            raise PropertyNotFoundError(self.key, prop) from None

    def set_property(self, prop: str, value: Any) -> None:
        self.props[prop] = value

    def copy(self) -> "Edge":
        return Edge(
            key=self.key,
            label=self.label,
            start=self.start,
            end=self.end,
            props=dict(self.props),
        )
