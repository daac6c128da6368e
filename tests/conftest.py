from __future__ import annotations

import pytest

from propgraph.graph.graph_store import GraphStore


@pytest.fixture()
def chain() -> GraphStore:
    """A -knows-> B -knows-> C"""
    graph = GraphStore()
    for key in ("A", "B", "C"):
        graph.merge_node(key, {"name": key.lower()})
    graph.merge_edge("ab", "knows", "A", "B")
    graph.merge_edge("bc", "knows", "B", "C")
    return graph


@pytest.fixture()
def social() -> GraphStore:
    """
    alice -knows-> bob, carol
    dave  -knows-> carol
    bob   -likes-> pizza
    carol -likes-> pizza, sushi
    """
    graph = GraphStore()
    graph.merge_node("alice", {"name": "Alice", "age": 31})
    graph.merge_node("bob", {"name": "Bob", "age": 25})
    graph.merge_node("carol", {"name": "Carol", "age": 40})
    graph.merge_node("dave", {"name": "Dave"})
    graph.merge_node("pizza", {"name": "Pizza"})
    graph.merge_node("sushi", {"name": "Sushi"})

    graph.merge_edge("alice-bob", "knows", "alice", "bob")
    graph.merge_edge("alice-carol", "knows", "alice", "carol")
    graph.merge_edge("dave-carol", "knows", "dave", "carol")
    graph.merge_edge("bob-pizza", "likes", "bob", "pizza")
    graph.merge_edge("carol-pizza", "likes", "carol", "pizza")
    graph.merge_edge("carol-sushi", "likes", "carol", "sushi")
    return graph
