import logging

import pytest

from propgraph.config.settings import QueryConfig
from propgraph.errors import NotFoundError
from propgraph.query.query import Query


def test_out_follows_the_chain(chain):
    q = Query(chain, "A")

    assert q.out("knows").keys() == ["B"]
    assert q.out("knows").keys() == ["C"]
    assert q.out("knows").keys() == []


def test_in_is_the_reverse_of_out(chain):
    assert Query(chain, "B").in_("knows").keys() == ["A"]
    assert Query(chain, "C").in_("knows").in_("knows").keys() == ["A"]


def test_traversal_matches_labels_exactly(social):
    assert Query(social, "alice").out("know").keys() == []
    assert Query(social, "alice").out("likes").keys() == []
    assert Query(social, "alice").out("knows").keys() == ["bob", "carol"]


def test_traversal_deduplicates_reached_nodes(social):
    social.merge_edge("alice-bob-2", "knows", "alice", "bob")

    q = Query(social, "alice", "dave").out("knows")
    assert q.keys() == ["bob", "carol"]

    q = Query(social, "bob", "carol").out("likes")
    assert q.keys() == ["pizza", "sushi"]

    assert Query(social, "carol").in_("knows").keys() == ["alice", "dave"]


def test_missing_start_keys_are_skipped(chain):
    q = Query(chain, "A", "ghost")

    assert q.keys() == ["A"]
    assert q.result["A"] is chain.get_node("A")


def test_empty_query_accepts_every_operation():
    q = Query.empty()

    q.out("x").in_("y").filter_nodes(lambda props: True).get("g", "k").deepen("d")

    assert q.keys() == []
    assert not q.is_deep()
    assert q.cache == {"g": {}}


def test_filter_nodes_uses_properties(social):
    q = Query(social, "alice").out("knows").filter_nodes(
        lambda props: props.get("age", 0) > 30
    )

    assert q.keys() == ["carol"]


def test_get_projects_existing_properties_only(social):
    q = Query(social, "alice").out("knows").get("people", "name", "missing")

    assert q.cache["people"] == {
        "bob": {"name": "Bob"},
        "carol": {"name": "Carol"},
    }


def test_get_one_requires_a_single_node(social):
    q = Query(social, "alice").get_one("me", "name", "age", "missing")
    assert q.cache["me"] == {"name": "Alice", "age": 31}

    q.out("knows").get_one("friend", "name")
    assert "friend" not in q.cache

    q.out("likes").get_one("food", "name")
    assert "food" not in q.cache
    assert set(q.cache) == {"me"}


def test_output_returns_copies(chain):
    q = Query(chain, "A")

    out = q.output()
    out["A"].props["name"] = "mutated"

    assert chain.get_node_prop("A", "name") == "a"


def test_dangling_edges_are_skipped_and_counted(social, caplog):
    social.delete_node("bob")

    with caplog.at_level(logging.WARNING, logger="propgraph.query"):
        q = Query(social, "alice").out("knows")

    assert q.keys() == ["carol"]
    assert q.skipped == 1
    assert "bob" in caplog.text


def test_dangling_edge_key_in_adjacency_is_skipped(chain):
    # Adjacency pointing at an edge the store no longer has
    del chain.edges["ab"]

    q = Query(chain, "A").out("knows")

    assert q.keys() == []
    assert q.skipped == 1


def test_log_skips_can_be_disabled(social, caplog):
    social.delete_node("bob")
    config = QueryConfig(log_skips=False)

    with caplog.at_level(logging.WARNING, logger="propgraph.query"):
        q = Query(social, "alice", config=config).out("knows")

    assert q.skipped == 1
    assert caplog.text == ""


def test_strict_references_raise(social):
    social.delete_node("bob")
    q = Query(social, "alice", config=QueryConfig(strict_references=True))

    with pytest.raises(NotFoundError) as exc:
        q.out("knows")

    assert exc.value.kind == "node"
    assert exc.value.key == "bob"


def test_strict_failure_can_leave_branches_partly_advanced(social):
    social.delete_node("bob")
    q = Query(
        social, "dave", "alice", config=QueryConfig(strict_references=True)
    ).deepen("x")

    with pytest.raises(NotFoundError):
        q.out("knows")

    assert q.queries["dave"].keys() == ["carol"]
    assert q.queries["alice"].keys() == ["alice"]
