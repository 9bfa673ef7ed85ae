"""Tests for edge extraction, adjacency, scoring and name enrichment."""
import pytest

from chairs.graph.builder import build_adjacency, build_graph, cyclic_components
from chairs.graph.canonical import canonical_key
from chairs.graph.edges import Edge, extract_edges
from chairs.graph.enricher import chain_members, enrich_chains
from chairs.graph.scorer import average_priority, priority_lookup, score_chains


def test_extract_edges_drops_vacant_and_anonymous_rows():
    rows = [
        {"applicant": "u1", "position": "p1", "occupant": "u2", "priority": 1},
        {"applicant": "u2", "position": "p2", "occupant": None, "priority": 1},
        {"applicant": None, "position": "p3", "occupant": "u1", "priority": 2},
        {"applicant": "u3", "position": "p4", "occupant": "u1", "priority": None},
    ]
    edges = extract_edges(rows)
    assert edges == [Edge("u1", "u2", 1), Edge("u3", "u1", 999)]


def test_extract_edges_empty():
    assert extract_edges([]) == []


def test_extract_edges_custom_sentinel():
    rows = [{"applicant": "a", "position": "p", "occupant": "b", "priority": None}]
    assert extract_edges(rows, default_priority=50)[0].priority == 50


def test_adjacency_keeps_duplicates_in_input_order():
    edges = [Edge("b", "a", 1), Edge("a", "c", 1), Edge("a", "b", 1), Edge("a", "c", 2)]
    adj, nodes = build_adjacency(edges)
    assert adj == {"b": ["a"], "a": ["c", "b", "c"]}
    assert nodes == ["a", "b"]


def test_cyclic_components_skip_acyclic_nodes():
    adj, _ = build_adjacency([Edge("a", "b", 1), Edge("b", "a", 1), Edge("b", "c", 1), Edge("c", "c", 1)])
    components = cyclic_components(build_graph(adj))
    assert set(components) == {"a", "b"}
    assert components["a"] == {"a", "b"}


def test_canonical_key_rotation():
    assert canonical_key(["c", "a", "b"]) == "a->b->c"
    assert canonical_key(["a", "b", "c"]) == canonical_key(["b", "c", "a"])


def test_lowest_priority_wins_for_parallel_edges():
    lookup = priority_lookup([Edge("a", "b", 5), Edge("a", "b", 2), Edge("a", "b", 7)])
    assert lookup[("a", "b")] == 2


def test_average_priority_includes_closing_edge():
    lookup = priority_lookup([Edge("a", "b", 1), Edge("b", "c", 2), Edge("c", "a", 6)])
    assert average_priority(["a", "b", "c"], lookup) == pytest.approx(3.0)


def test_average_priority_uses_sentinel_for_missing_edge():
    lookup = priority_lookup([Edge("a", "b", 1)])
    assert average_priority(["a", "b"], lookup) == pytest.approx(500.0)


def test_score_chains_two_cycle():
    edges = [Edge("u1", "u2", 1), Edge("u2", "u1", 2)]
    assert score_chains([["u1", "u2"]], edges) == [
        {"length": 2, "users": ["u1", "u2"], "avgPriority": 1.5}
    ]


def test_enrich_falls_back_to_id():
    chains = [{"length": 2, "users": ["a", "b"], "avgPriority": 1.0}]
    calls = []

    def resolve(ids):
        calls.append(list(ids))
        return {"a": "Alice"}

    enrich_chains(chains, resolve)
    assert chains[0]["peopleNames"] == ["Alice", "b"]
    assert calls == [["a", "b"]]


def test_enrich_skips_lookup_without_chains():
    def resolve(ids):
        raise AssertionError("should not be called")

    assert enrich_chains([], resolve) == []


def test_chain_members_unique_first_seen():
    chains = [{"users": ["a", "b"]}, {"users": ["b", "c", "a"]}]
    assert chain_members(chains) == ["a", "b", "c"]
