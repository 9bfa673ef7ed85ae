"""
Adjacency builder: edge list -> successor lists plus a networkx view of the graph.
"""
from typing import Dict, Iterable, List, Set, Tuple

import networkx as nx

from .edges import Edge

AdjacencyMap = Dict[str, List[str]]


def build_adjacency(edges: Iterable[Edge]) -> Tuple[AdjacencyMap, List[str]]:
    """
    Returns:
        adj: source -> successors, one entry per edge (duplicates kept), in input order
        nodes: every node with at least one outgoing edge, ascending
    """
    adj: AdjacencyMap = {}
    for e in edges:
        adj.setdefault(e.source, []).append(e.target)
    return adj, sorted(adj)


def build_graph(adj: AdjacencyMap) -> nx.DiGraph:
    """Collapsed directed graph (parallel edges merged) for structural queries."""
    G = nx.DiGraph()
    G.add_nodes_from(adj)
    for src, targets in adj.items():
        G.add_edges_from((src, dst) for dst in targets)
    return G


def cyclic_components(G: nx.DiGraph) -> Dict[str, Set[str]]:
    """
    Map each node that can lie on a cycle of length >= 2 to its strongly
    connected component. Nodes absent from the result cannot close a cycle.
    """
    membership: Dict[str, Set[str]] = {}
    for scc in nx.strongly_connected_components(G):
        if len(scc) < 2:
            continue
        for node in scc:
            membership[node] = scc
    return membership
