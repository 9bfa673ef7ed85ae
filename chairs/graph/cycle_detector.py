"""
Cycle detector: enumerates the rotation chains of the applicant -> occupant graph.

Bounded depth-first search from every start node in ascending order:
1. Strongly connected components are computed once - O(V+E)
2. Start nodes outside any multi-node SCC are skipped, and a search never
   leaves the SCC of its start node (no cycle through the start can)
3. Each closed path is keyed by its canonical rotation; only the first
   rotation found is kept

The length cap is the only bound on the search; it keeps the worst case
(exponential in graph density) usable on dense graphs.
"""
import logging
from typing import List, Optional, Set

from .builder import AdjacencyMap, build_graph, cyclic_components
from .canonical import canonical_key

logger = logging.getLogger(__name__)


class _Search:
    """Traversal state for a single computation."""

    def __init__(self, adj: AdjacencyMap, max_len: int):
        self.adj = adj
        self.max_len = max_len
        self.seen: Set[str] = set()
        self.cycles: List[List[str]] = []

    def run_from(self, start: str, component: Optional[Set[str]] = None) -> None:
        path: List[str] = []
        on_path: Set[str] = set()

        def dfs(u: str) -> None:
            if len(path) >= self.max_len:
                return
            path.append(u)
            on_path.add(u)

            for v in self.adj.get(u, ()):
                if v == start and len(path) >= 2:
                    self._record(path)
                elif (
                    v not in on_path
                    and v in self.adj
                    and len(path) < self.max_len
                    and (component is None or v in component)
                ):
                    dfs(v)

            on_path.discard(u)
            path.pop()

        dfs(start)

    def _record(self, path: List[str]) -> None:
        key = canonical_key(path)
        if key in self.seen:
            return
        self.seen.add(key)
        self.cycles.append(list(path))


def detect_cycles(adj: AdjacencyMap, max_len: int, prune: bool = True) -> List[List[str]]:
    """
    Find all distinct simple directed cycles with 2 <= length <= max_len.

    Chains come back in discovery order; each begins at its smallest node id.
    """
    search = _Search(adj, max_len)
    components = cyclic_components(build_graph(adj)) if prune else None

    for start in sorted(adj):
        if components is None:
            search.run_from(start)
        elif start in components:
            search.run_from(start, components[start])

    logger.debug("Cycle search over %d start nodes found %d cycles (max_len=%d)", len(adj), len(search.cycles), max_len)
    return search.cycles
