"""
Chain scorer: average edge priority around each cycle.

Lower priority values mean stronger preference, so a lower average marks a
chain whose participants want their moves more.
"""
from typing import Dict, Iterable, List, Optional, Tuple

from .edges import Edge

PriorityLookup = Dict[Tuple[str, str], int]


def priority_lookup(edges: Iterable[Edge]) -> PriorityLookup:
    """(source, target) -> priority; with parallel edges the lowest value wins."""
    lookup: PriorityLookup = {}
    for e in edges:
        key = (e.source, e.target)
        if key not in lookup or e.priority < lookup[key]:
            lookup[key] = e.priority
    return lookup


def cycle_priorities(cycle: List[str], lookup: PriorityLookup, default_priority: int = 999) -> List[int]:
    n = len(cycle)
    return [lookup.get((cycle[i], cycle[(i + 1) % n]), default_priority) for i in range(n)]


def average_priority(cycle: List[str], lookup: PriorityLookup, default_priority: int = 999) -> Optional[float]:
    priorities = cycle_priorities(cycle, lookup, default_priority)
    if not priorities:
        return None
    return sum(priorities) / len(priorities)


def score_chains(cycles: List[List[str]], edges: List[Edge], default_priority: int = 999) -> List[dict]:
    lookup = priority_lookup(edges)
    return [
        {
            "length": len(cycle),
            "users": cycle,
            "avgPriority": average_priority(cycle, lookup, default_priority),
        }
        for cycle in cycles
    ]
