"""
Edge extractor: turns pending application rows into applicant -> occupant edges.
"""
from dataclasses import dataclass
from typing import Any, Dict, List

import pandas as pd

EDGE_COLUMNS = ["applicant", "position", "occupant", "priority"]


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    priority: int


def edges_frame(rows: List[Dict[str, Any]], default_priority: int = 999) -> pd.DataFrame:
    """Load rows into a cleaned DataFrame; drops rows that cannot take part in a cycle."""
    df = pd.DataFrame(rows, columns=EDGE_COLUMNS)
    df = df.dropna(subset=["applicant", "occupant"])
    df["applicant"] = df["applicant"].astype(str)
    df["occupant"] = df["occupant"].astype(str)
    df["priority"] = pd.to_numeric(df["priority"], errors="coerce").fillna(default_priority).astype(int)
    return df.reset_index(drop=True)


def extract_edges(rows: List[Dict[str, Any]], default_priority: int = 999) -> List[Edge]:
    """
    Vacant positions (no occupant) and rows without an applicant are excluded.
    Row order is preserved; it drives adjacency order downstream.
    """
    df = edges_frame(rows, default_priority)
    return [
        Edge(source=src, target=dst, priority=int(prio))
        for src, dst, prio in zip(df["applicant"], df["occupant"], df["priority"])
    ]
