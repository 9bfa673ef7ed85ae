import logging
import time
from typing import Any, Dict, Optional

from .core.config import get_settings
from .core.utils import clamp_max_len
from .db.store import ChainStore
from .graph.builder import build_adjacency
from .graph.cycle_detector import detect_cycles
from .graph.edges import extract_edges
from .graph.enricher import enrich_chains
from .graph.scorer import score_chains

logger = logging.getLogger(__name__)


def compute_chains(store: ChainStore, requested_max_len: Any = None, correlation_id: Optional[str] = None) -> Dict[str, Any]:
    """Snapshot the pending applications and return the rotation chains in discovery order."""
    start_time = time.time()
    settings = get_settings()
    max_len = clamp_max_len(requested_max_len)

    # Edge extraction (the only step that touches the store besides names)
    rows = store.fetch_pending_edges()
    edges = extract_edges(rows, settings.default_priority)

    # Graph construction
    adj, nodes = build_adjacency(edges)

    # Cycle search + canonical dedup
    cycles = detect_cycles(adj, max_len)

    # Scoring and display names
    chains = score_chains(cycles, edges, settings.default_priority)
    chains = enrich_chains(chains, store.fetch_display_names)

    logger.info(
        "chains computed: edges=%d nodes=%d chainsFound=%d maxLen=%d in %.4fs (correlationId=%s)",
        len(edges), len(nodes), len(chains), max_len, time.time() - start_time, correlation_id,
    )

    return {
        "ok": True,
        "summary": {
            "edges": len(edges),
            "nodes": len(nodes),
            "chainsFound": len(chains),
            "maxLen": max_len,
        },
        "chains": chains,
        # No set packing yet: the optimal plan is the raw chain list.
        "optimalChains": chains,
        "correlationId": correlation_id,
    }
