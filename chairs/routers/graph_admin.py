"""
FastAPI router for /api/admin/graph.
Computes the rotation chains (cycles) from the current applications snapshot.
"""
from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from ..core.auth import require_admin
from ..core.correlation import get_correlation_id
from ..db.store import ChainStore, get_store
from ..models import ChainsRequest, ChainsResponse, ErrorResponse
from ..orchestrator import compute_chains

router = APIRouter(
    prefix="/api/admin/graph",
    tags=["graph-admin"],
    dependencies=[Depends(require_admin)],
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post("/chains", response_model=ChainsResponse)
def find_chains(
    request: Request,
    payload: Any = Body(default=None),
    store: ChainStore = Depends(get_store),
):
    """
    Body: optional `{"maxLen": int}`; out-of-range or non-numeric values are
    clamped into [2, 15] (default 8), never rejected. A body that is not a
    JSON object is treated as absent.
    """
    max_len = None
    if isinstance(payload, dict):
        max_len = ChainsRequest.model_validate(payload).maxLen
    return compute_chains(store, max_len, get_correlation_id(request))
