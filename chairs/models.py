from pydantic import BaseModel
from typing import Any, List, Optional


class ChainsRequest(BaseModel):
    # Parsed leniently by clamp_max_len; bad values never fail validation.
    maxLen: Optional[Any] = None


class Chain(BaseModel):
    length: int
    users: List[str]
    avgPriority: Optional[float] = None
    peopleNames: List[str] = []


class ChainsSummary(BaseModel):
    edges: int
    nodes: int
    chainsFound: int
    maxLen: int


class ChainsResponse(BaseModel):
    ok: bool = True
    summary: ChainsSummary
    chains: List[Chain]
    optimalChains: List[Chain]
    correlationId: Optional[str] = None


class ErrorBody(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    ok: bool = False
    error: ErrorBody
    correlationId: Optional[str] = None
