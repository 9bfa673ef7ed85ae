from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.errors import DataAccessError
from ..db.store import ChainStore, get_store

router = APIRouter()


@router.get("/")
def read_root():
    return {"status": "ok", "message": "Musical Chairs API is running"}


@router.get("/health")
def health_check(store: ChainStore = Depends(get_store)):
    try:
        store.ping()
    except DataAccessError:
        return JSONResponse(status_code=503, content={"ok": False})
    return {"ok": True}
