"""
Read-only access to the relational store used by the chain computation.
"""
import logging
from functools import lru_cache
from typing import Any, Dict, Iterable, List

from sqlalchemy import Engine, create_engine, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..core.config import get_settings
from ..core.errors import DataAccessError
from .tables import AppAdmin, Application, Base, Position, User

logger = logging.getLogger(__name__)


class ChainStore:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, autoflush=False, future=True)

    def _run(self, operation: str, fn):
        try:
            with self._sessions() as session:
                return fn(session)
        except SQLAlchemyError as e:
            logger.error("Store query '%s' failed: %s", operation, e)
            raise DataAccessError(operation, detail=str(e)) from e

    def fetch_pending_edges(self) -> List[Dict[str, Any]]:
        """Applications whose target position is occupied, as applicant -> occupant rows."""
        stmt = (
            select(
                Application.user_id.label("applicant"),
                Application.position_id.label("position"),
                Position.occupied_by.label("occupant"),
                Application.priority.label("priority"),
            )
            .join(Position, Position.id == Application.position_id)
            .where(Position.occupied_by.is_not(None))
            .where(Application.user_id.is_not(None))
            .order_by(Application.user_id, Application.priority, Application.id)
        )

        def query(session: Session):
            return [dict(row._mapping) for row in session.execute(stmt)]

        return self._run("fetch_pending_edges", query)

    def fetch_display_names(self, ids: Iterable[str]) -> Dict[str, str]:
        ids = list(dict.fromkeys(ids))
        if not ids:
            return {}
        stmt = select(User.id, User.full_name).where(User.id.in_(ids))

        def query(session: Session):
            return {row.id: row.full_name for row in session.execute(stmt) if row.full_name}

        return self._run("fetch_display_names", query)

    def is_admin(self, user_id: str) -> bool:
        stmt = select(AppAdmin.user_id).where(AppAdmin.user_id == user_id)
        return self._run("is_admin", lambda s: s.execute(stmt).first() is not None)

    def ping(self) -> None:
        self._run("ping", lambda s: s.execute(text("select 1")).scalar())


def create_schema(engine: Engine) -> None:
    Base.metadata.create_all(engine)


@lru_cache
def get_engine() -> Engine:
    settings = get_settings()
    kwargs = {"future": True, "pool_pre_ping": True}
    if settings.database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(settings.database_url, **kwargs)


def get_store() -> ChainStore:
    return ChainStore(get_engine())
