import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from chairs.core.errors import DataAccessError
from chairs.db.store import ChainStore
from chairs.db.tables import Application, Position, User


def test_fetch_pending_edges_skips_vacant_positions(engine, store):
    with Session(engine) as session:
        session.add_all([User(id="u1"), User(id="u2")])
        session.add_all([
            Position(id="p-held", occupied_by="u2"),
            Position(id="p-vacant", occupied_by=None),
        ])
        session.flush()
        session.add_all([
            Application(user_id="u1", position_id="p-held", priority=None),
            Application(user_id="u1", position_id="p-vacant", priority=1),
            Application(user_id=None, position_id="p-held", priority=1),
        ])
        session.commit()

    rows = store.fetch_pending_edges()
    assert rows == [{"applicant": "u1", "position": "p-held", "occupant": "u2", "priority": None}]


def test_fetch_display_names(seed, store):
    seed([("a", "b", 1)], names={"a": "Alice"})
    assert store.fetch_display_names(["a", "b", "zzz"]) == {"a": "Alice"}
    assert store.fetch_display_names([]) == {}


def test_is_admin(seed, store):
    seed([], admins=["boss"])
    assert store.is_admin("boss")
    assert not store.is_admin("someone")


def test_missing_tables_raise_data_access_error():
    bare = ChainStore(create_engine("sqlite://"))
    with pytest.raises(DataAccessError) as exc:
        bare.fetch_pending_edges()
    assert exc.value.status_code == 500
    assert exc.value.code == "DATA_ACCESS_FAILED"
