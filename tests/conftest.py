import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from chairs.core.auth import AuthedUser, require_admin
from chairs.db.store import ChainStore, create_schema, get_store
from chairs.db.tables import AppAdmin, Application, Position, User
from chairs.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return ChainStore(engine)


@pytest.fixture
def seed(engine):
    """
    seed(edges, names=None, admins=())

    Each edge (applicant, occupant, priority) becomes one position held by
    the occupant plus one application to it. Every user gets a row; `names`
    maps ids to full names (missing ids get no name).
    """

    def _seed(edges, names=None, admins=()):
        names = names or {}
        users = {u for a, o, _ in edges for u in (a, o)} | set(names) | set(admins)
        with Session(engine) as session:
            for uid in sorted(users):
                session.add(User(id=uid, full_name=names.get(uid)))
            session.flush()
            for i, (applicant, occupant, priority) in enumerate(edges):
                pos_id = f"pos-{i}"
                session.add(Position(id=pos_id, title=f"Position {i}", occupied_by=occupant))
                session.flush()
                session.add(Application(user_id=applicant, position_id=pos_id, priority=priority))
            for uid in admins:
                session.add(AppAdmin(user_id=uid))
            session.commit()

    return _seed


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[require_admin] = lambda: AuthedUser(id="admin-1", email="admin@example.com")
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
