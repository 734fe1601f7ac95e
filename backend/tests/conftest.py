"""Pytest fixtures — throw-away SQLite database for fast, isolated tests."""
from datetime import datetime
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from eventboard.database import Base, get_db
from eventboard.main import app

# Import all models so they register with Base.metadata
from eventboard.models.user import User              # noqa: F401
from eventboard.models.event import Event            # noqa: F401
from eventboard.models.attendee import Attendee, AttendeeAnswer  # noqa: F401

SQLITE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session, closed after the test."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def create_test_user(client: TestClient, username: str = "tester") -> dict:
    """Helper — POST /api/users and return response JSON."""
    resp = client.post("/api/users/", json={
        "username": username,
        "email": f"{username}@example.com",
        "first_name": username.title(),
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


def make_user(db, username: str = "tester") -> User:
    """Helper — insert a user straight through the session."""
    user = User(username=username, email=f"{username}@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_event(db, organizer: User, name: str = "Test event",
               when: datetime = datetime(2026, 10, 19, 18, 0)) -> Event:
    """Helper — insert an event straight through the session."""
    ev = Event(
        name=name,
        description="An event for tests",
        address="Main street 1",
        when=when,
        organizer_id=organizer.id,
    )
    db.add(ev)
    db.commit()
    db.refresh(ev)
    return ev


def answer(db, ev: Event, user: User, value: AttendeeAnswer) -> Attendee:
    """Helper — record ``user``'s answer for ``ev``."""
    row = Attendee(event_id=ev.id, user_id=user.id, answer=value)
    db.add(row)
    db.commit()
    return row
