import os
import sys
import asyncio

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# File-backed SQLite gets a NullPool, so no connection outlives the loop
# that opened it (TestClient runs the app on its own loop).
DEFAULT_DB_URL = os.environ.setdefault(
    "DATABASE_URL", "sqlite+aiosqlite:///./test_courtscore.db"
)
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:3000")

# Register the players/matches tables on the declarative Base.
from courtscore import db, models  # noqa: E402,F401


@pytest.fixture(scope="session")
def session_loop():
    """Single event loop for all sync fixtures that need to run async DB code."""

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


@pytest.fixture(autouse=True, scope="session")
def ensure_database(session_loop):
    """Ensure the test database starts clean and honours DATABASE_URL."""

    mp = pytest.MonkeyPatch()
    desired_url = os.getenv("DATABASE_URL") or DEFAULT_DB_URL
    mp.setenv("DATABASE_URL", desired_url)

    path = None
    if desired_url.startswith("sqlite") and ":memory:" not in desired_url:
        path = desired_url.split("///")[-1]
        if os.path.exists(path):
            os.remove(path)

    db.engine = None
    db.AsyncSessionLocal = None
    yield
    if db.engine is not None:
        session_loop.run_until_complete(db.engine.dispose())
        db.engine = None
    db.AsyncSessionLocal = None
    if path and os.path.exists(path):
        os.remove(path)
    mp.undo()


async def _reset_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(db.Base.metadata.drop_all)
        await conn.run_sync(db.Base.metadata.create_all)


@pytest.fixture(autouse=True)
def reset_schema(request, session_loop):
    """Reset the schema before each test that touches the database."""

    if request.node.get_closest_marker("no_db"):
        yield
        return

    engine = db.engine or db.get_engine()
    session_loop.run_until_complete(_reset_schema(engine))
    yield


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from courtscore.main import app

    with TestClient(app) as c:
        yield c
