import os
import tempfile
from pathlib import Path

import pytest

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix='notifications-test-'))
DEFAULT_TEST_DB_URL = f"sqlite:///{_TEST_DB_DIR / 'test.db'}"
TEST_DB_URL = os.getenv("TEST_DB_URL", DEFAULT_TEST_DB_URL)
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ.setdefault("SEED_DEMO_DATA", "false")

from sqlmodel import Session

from app.core.config import settings
from app.db.init_db import init_db
from app.db.session import engine

settings.DATABASE_URL = TEST_DB_URL


@pytest.fixture(autouse=True)
def _fresh_database():
    init_db(drop_all=True)
    yield


@pytest.fixture()
def session():
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
