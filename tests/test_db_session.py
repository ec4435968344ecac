from sqlmodel import select

from app.db.session import build_engine, get_session
from app.models.notification import Notification


def test_session_dependency():
    gen = get_session()
    session = next(gen)
    assert session is not None
    assert session.exec(select(Notification)).all() == []
    session.close()


def test_sqlite_engine_allows_cross_thread_use():
    engine = build_engine("sqlite:///:memory:")
    assert engine.dialect.name == "sqlite"
    engine.dispose()
