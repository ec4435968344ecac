from sqlalchemy import create_engine, inspect
from sqlmodel import Session, select

from app.core import config as config_module
from app.db import init_db as init_module
from app.models.notification import Notification


def _memory_engine():
    return create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False})


def test_init_db_creates_tables_for_sqlite_in_production(monkeypatch):
    engine = _memory_engine()
    monkeypatch.setattr(init_module, "engine", engine)
    monkeypatch.setattr(config_module.settings, "ENV", "production")
    monkeypatch.setattr(config_module.settings, "DATABASE_URL", "sqlite:///:memory:")

    init_module.init_db(drop_all=True)

    tables = inspect(engine).get_table_names()
    assert {"users", "notifications", "notification_dismissals"} <= set(tables)


def test_init_db_creates_tables_when_auto_create_enabled(monkeypatch):
    engine = _memory_engine()
    monkeypatch.setattr(init_module, "engine", engine)
    monkeypatch.setattr(config_module.settings, "ENV", "production")
    monkeypatch.setattr(config_module.settings, "DATABASE_URL", "mysql+pymysql://app:secret@db:3306/notifications")
    monkeypatch.setattr(config_module.settings, "AUTO_CREATE_TABLES", True)

    init_module.init_db(drop_all=True)

    assert "notifications" in inspect(engine).get_table_names()


def test_init_db_seeds_demo_data(monkeypatch):
    engine = _memory_engine()
    monkeypatch.setattr(init_module, "engine", engine)

    init_module.init_db(drop_all=True, seed_demo=True)

    with Session(engine) as session:
        assert len(session.exec(select(Notification)).all()) == 5
