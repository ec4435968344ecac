from sqlmodel import Session, create_engine
from app.core.config import settings


def build_engine(url: str):
    connect_args = {'check_same_thread': False} if url.startswith('sqlite') else {}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL)


def get_session():
    with Session(engine) as session:
        yield session
