from loguru import logger
from sqlmodel import Session, SQLModel
from app.db.session import engine
from app.core.config import settings
from app.models import notification, user  # noqa: F401


def init_db(drop_all: bool = False, seed_demo: bool = False) -> None:
    if drop_all:
        SQLModel.metadata.drop_all(engine)
    if (
        settings.DATABASE_URL.startswith('sqlite')
        or settings.ENV != 'production'
        or settings.AUTO_CREATE_TABLES
    ):
        SQLModel.metadata.create_all(engine)
    if seed_demo:
        from app.services.demo_seed import seed_demo_data

        with Session(engine) as session:
            summary = seed_demo_data(session)
        logger.info('db.demo_seeded', users=summary.users, notifications=summary.notifications)
