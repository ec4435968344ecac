from __future__ import annotations

import argparse

from sqlmodel import Session

from app.core.config import settings
from app.db.init_db import init_db
from app.db.session import engine
from app.services.demo_seed import seed_demo_data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Seed demo users and notifications.')
    parser.add_argument('--drop', action='store_true', help='Drop and recreate all tables first')
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    init_db(drop_all=args.drop)
    with Session(engine) as session:
        summary = seed_demo_data(session)
    print(
        f"seeded {settings.DATABASE_URL}: users={summary.users} notifications={summary.notifications}"
    )


if __name__ == '__main__':
    main()
