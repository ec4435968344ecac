from sqlmodel import Session, select

from app.models.base import ensure_utc
from app.models.user import User
from app.schemas.user import UserOut


def to_user_out(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        created_at=ensure_utc(user.created_at),
    )


def list_users(session: Session) -> list[User]:
    return list(session.exec(select(User).order_by(User.created_at.asc(), User.email.asc())).all())
