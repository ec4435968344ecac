from sqlmodel import Field, SQLModel
from app.models.base import CreatedAtModel, IDModel
from app.models.enums import UserRole, enum_column


class User(IDModel, CreatedAtModel, SQLModel, table=True):
    __tablename__ = 'users'

    email: str = Field(index=True, unique=True)
    name: str
    role: UserRole = Field(default=UserRole.USER, sa_column=enum_column(UserRole, 'user_role'))
