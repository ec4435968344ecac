from enum import Enum
import sqlalchemy as sa
from sqlalchemy import Column


class UserRole(str, Enum):
    ADMIN = 'admin'
    EDITOR = 'editor'
    USER = 'user'


class NotificationRole(str, Enum):
    ADMIN = 'admin'
    EDITOR = 'editor'
    USER = 'user'
    ALL = 'all'

    @classmethod
    def values(cls) -> list[str]:
        return [item.value for item in cls]


def enum_column(enum_cls: type[Enum], name: str, **kwargs) -> Column:
    return Column(
        sa.Enum(
            enum_cls,
            values_callable=lambda enum: [item.value for item in enum],
            name=name,
        ),
        nullable=False,
        **kwargs,
    )
