"""User ORM: an annotator or a requester, identified by login.

Invariants:
    - login is unique
    - role is one of Role (stored as its canonical string)
"""

from sqlalchemy import Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from code_annotation.core.domain_types import Role
from code_annotation.db.base import Base


class User(Base):
    """A user of the annotation tool."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    login: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    username: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    avatar_url: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, native_enum=False, length=20,
               values_callable=lambda kinds: [k.value for k in kinds]),
        nullable=False, default=Role.WORKER,
    )
