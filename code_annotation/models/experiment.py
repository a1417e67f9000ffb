"""Experiment ORM: a named study under which users annotate file pairs.

Invariants:
    - id is an autoincrement integer primary key
    - name and description are non-nullable ("" when not provided)
    - never deleted by the API; name/description mutated in place on update
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from code_annotation.db.base import Base


class Experiment(Base):
    """A study whose file pairs and assignments reference it by experiment_id."""
    __tablename__ = "experiments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
