"""Assignment ORM: links a user, an experiment and a file pair.

Invariants:
    - answer is NULL until the user answers; otherwise one of Answer values
    - duration is the time spent on the pair, in milliseconds (>= 0)
    - (user_id, experiment_id, pair_id) is unique

Design Decisions:
    - experiment_id denormalized: progress counts never join through file_pairs
"""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from code_annotation.db.base import Base


class Assignment(Base):
    """A file pair assigned to a user within an experiment."""
    __tablename__ = "assignments"
    __table_args__ = (
        UniqueConstraint("user_id", "experiment_id", "pair_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    pair_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("file_pairs.id", ondelete="CASCADE"), nullable=False,
    )
    experiment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("experiments.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    answer: Mapped[str | None] = mapped_column(String(10), nullable=True)
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
