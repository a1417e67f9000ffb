"""FilePair ORM: two code blobs compared side by side within an experiment.

Invariants:
    - Always belongs to an Experiment (experiment_id FK)
    - Read-only to the API: rows come from an import process
    - Blob contents are stored but never serialized by list endpoints

Design Decisions:
    - Left/right sides flattened into columns: one row per pair, no join
"""

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from code_annotation.db.base import Base


class FilePair(Base):
    """A pair of files to compare."""
    __tablename__ = "file_pairs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    experiment_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("experiments.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    left_blob_id: Mapped[str] = mapped_column(String(64), nullable=False)
    left_repository_id: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    left_commit_hash: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    left_path: Mapped[str] = mapped_column(String(2000), nullable=False)
    left_content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    right_blob_id: Mapped[str] = mapped_column(String(64), nullable=False)
    right_repository_id: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    right_commit_hash: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    right_path: Mapped[str] = mapped_column(String(2000), nullable=False)
    right_content: Mapped[str] = mapped_column(Text, nullable=False, default="")
