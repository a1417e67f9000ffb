"""Initial schema: experiments, users, file_pairs, assignments.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "experiments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False, server_default=""),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("login", sa.String(100), nullable=False, unique=True),
        sa.Column("username", sa.String(200), nullable=False, server_default=""),
        sa.Column("avatar_url", sa.String(2000), nullable=False, server_default=""),
        sa.Column("role", sa.String(20), nullable=False, server_default="worker"),
    )

    op.create_table(
        "file_pairs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("experiment_id", sa.Integer, sa.ForeignKey("experiments.id", ondelete="CASCADE"), nullable=False),
        sa.Column("score", sa.Float, nullable=False, server_default="0"),
        sa.Column("left_blob_id", sa.String(64), nullable=False),
        sa.Column("left_repository_id", sa.String(500), nullable=False, server_default=""),
        sa.Column("left_commit_hash", sa.String(64), nullable=False, server_default=""),
        sa.Column("left_path", sa.String(2000), nullable=False),
        sa.Column("left_content", sa.Text, nullable=False, server_default=""),
        sa.Column("right_blob_id", sa.String(64), nullable=False),
        sa.Column("right_repository_id", sa.String(500), nullable=False, server_default=""),
        sa.Column("right_commit_hash", sa.String(64), nullable=False, server_default=""),
        sa.Column("right_path", sa.String(2000), nullable=False),
        sa.Column("right_content", sa.Text, nullable=False, server_default=""),
    )
    op.create_index("ix_file_pairs_experiment_id", "file_pairs", ["experiment_id"])

    op.create_table(
        "assignments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("pair_id", sa.Integer, sa.ForeignKey("file_pairs.id", ondelete="CASCADE"), nullable=False),
        sa.Column("experiment_id", sa.Integer, sa.ForeignKey("experiments.id", ondelete="CASCADE"), nullable=False),
        sa.Column("answer", sa.String(10), nullable=True),
        sa.Column("duration", sa.Integer, nullable=False, server_default="0"),
        sa.UniqueConstraint("user_id", "experiment_id", "pair_id"),
    )
    op.create_index("ix_assignments_experiment_id", "assignments", ["experiment_id"])


def downgrade() -> None:
    op.drop_index("ix_assignments_experiment_id", table_name="assignments")
    op.drop_table("assignments")
    op.drop_index("ix_file_pairs_experiment_id", table_name="file_pairs")
    op.drop_table("file_pairs")
    op.drop_table("users")
    op.drop_table("experiments")
