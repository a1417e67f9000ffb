"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Experiment is the aggregate root for file pairs and assignments

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata knows every table (create_all, alembic)
    - Links between tables are plain foreign keys; no ORM relationships are loaded
"""

from code_annotation.models.experiment import Experiment  # noqa: F401
from code_annotation.models.user import User  # noqa: F401
from code_annotation.models.file_pair import FilePair  # noqa: F401
from code_annotation.models.assignment import Assignment  # noqa: F401
