"""Request Schemas: JSON bodies accepted by write endpoints.

Invariants:
    - Unknown keys are ignored
    - Wrong JSON types are rejected (strict: no number -> str coercion)
    - ExperimentWrite fields default to "" when missing
    - AssignmentWrite.answer must be one of Answer; duration >= 0
"""

from pydantic import BaseModel, ConfigDict, Field

from code_annotation.core.domain_types import Answer


class ExperimentWrite(BaseModel):
    """Body of experiment creation and update."""
    model_config = ConfigDict(strict=True)

    name: str = ""
    description: str = ""


class AssignmentWrite(BaseModel):
    """Body of saving an answer for an assignment."""
    model_config = ConfigDict(strict=True)

    answer: Answer
    duration: int = Field(0, ge=0)
