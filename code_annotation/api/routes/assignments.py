"""Assignment Routes: the caller's assignments and per-pair annotation tallies."""

from fastapi import APIRouter, Depends, Request

from code_annotation.api.dependencies import get_assignment_handlers
from code_annotation.api.rendering import render
from code_annotation.services.assignments import AssignmentHandlers

router = APIRouter(prefix="/api/v1/experiments", tags=["assignments"])


@router.get("/{experiment_id}/assignments")
async def get_assignments_for_user_experiment(
    request: Request,
    handlers: AssignmentHandlers = Depends(get_assignment_handlers),
):
    return render(await handlers.get_assignments_for_user_experiment(request))


@router.put("/{experiment_id}/assignments/{assignment_id}")
async def save_assignment(
    request: Request,
    handlers: AssignmentHandlers = Depends(get_assignment_handlers),
):
    """Save {answer, duration}. Answers 204 without a body."""
    return render(await handlers.save_assignment(request))


@router.get("/{experiment_id}/file-pairs/{pair_id}/annotations")
async def get_file_pair_annotations(
    request: Request,
    handlers: AssignmentHandlers = Depends(get_assignment_handlers),
):
    return render(await handlers.get_file_pair_annotations(request))
