"""Experiment Routes: list, read, create and update experiments.

Invariants:
    - Path ids are taken raw and parsed by the handler (non-int -> 400 envelope)
    - Bodies are read raw and parsed by the handler (malformed -> 400 envelope)
"""

from fastapi import APIRouter, Depends, Request

from code_annotation.api.dependencies import get_experiment_handlers
from code_annotation.api.rendering import render
from code_annotation.services.experiments import ExperimentHandlers

router = APIRouter(prefix="/api/v1/experiments", tags=["experiments"])


@router.get("")
async def get_experiments(
    request: Request,
    handlers: ExperimentHandlers = Depends(get_experiment_handlers),
):
    """List experiments with the caller's progress in each."""
    return render(await handlers.get_experiments(request))


@router.post("")
async def create_experiment(
    request: Request,
    handlers: ExperimentHandlers = Depends(get_experiment_handlers),
):
    """Create an experiment from {name, description}."""
    return render(await handlers.create_experiment(request))


@router.get("/{experiment_id}")
async def get_experiment_details(
    request: Request,
    handlers: ExperimentHandlers = Depends(get_experiment_handlers),
):
    return render(await handlers.get_experiment_details(request))


@router.put("/{experiment_id}")
async def update_experiment(
    request: Request,
    handlers: ExperimentHandlers = Depends(get_experiment_handlers),
):
    return render(await handlers.update_experiment(request))
