"""File Pair Routes: list and count an experiment's file pairs."""

from fastapi import APIRouter, Depends, Request

from code_annotation.api.dependencies import get_file_pair_handlers
from code_annotation.api.rendering import render
from code_annotation.services.file_pairs import FilePairHandlers

router = APIRouter(prefix="/api/v1/experiments", tags=["file-pairs"])


@router.get("/{experiment_id}/file-pairs")
async def get_file_pairs(
    request: Request,
    handlers: FilePairHandlers = Depends(get_file_pair_handlers),
):
    return render(await handlers.get_file_pairs(request))


@router.get("/{experiment_id}/file-pairs/count")
async def count_file_pairs(
    request: Request,
    handlers: FilePairHandlers = Depends(get_file_pair_handlers),
):
    return render(await handlers.count_file_pairs(request))
