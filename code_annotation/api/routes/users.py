"""User Routes: the authenticated caller."""

from fastapi import APIRouter, Depends, Request

from code_annotation.api.dependencies import get_user_handlers
from code_annotation.api.rendering import render
from code_annotation.services.users import UserHandlers

router = APIRouter(prefix="/api/v1", tags=["users"])


@router.get("/me")
async def get_current_user(
    request: Request,
    handlers: UserHandlers = Depends(get_user_handlers),
):
    return render(await handlers.get_current_user(request))
