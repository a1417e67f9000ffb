"""User Handlers: the authenticated caller's own profile."""

from starlette.requests import Request

from code_annotation.core.errors import RepositoryError, internal, not_found
from code_annotation.core.repository_protocols import IdentityResolver, UserRepository
from code_annotation.schemas.envelope import Response
from code_annotation.schemas.serializers import new_user_response

NO_USER_FOUND = "no user found"


class UserHandlers:

    def __init__(self, users: UserRepository, identity: IdentityResolver):
        self.users = users
        self.identity = identity

    async def get_current_user(self, request: Request) -> Response:
        user_id = self.identity.get_user_id(request)
        try:
            user = await self.users.get_by_id(user_id)
        except RepositoryError as e:
            raise internal(f"error getting user from the DB: {e}") from e
        if user is None:
            raise not_found(NO_USER_FOUND)
        return new_user_response(user)
