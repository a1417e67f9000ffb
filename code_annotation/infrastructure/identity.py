"""Header Identity: the caller's user id as attached by the upstream auth proxy.

Invariants:
    - Missing, empty, non-integer or non-positive header -> 401 "user not authenticated"
    - Never reads the database: existence of the user is the handlers' concern
"""

from code_annotation.core.domain_types import UserId
from code_annotation.core.errors import unauthenticated
from code_annotation.core.repository_protocols import RequestLike

NOT_AUTHENTICATED = "user not authenticated"


class HeaderIdentity:
    """IdentityResolver reading a trusted request header."""

    def __init__(self, header_name: str):
        self.header_name = header_name

    def get_user_id(self, request: RequestLike) -> UserId:
        raw = request.headers.get(self.header_name, "").strip()
        if not raw:
            raise unauthenticated(NOT_AUTHENTICATED)
        try:
            user_id = int(raw)
        except ValueError:
            raise unauthenticated(NOT_AUTHENTICATED)
        if user_id <= 0:
            raise unauthenticated(NOT_AUTHENTICATED)
        return UserId(user_id)
