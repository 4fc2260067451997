"""Get Current User Use Case"""

from typing import Optional
from libs.result import Result, Return, Error
from goldbill.app.repositories.user_repository import UserRepository
from .dtos import UserResponseDTO


class GetCurrentUser:
    """
    Resolve the user stored in the session

    Errors:
        UNAUTHORIZED: No user in session, or the user no longer exists
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self, user_id: Optional[str]) -> Result[UserResponseDTO]:
        user = await self.user_repo.get_by_id(user_id) if user_id else None

        if not user:
            return Return.err(
                Error(
                    code="UNAUTHORIZED",
                    message="Authentication required",
                )
            )

        return Return.ok(UserResponseDTO.from_entity(user))
