"""Login Use Case

Verifies a username/password pair.
"""

from libs.result import Result, Return, Error
from goldbill.app.repositories.user_repository import UserRepository
from goldbill.app.services.password_hasher import PasswordHasher
from .dtos import LoginCommandDTO, UserResponseDTO


class Login:
    """
    Use Case: Authenticate a user

    Unknown usernames and wrong passwords return the same error so the
    response does not reveal which usernames exist.

    Errors:
        INVALID_CREDENTIALS: Username or password did not match
    """

    def __init__(self, user_repo: UserRepository, password_hasher: PasswordHasher):
        self.user_repo = user_repo
        self.password_hasher = password_hasher

    async def execute(self, command: LoginCommandDTO) -> Result[UserResponseDTO]:
        user = await self.user_repo.get_by_username(command.username)

        if not user or not self.password_hasher.verify(command.password, user.password):
            return Return.err(
                Error(
                    code="INVALID_CREDENTIALS",
                    message="Invalid username or password",
                )
            )

        return Return.ok(UserResponseDTO.from_entity(user))
