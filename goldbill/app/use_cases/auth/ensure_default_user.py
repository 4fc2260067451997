"""EnsureDefaultUser Use Case

Creates the configured operator account on first start-up.
"""

from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return
from goldbill.app.services.unit_of_work import UnitOfWork
from goldbill.app.services.password_hasher import PasswordHasher
from goldbill.app.repositories.user_repository import UserRepository
from goldbill.app.use_cases.errors import store_failed
from goldbill.domain.user import User


class EnsureDefaultUser:
    """
    Use Case: Make sure the default user exists

    Business Rules:
    1. An existing user with the same username is left untouched
       (its password is not reset)
    2. The password is stored hashed

    Returns:
        True if the user was created, False if it already existed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
    ):
        self.uow = uow
        self.user_repo = user_repo
        self.password_hasher = password_hasher

    async def execute(self, username: str, password: str) -> Result[bool]:
        try:
            if await self.user_repo.get_by_username(username):
                return Return.ok(False)

            await self.user_repo.create(
                User(username=username, password=self.password_hasher.hash(password))
            )
            await self.uow.commit()
            return Return.ok(True)

        except SQLAlchemyError as e:
            await self.uow.rollback()
            return Return.err(store_failed("create default user", e))
