from .unit_of_work import SqlAlchemyUnitOfWork
from .password_hasher import ScryptPasswordHasher

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ScryptPasswordHasher",
]
