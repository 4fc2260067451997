"""Authentication use cases"""
from .login import Login
from .get_current_user import GetCurrentUser
from .ensure_default_user import EnsureDefaultUser
from .dtos import LoginCommandDTO, UserResponseDTO

__all__ = [
    "Login",
    "GetCurrentUser",
    "EnsureDefaultUser",
    "LoginCommandDTO",
    "UserResponseDTO",
]
