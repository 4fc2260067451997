"""Session authentication helpers

The logged-in user's ID is kept in the signed session cookie under SESSION_USER_KEY.
"""

from typing import Optional
from fastapi import Request
from libs.result import Error
from goldbill.api.error import ClientError

SESSION_USER_KEY = "user_id"


def session_user_id(request: Request) -> Optional[str]:
    return request.session.get(SESSION_USER_KEY)


async def require_login(request: Request) -> None:
    """
    Dependency guarding every non-auth route

    Skipped when the application runs with AUTH_DISABLED.
    """
    if request.app.state.config.AUTH_DISABLED:
        return
    if not session_user_id(request):
        raise ClientError(Error(code="UNAUTHORIZED", message="Authentication required"))
