"""Auth API Routes

Session based login. A successful login stores the user ID in the signed
session cookie; logout clears it.
"""

from fastapi import APIRouter, Depends, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from goldbill.api.schemas.auth_request import LoginRequestSchema
from goldbill.api.security import SESSION_USER_KEY, session_user_id
from goldbill.app.use_cases.auth.dtos import LoginCommandDTO, UserResponseDTO
from goldbill.app.use_cases.auth.get_current_user import GetCurrentUser
from goldbill.app.use_cases.auth.login import Login
from goldbill.adapter.repositories.user_repository import SqlAlchemyUserRepository
from goldbill.adapter.services.password_hasher import ScryptPasswordHasher
from goldbill.depends import get_session
from goldbill.api.error import ClientError

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=UserResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVALID_CREDENTIALS",
                            "message": "Invalid username or password"
                        }
                    }
                }
            }
        }
    }
)
async def login(
    request: Request,
    body: LoginRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """Log in and start a session"""
    use_case = Login(SqlAlchemyUserRepository(session), ScryptPasswordHasher())
    result = await use_case.execute(LoginCommandDTO(username=body.username, password=body.password))

    if result.is_err():
        raise ClientError(result.error)

    request.session.clear()
    request.session[SESSION_USER_KEY] = result.value.id
    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(request: Request):
    request.session.clear()
    return {"message": "Logged out"}


@router.get(
    "/user",
    response_model=UserResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def current_user(
    request: Request,
    session: AsyncSession = Depends(get_session)
):
    """The logged-in user, or 401 when there is no valid session"""
    use_case = GetCurrentUser(SqlAlchemyUserRepository(session))
    result = await use_case.execute(session_user_id(request))

    if result.is_err():
        raise ClientError(result.error)

    return result.value
