"""
Authentication API Endpoints.

Registration and login. Login exchanges a username/password pair for a
bearer access token used by every authenticated endpoint.
"""

from fastapi import APIRouter, status

from marketplace.core.logging_config import get_logger
from marketplace.core.models.io import CreatedId, TokenReturn, UserLogin, UserRegister
from marketplace.server.services.deps import UserServiceDep

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=CreatedId,
    status_code=status.HTTP_201_CREATED,
    summary="Register Account",
    description="Create a new account with the default 'user' role.",
    responses={
        201: {"description": "Account created"},
        409: {"description": "Username or email already taken"},
    },
)
async def register(body: UserRegister, users: UserServiceDep) -> CreatedId:
    """
    Register a new account.

    - **username**: Unique login name.
    - **email**: Unique contact email.
    - **password**: Plain-text password; only its hash is stored.
    """
    return CreatedId(id=await users.create_user(body))


@router.post(
    "/login",
    response_model=TokenReturn,
    summary="Log In",
    description="Exchange credentials for a bearer access token.",
    responses={
        200: {"description": "Token issued"},
        401: {"description": "Invalid username or password"},
    },
)
async def login(body: UserLogin, users: UserServiceDep) -> TokenReturn:
    return await users.login(body.username, body.password)
