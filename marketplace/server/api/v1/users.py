"""
User API Endpoints.

Current-user lookup, username availability and admin role assignment.
"""

from fastapi import APIRouter, Response, status

from marketplace.core.logging_config import get_logger
from marketplace.core.models.io import RoleUpdate, UsernameExists, UserReturn
from marketplace.server.services.deps import AdminUserDep, CurrentUserDep, UserServiceDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/me",
    response_model=UserReturn,
    summary="Get Current User",
    description="Return the account behind the bearer token.",
    responses={401: {"description": "Missing or invalid token"}},
)
async def get_me(user: CurrentUserDep) -> UserReturn:
    return UserReturn.model_validate(user.user)


@router.get(
    "/exists/{username}",
    response_model=UsernameExists,
    summary="Check Username",
    description="Report whether a username is already registered.",
)
async def username_exists(username: str, users: UserServiceDep) -> UsernameExists:
    return UsernameExists(exists=await users.username_exists(username))


@router.put(
    "/{user_id}/role",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Assign Role",
    description="Assign a role to a user. Admin only.",
    responses={
        204: {"description": "Role assigned"},
        403: {"description": "Caller is not an admin"},
        404: {"description": "User not found"},
    },
)
async def update_role(user_id: int, body: RoleUpdate, admin: AdminUserDep, users: UserServiceDep) -> Response:
    """
    Assign a role to a user.

    - **user_id**: Target user.
    - **role**: ``user`` or ``admin``.
    """
    logger.info(f"Admin {admin.id} assigning role '{body.role.value}' to user {user_id}")
    await users.update_role_for_user(user_id, body.role)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
