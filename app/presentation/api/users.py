"""User listing API endpoints"""

import logging
from typing import Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.use_cases.auth_use_cases import ListUsersUseCase
from app.core.dependencies import get_list_users_use_case
from app.presentation.schemas.auth_schemas import UserListItem, UsersListResponse
from app.presentation.schemas.common_schemas import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/users",
    response_model=UsersListResponse,
    summary="List users",
    description="List all registered users; passwords are never included",
    responses={500: {"model": ErrorResponse}},
)
async def list_users(
    list_users_use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> Union[UsersListResponse, JSONResponse]:
    """List all users"""
    try:
        users = await list_users_use_case.execute()

        return UsersListResponse(
            users=[UserListItem.from_projection(user) for user in users],
            count=len(users),
        )

    except Exception:
        logger.exception("Error fetching users")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(message="An error occurred while fetching users").model_dump(),
        )
