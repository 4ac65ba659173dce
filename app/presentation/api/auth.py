"""Registration and login API endpoints"""

import logging
from typing import Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.use_cases.auth_use_cases import LoginUserUseCase, RegisterUserUseCase
from app.core.dependencies import get_login_use_case, get_register_use_case
from app.domain.exceptions import (
    FormValidationError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from app.presentation.schemas.auth_schemas import (
    LoginResponse,
    RegisterResponse,
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
)
from app.presentation.schemas.common_schemas import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _validation_error_response(errors: list[dict[str, str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationErrorResponse(errors=errors).model_dump(),  # type: ignore[arg-type]
    )


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a new user account after field validation and uniqueness checks",
    responses={
        400: {"model": ValidationErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def register(
    user_data: UserRegisterRequest,
    register_use_case: RegisterUserUseCase = Depends(get_register_use_case),
) -> Union[RegisterResponse, JSONResponse]:
    """Register a new user"""
    try:
        user = await register_use_case.execute(user_data.to_form())

        return RegisterResponse(user=UserResponse.from_projection(user))

    except FormValidationError as e:
        return _validation_error_response([error.to_dict() for error in e.errors])
    except UserAlreadyExistsError as e:
        logger.info(f"Registration rejected: {e.message}")
        return _validation_error_response(e.errors)
    except Exception:
        logger.exception("Registration error")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "An error occurred during registration"
        )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="User login",
    description="Authenticate with a username or email and password",
    responses={
        400: {"model": ValidationErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def login(
    credentials: UserLoginRequest,
    login_use_case: LoginUserUseCase = Depends(get_login_use_case),
) -> Union[LoginResponse, JSONResponse]:
    """Authenticate a user"""
    try:
        user = await login_use_case.execute(credentials.to_form())

        return LoginResponse(user=UserResponse.from_projection(user))

    except FormValidationError as e:
        return _validation_error_response([error.to_dict() for error in e.errors])
    except InvalidCredentialsError as e:
        return _error_response(status.HTTP_401_UNAUTHORIZED, e.message)
    except Exception:
        logger.exception("Login error")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "An error occurred during login")
