"""API router for user creation and lookup."""

from fastapi import APIRouter, Depends, HTTPException, status

from ....application.services.user_service import UsersService
from ....core.dependencies import get_users_service
from ....domain.errors import (
    DuplicateUserError,
    InvalidEmailError,
    StoreOperationError,
    UserNotFoundError,
    UserValidationError,
)
from ..schemas.user_schemas import UserCreateRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


def _store_failure(exc: StoreOperationError) -> HTTPException:
    if isinstance(exc.cause, UserNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc.cause))
    if isinstance(exc.cause, DuplicateUserError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc.cause))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Unable to reach the user store",
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreateRequest,
    users_service: UsersService = Depends(get_users_service),
) -> UserResponse:
    """Create a new user."""
    try:
        user = await users_service.create_user(request.to_user())
    except UserValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc.cause))
    except StoreOperationError as exc:
        raise _store_failure(exc) from exc

    return UserResponse.from_user(user)


@router.get("/{email}", response_model=UserResponse)
async def read_user_by_email(
    email: str,
    users_service: UsersService = Depends(get_users_service),
) -> UserResponse:
    """Fetch a user by email address."""
    try:
        user = await users_service.read_by_email(email)
    except InvalidEmailError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except StoreOperationError as exc:
        raise _store_failure(exc) from exc

    return UserResponse.from_user(user)
