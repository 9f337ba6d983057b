"""User Routes — account creation and lookup.

Invariants:
    - Usernames are unique: create checks find_by_username first (409 on clash)
    - Responses never include the password
"""

from fastapi import APIRouter, Depends, status

from staffgrid.api.dependencies import get_user_repository
from staffgrid.core.domain_types import UserId
from staffgrid.core.errors import DuplicateUsernameError, ResourceNotFoundError
from staffgrid.core.repository_protocols import UserRepository
from staffgrid.schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, repo: UserRepository = Depends(get_user_repository),
):
    if await repo.find_by_username(body.username) is not None:
        raise DuplicateUsernameError(body.username)
    return UserResponse.from_entity(await repo.create(body.model_dump()))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, repo: UserRepository = Depends(get_user_repository),
):
    user = await repo.get(UserId(user_id))
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return UserResponse.from_entity(user)
