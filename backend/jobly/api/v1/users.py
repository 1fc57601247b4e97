"""
User API Routes
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.dependencies import require_admin, require_admin_or_self
from jobly.repositories.user_repository import UserRepository
from jobly.schemas.base import DeletedResponse
from jobly.schemas.user import (
    AppliedResponse,
    UserCreate,
    UserUpdate,
    UserResponse,
    UserDetailResponse,
    UserListResponse,
    UserTokenResponse,
)
from jobly.services.auth_service import AuthService

router = APIRouter()


@router.post(
    "",
    response_model=UserTokenResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_user(
    request: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Add a user, possibly an admin (Admin only); returns a token for them
    """
    user = UserRepository(db).register(request)
    return UserTokenResponse(user=user, token=AuthService.create_token(user))


@router.get(
    "",
    response_model=UserListResponse,
    dependencies=[Depends(require_admin)],
)
def list_users(db: Session = Depends(get_db)):
    """
    List all users (Admin only)
    """
    return UserListResponse(users=UserRepository(db).find_all())


@router.get(
    "/{username}",
    response_model=UserDetailResponse,
    dependencies=[Depends(require_admin_or_self)],
)
def get_user(
    username: str,
    db: Session = Depends(get_db)
):
    """
    User detail with applied job ids (Admin or same user)
    """
    return UserDetailResponse(user=UserRepository(db).get(username))


@router.patch(
    "/{username}",
    response_model=UserResponse,
    dependencies=[Depends(require_admin_or_self)],
)
def update_user(
    username: str,
    request: UserUpdate,
    db: Session = Depends(get_db)
):
    """
    Partially update a user (Admin or same user)
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    user = UserRepository(db).update(username, data)
    return UserResponse(user=user)


@router.delete(
    "/{username}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_admin_or_self)],
)
def delete_user(
    username: str,
    db: Session = Depends(get_db)
):
    """
    Delete a user (Admin or same user)
    """
    UserRepository(db).remove(username)
    return DeletedResponse(deleted=username)


@router.post(
    "/{username}/jobs/{job_id}",
    response_model=AppliedResponse,
    dependencies=[Depends(require_admin_or_self)],
)
def apply_to_job(
    username: str,
    job_id: int,
    db: Session = Depends(get_db)
):
    """
    Apply to a job (Admin or same user)
    """
    UserRepository(db).apply_to_job(username, job_id)
    return AppliedResponse(applied=job_id)
