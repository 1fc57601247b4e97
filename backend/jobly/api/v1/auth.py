"""
Authentication API Routes
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.schemas.user import RegisterRequest, LoginRequest, TokenResponse
from jobly.services.auth_service import AuthService

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Exchange username/password for a token
    """
    token = AuthService(db).authenticate_user(request.username, request.password)
    return TokenResponse(token=token)


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a non-admin user and return a token for them
    """
    token = AuthService(db).register_user(request)
    return TokenResponse(token=token)
