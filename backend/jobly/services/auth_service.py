"""
Authentication Service
"""
from sqlalchemy.orm import Session

from jobly.core.security import create_access_token
from jobly.repositories.user_repository import UserRepository
from jobly.schemas.user import RegisterRequest, UserCreate, UserRead


class AuthService:
    """Authentication service for user management"""
    
    def __init__(self, db: Session):
        self.users = UserRepository(db)
    
    def register_user(self, request: RegisterRequest) -> str:
        """
        Register a new (non-admin) user and return a token for them
        
        Raises:
            DuplicateError: if the username is already taken
        """
        user = self.users.register(UserCreate(**request.model_dump(), is_admin=False))
        return self.create_token(user)
    
    def authenticate_user(self, username: str, password: str) -> str:
        """
        Verify credentials and return a token
        
        Raises:
            UnauthorizedError: for bad credentials
        """
        user = self.users.authenticate(username, password)
        return self.create_token(user)
    
    @staticmethod
    def create_token(user: UserRead) -> str:
        """Token carrying the username and admin flag"""
        return create_access_token(user.username, user.is_admin)
