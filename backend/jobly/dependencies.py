"""
Dependency Injection
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from jobly.core.security import decode_access_token


# Security
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identity carried by a verified token"""
    username: str
    is_admin: bool


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CurrentUser:
    """
    Get current authenticated user from JWT token
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception
    
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        raise credentials_exception
    
    return CurrentUser(
        username=payload["sub"],
        is_admin=bool(payload.get("isAdmin", False)),
    )


async def require_admin(
    current_user: CurrentUser = Depends(get_current_user)
) -> CurrentUser:
    """Only admins may pass"""
    if not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin only")
    return current_user


async def require_admin_or_self(
    username: str,
    current_user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """Admins, or the user named in the path"""
    if not (current_user.is_admin or current_user.username == username):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin or same user only")
    return current_user
