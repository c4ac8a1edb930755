"""
Dependency Injection
"""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError

from app.core.database import get_db
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import decode_token
from app.repositories.application_repository import ApplicationRepository
from app.repositories.company_repository import CompanyRepository
from app.repositories.job_repository import JobRepository
from app.repositories.user_repository import UserRepository
from app.schemas.user import CurrentUser
from app.services.auth_service import AuthService


# Security (anonymous requests are allowed through to the route checks)
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[CurrentUser]:
    """
    User from the bearer token, or None for anonymous requests.

    A token that is present but invalid is rejected outright.
    """
    if credentials is None:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError as exc:
        raise UnauthorizedError("Invalid token") from exc

    username = payload.get("sub")
    if not username:
        raise UnauthorizedError("Invalid token")
    return CurrentUser(username=username, is_admin=bool(payload.get("isAdmin", False)))


def ensure_logged_in(
    current_user: Optional[CurrentUser] = Depends(get_current_user),
) -> CurrentUser:
    """Require any authenticated user"""
    if current_user is None:
        raise UnauthorizedError()
    return current_user


def ensure_admin(current_user: CurrentUser = Depends(ensure_logged_in)) -> CurrentUser:
    """Require an admin"""
    if not current_user.is_admin:
        raise ForbiddenError("Admin privileges required")
    return current_user


def ensure_admin_or_self(
    username: str,
    current_user: CurrentUser = Depends(ensure_logged_in),
) -> CurrentUser:
    """Require an admin or the user named in the path"""
    if not (current_user.is_admin or current_user.username == username):
        raise ForbiddenError("Must be admin or the same user")
    return current_user


# Repositories

def get_company_repository(db: Session = Depends(get_db)) -> CompanyRepository:
    return CompanyRepository(db)


def get_job_repository(db: Session = Depends(get_db)) -> JobRepository:
    return JobRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_application_repository(db: Session = Depends(get_db)) -> ApplicationRepository:
    return ApplicationRepository(db)


def get_auth_service(users: UserRepository = Depends(get_user_repository)) -> AuthService:
    return AuthService(users)
