"""
Authentication Service
"""
from typing import Any, Dict

from app.core.logging import logger
from app.core.security import create_token
from app.repositories.user_repository import UserRepository


class AuthService:
    """Login and self-registration, both returning a signed token"""

    def __init__(self, users: UserRepository):
        self.users = users

    def login(self, username: str, password: str) -> str:
        """Verify credentials and return a token (UnauthorizedError otherwise)"""
        user = self.users.authenticate(username, password)
        logger.info(f"User logged in: {username}")
        return create_token(user["username"], user["isAdmin"])

    def register(self, data: Dict[str, Any]) -> str:
        """Register a regular (non-admin) user and return a token"""
        user = self.users.register({**data, "isAdmin": False})
        logger.info(f"User registered: {user['username']}")
        return create_token(user["username"], user["isAdmin"])
