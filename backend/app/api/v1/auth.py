"""
Authentication API Routes
"""
from fastapi import APIRouter, Depends, status

from app.dependencies import get_auth_service
from app.schemas.user import RegisterRequest, LoginRequest, TokenResponse
from app.services.auth_service import AuthService

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
def login(
    request: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """
    로그인

    Exchange username/password for a token. Authorization required: none
    """
    return {"token": auth.login(request.username, request.password)}


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """
    회원가입

    Register a regular user and return a token. Authorization required: none
    """
    return {"token": auth.register(request.model_dump(by_alias=True))}
