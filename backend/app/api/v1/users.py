"""
User API Routes
"""
from fastapi import APIRouter, Depends, status

from app.core.security import create_token
from app.dependencies import (
    ensure_admin,
    ensure_admin_or_self,
    get_application_repository,
    get_user_repository,
)
from app.repositories.application_repository import ApplicationRepository
from app.repositories.user_repository import UserRepository
from app.schemas.common import DeleteResponse
from app.schemas.user import (
    ApplicationResponse,
    UserCreate,
    UserDetailEnvelope,
    UserEnvelope,
    UserListResponse,
    UserTokenResponse,
    UserUpdate,
)

router = APIRouter()


@router.post(
    "",
    response_model=UserTokenResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
def create_user(
    request: UserCreate,
    users: UserRepository = Depends(get_user_repository),
):
    """
    사용자 추가 (Admin only)

    Not the registration endpoint: admins add users here, possibly other
    admins. Returns the new user and a token for them.
    """
    user = users.register(request.model_dump(by_alias=True))
    token = create_token(user["username"], user["isAdmin"])
    return {"user": user, "token": token}


@router.get("", response_model=UserListResponse, dependencies=[Depends(ensure_admin)])
def list_users(
    users: UserRepository = Depends(get_user_repository),
    applications: ApplicationRepository = Depends(get_application_repository),
):
    """
    사용자 목록 조회 (Admin only), each with applied job ids
    """
    return {
        "users": [
            {**user, "jobs": applications.job_ids_for(user["username"])}
            for user in users.find_all()
        ]
    }


@router.get(
    "/{username}",
    response_model=UserDetailEnvelope,
    dependencies=[Depends(ensure_admin_or_self)],
)
def get_user(
    username: str,
    users: UserRepository = Depends(get_user_repository),
    applications: ApplicationRepository = Depends(get_application_repository),
):
    """
    사용자 정보 조회 (Admin or self)
    """
    user = users.get(username)
    return {"user": {**user, "jobs": applications.job_ids_for(username)}}


@router.patch(
    "/{username}",
    response_model=UserEnvelope,
    dependencies=[Depends(ensure_admin_or_self)],
)
def update_user(
    username: str,
    request: UserUpdate,
    users: UserRepository = Depends(get_user_repository),
):
    """
    사용자 정보 수정 (Admin or self)

    Data can include {firstName, lastName, password, email}.
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    return {"user": users.update(username, data)}


@router.delete(
    "/{username}",
    response_model=DeleteResponse,
    dependencies=[Depends(ensure_admin_or_self)],
)
def delete_user(
    username: str,
    users: UserRepository = Depends(get_user_repository),
):
    """
    사용자 삭제 (Admin or self)
    """
    users.remove(username)
    return {"deleted": username}


@router.post(
    "/{username}/jobs/{job_id}",
    response_model=ApplicationResponse,
    dependencies=[Depends(ensure_admin_or_self)],
)
def apply_to_job(
    username: str,
    job_id: int,
    applications: ApplicationRepository = Depends(get_application_repository),
):
    """
    채용공고 지원 (Admin or self)
    """
    return {"applied": applications.apply(username, job_id)}
