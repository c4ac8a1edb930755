"""
Job API Routes
"""
from fastapi import APIRouter, Depends, Request, status

from app.dependencies import ensure_admin, get_job_repository
from app.repositories.job_repository import JobRepository
from app.schemas.common import DeleteResponse
from app.schemas.job import (
    JobCreate,
    JobUpdate,
    JobEnvelope,
    JobListResponse,
    JobFilterParams,
)
from app.utils.validators import parse_query_filters

router = APIRouter()


def job_filters(request: Request) -> JobFilterParams:
    return parse_query_filters(request.query_params, JobFilterParams)


@router.get("", response_model=JobListResponse)
def list_jobs(
    filters: JobFilterParams = Depends(job_filters),
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    채용공고 목록 조회

    Optional filters: title (case-insensitive substring), minSalary,
    hasEquity (true / false). Authorization required: none
    """
    return {"jobs": jobs.find_all(filters.title, filters.min_salary, filters.has_equity)}


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(
    job_id: int,
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    채용공고 상세 조회
    """
    return {"job": jobs.get(job_id)}


@router.post(
    "",
    response_model=JobEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
def create_job(
    request: JobCreate,
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    채용공고 등록 (Admin only)
    """
    return {"job": jobs.create(request.model_dump(by_alias=True))}


@router.patch(
    "/{job_id}",
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def update_job(
    job_id: int,
    request: JobUpdate,
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    채용공고 수정 (Admin only)

    Fields can be {title, salary, equity}; id and company never change.
    """
    return {"job": jobs.update(job_id, request.model_dump(exclude_unset=True))}


@router.delete(
    "/{job_id}",
    response_model=DeleteResponse,
    dependencies=[Depends(ensure_admin)],
)
def delete_job(
    job_id: int,
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    채용공고 삭제 (Admin only)
    """
    jobs.remove(job_id)
    return {"deleted": job_id}
