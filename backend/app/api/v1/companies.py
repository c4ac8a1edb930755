"""
Company API Routes
"""
from fastapi import APIRouter, Depends, Request, status

from app.dependencies import ensure_admin, get_company_repository, get_job_repository
from app.repositories.company_repository import CompanyRepository
from app.repositories.job_repository import JobRepository
from app.schemas.common import DeleteResponse
from app.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyEnvelope,
    CompanyDetailEnvelope,
    CompanyListResponse,
    CompanyFilterParams,
)
from app.utils.validators import parse_query_filters

router = APIRouter()


def company_filters(request: Request) -> CompanyFilterParams:
    return parse_query_filters(request.query_params, CompanyFilterParams)


@router.post(
    "",
    response_model=CompanyEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_admin)],
)
def create_company(
    request: CompanyCreate,
    companies: CompanyRepository = Depends(get_company_repository),
):
    """
    회사 등록 (Admin only)
    """
    return {"company": companies.create(request.model_dump(by_alias=True))}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    filters: CompanyFilterParams = Depends(company_filters),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """
    회사 목록 조회

    Optional filters: nameLike (case-insensitive substring), minEmployees,
    maxEmployees. Authorization required: none
    """
    return {
        "companies": companies.find_all(
            filters.name_like, filters.min_employees, filters.max_employees
        )
    }


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(
    handle: str,
    companies: CompanyRepository = Depends(get_company_repository),
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    회사 상세 조회 (with jobs)
    """
    company = companies.get(handle)
    company["jobs"] = jobs.find_by_company(handle)
    return {"company": company}


@router.patch(
    "/{handle}",
    response_model=CompanyEnvelope,
    dependencies=[Depends(ensure_admin)],
)
def update_company(
    handle: str,
    request: CompanyUpdate,
    companies: CompanyRepository = Depends(get_company_repository),
):
    """
    회사 정보 수정 (Admin only)

    Only the supplied fields change.
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    return {"company": companies.update(handle, data)}


@router.delete(
    "/{handle}",
    response_model=DeleteResponse,
    dependencies=[Depends(ensure_admin)],
)
def delete_company(
    handle: str,
    companies: CompanyRepository = Depends(get_company_repository),
):
    """
    회사 삭제 (Admin only)
    """
    companies.remove(handle)
    return {"deleted": handle}
