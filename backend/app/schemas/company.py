"""
Company Schemas
"""
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from typing import Annotated, Optional, List

from app.schemas.job import JobResponse
from app.utils.validators import blank_to_none, check_http_url

# lowercase letters, digits and dashes, e.g. "anderson-arias-morrow"
HANDLE_PATTERN = r"^[a-z0-9-]+$"

LogoUrl = Annotated[Optional[str], Field(max_length=500), AfterValidator(check_http_url)]
QueryInt = Annotated[Optional[int], BeforeValidator(blank_to_none)]


class CompanyBase(BaseModel):
    """Company base schema"""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")


class CompanyCreate(CompanyBase):
    """Company creation schema"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    handle: str = Field(..., min_length=1, max_length=25, pattern=HANDLE_PATTERN)
    logo_url: LogoUrl = Field(None, alias="logoUrl")


class CompanyUpdate(BaseModel):
    """Company update schema (partial)"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees")
    logo_url: LogoUrl = Field(None, alias="logoUrl")


class CompanyResponse(CompanyBase):
    """Company response schema"""
    handle: str


class CompanyDetail(CompanyResponse):
    """Company with its jobs"""
    jobs: List[JobResponse] = []


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: List[CompanyResponse]


class CompanyFilterParams(BaseModel):
    """Query string filters for company search"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name_like: Optional[str] = Field(None, alias="nameLike")
    min_employees: QueryInt = Field(None, ge=0, alias="minEmployees")
    max_employees: QueryInt = Field(None, ge=0, alias="maxEmployees")

    @model_validator(mode="after")
    def check_employee_range(self):
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise ValueError("minEmployees cannot be greater than maxEmployees")
        return self
