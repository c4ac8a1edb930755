"""
Job Schemas
"""
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from typing import Annotated, Optional, List
from decimal import Decimal

from app.utils.validators import blank_to_none


class JobBase(BaseModel):
    """Job base schema"""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)


class JobCreate(JobBase):
    """Job creation schema"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    company_handle: str = Field(..., min_length=1, max_length=25, alias="companyHandle")


class JobUpdate(BaseModel):
    """Job update schema (id and company cannot change)"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)


class JobResponse(JobBase):
    """Job response schema"""
    id: int
    company_handle: str = Field(..., alias="companyHandle")


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListResponse(BaseModel):
    jobs: List[JobResponse]


class JobFilterParams(BaseModel):
    """Query string filters for job search"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: Optional[str] = None
    min_salary: Annotated[Optional[int], BeforeValidator(blank_to_none)] = Field(
        None, ge=0, alias="minSalary"
    )
    has_equity: bool = Field(False, alias="hasEquity")

    @field_validator("has_equity", mode="before")
    @classmethod
    def strict_boolean(cls, value):
        # Query strings only; "1", "yes", "on" etc. are rejected
        if isinstance(value, bool):
            return value
        if value in ("true", "false"):
            return value == "true"
        raise ValueError("hasEquity must be true or false")
