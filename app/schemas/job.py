from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from app.schemas.company import CompanyResponse


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25, alias="companyHandle")

    class Config:
        extra = "forbid"
        populate_by_name = True


class JobUpdateRequest(BaseModel):
    """
    Schema for partially updating a job.

    id and companyHandle are not accepted: a job never moves between companies.
    """
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("title cannot be null")
        return v

    class Config:
        extra = "forbid"


class JobFilter(BaseModel):
    """
    Query parameters accepted by GET /jobs.

    - title: case-insensitive substring of the job title
    - minSalary: salary at least this much
    - hasEquity: true limits to jobs offering non-zero equity; false is no filter
    """
    title: Optional[str] = None
    min_salary: Optional[int] = Field(None, ge=0, alias="minSalary")
    has_equity: Optional[bool] = Field(None, alias="hasEquity")

    class Config:
        extra = "forbid"
        populate_by_name = True


class JobResponse(BaseModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company_handle: str = Field(..., alias="companyHandle")

    class Config:
        populate_by_name = True


class JobDetailResponse(BaseModel):
    """Job with its company in place of the handle"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company: CompanyResponse


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetailResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobResponse]
