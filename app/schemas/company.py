from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class CompanyCreateRequest(BaseModel):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    class Config:
        extra = "forbid"
        populate_by_name = True


class CompanyUpdateRequest(BaseModel):
    """Schema for partially updating a company. The handle cannot change."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    @field_validator("name", "description")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    class Config:
        extra = "forbid"
        populate_by_name = True


class CompanyFilter(BaseModel):
    """Query parameters accepted by GET /companies"""
    name_like: Optional[str] = Field(None, alias="nameLike")
    min_employees: Optional[int] = Field(None, ge=0, alias="minEmployees")
    max_employees: Optional[int] = Field(None, ge=0, alias="maxEmployees")

    class Config:
        extra = "forbid"
        populate_by_name = True


class CompanyResponse(BaseModel):
    """Schema for company response"""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    class Config:
        populate_by_name = True


class CompanyJob(BaseModel):
    """A job as listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None


class CompanyDetailResponse(CompanyResponse):
    """Company with the jobs it has posted"""
    jobs: List[CompanyJob] = []


class CompanyEnvelope(BaseModel):
    company: CompanyResponse


class CompanyDetailEnvelope(BaseModel):
    company: CompanyDetailResponse


class CompanyListEnvelope(BaseModel):
    companies: List[CompanyResponse]
