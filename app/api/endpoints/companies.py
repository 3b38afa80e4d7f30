"""
Company endpoints.

Reads are public; creating, updating and deleting companies requires an admin.
"""

from typing import Annotated
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin
from app.crud import company as company_crud
from app.schemas.common import DeletedResponse
from app.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyFilter,
    CompanyListEnvelope,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("/", status_code=201, response_model=CompanyEnvelope, dependencies=[Depends(ensure_admin)])
def create_company(request: CompanyCreateRequest, db: Session = Depends(get_db)):
    """Create a company. Admin only."""
    company = company_crud.create(db, request)
    return {"company": company}


@router.get("/", response_model=CompanyListEnvelope)
def list_companies(
    filters: Annotated[CompanyFilter, Query()],
    db: Session = Depends(get_db)
):
    """
    List companies, optionally filtered.

    Query parameters (all optional):
    - nameLike: case-insensitive substring of the company name
    - minEmployees / maxEmployees: inclusive bounds on headcount
    """
    criteria = filters.model_dump(by_alias=True, exclude_none=True)
    return {"companies": company_crud.find_all(db, criteria)}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company and its jobs."""
    return {"company": company_crud.get(db, handle)}


@router.patch("/{handle}", response_model=CompanyEnvelope, dependencies=[Depends(ensure_admin)])
def update_company(handle: str, request: CompanyUpdateRequest, db: Session = Depends(get_db)):
    """
    Update any of name, description, numEmployees, logoUrl. Admin only.

    Fields left out of the body are unchanged; explicit nulls clear nullable fields.
    """
    data = request.model_dump(by_alias=True, exclude_unset=True)
    return {"company": company_crud.update(db, handle, data)}


@router.delete("/{handle}", response_model=DeletedResponse, dependencies=[Depends(ensure_admin)])
def delete_company(handle: str, db: Session = Depends(get_db)):
    """Delete a company and its jobs. Admin only."""
    company_crud.remove(db, handle)
    return {"deleted": handle}
