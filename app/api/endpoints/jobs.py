from typing import Annotated
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin
from app.crud import job as job_crud
from app.schemas.common import DeletedResponse
from app.schemas.job import (
    JobCreateRequest,
    JobDetailEnvelope,
    JobEnvelope,
    JobFilter,
    JobListEnvelope,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post("/", status_code=201, response_model=JobEnvelope, dependencies=[Depends(ensure_admin)])
def create_job(request: JobCreateRequest, db: Session = Depends(get_db)):
    """
    Create a new job posting. Admin only.

    The company referenced by companyHandle must already exist.
    """
    return {"job": job_crud.create(db, request)}


@router.get("/", response_model=JobListEnvelope)
def list_jobs(
    filters: Annotated[JobFilter, Query()],
    db: Session = Depends(get_db)
):
    """
    List jobs, optionally filtered.

    Args:
        title: Case-insensitive substring of the job title
        minSalary: Only jobs paying at least this much
        hasEquity: If true, only jobs offering non-zero equity.
            If false or omitted, equity is not considered.

    Unknown parameters are rejected with 400.
    """
    criteria = filters.model_dump(by_alias=True, exclude_none=True)
    return {"jobs": job_crud.find_all(db, criteria)}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID, including its company.
    """
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope, dependencies=[Depends(ensure_admin)])
def update_job(job_id: int, request: JobUpdateRequest, db: Session = Depends(get_db)):
    """
    Update any of title, salary, equity. Admin only.
    """
    data = request.model_dump(by_alias=True, exclude_unset=True)
    return {"job": job_crud.update(db, job_id, data)}


@router.delete("/{job_id}", response_model=DeletedResponse, dependencies=[Depends(ensure_admin)])
def delete_job(job_id: int, db: Session = Depends(get_db)):
    """
    Delete a job by ID. Admin only.
    """
    job_crud.remove(db, job_id)
    return {"deleted": job_id}
