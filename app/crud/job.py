"""
CRUD operations for jobs.

Implements the Repository pattern over hand-written SQL; list filtering and
partial updates are built by app.helpers.sql.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.crud.base import run_query
from app.crud.company import COMPANY_COLUMNS
from app.helpers.sql import JOB_FILTERS, next_placeholder, sql_for_partial_update
from app.schemas.job import JobCreateRequest

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# Job fields share their column names
JS_TO_SQL: Dict[str, str] = {}


def create(db: Session, job_data: JobCreateRequest) -> Dict[str, Any]:
    """
    Create a job for an existing company.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created job with its generated id

    Raises:
        ValidationError: If the company does not exist
    """
    company = run_query(
        db,
        "SELECT handle FROM companies WHERE handle = $1",
        [job_data.company_handle],
    )
    if not company:
        raise ValidationError(f"No company: {job_data.company_handle}")

    rows = run_query(
        db,
        f"""INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}""",
        [job_data.title, job_data.salary, job_data.equity, job_data.company_handle],
    )
    db.commit()

    job = rows[0]
    logger.info(f"Created job {job['id']}: {job['title']} ({job['companyHandle']})")
    return job


def find_all(db: Session, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    List jobs ordered by title, optionally filtered.

    Args:
        db: Database session
        filters: Any of title, minSalary, hasEquity

    Returns:
        Matching jobs; all jobs when no filter applies
    """
    where = JOB_FILTERS.build(filters)
    return run_query(
        db,
        f"SELECT {JOB_COLUMNS} FROM jobs{where.where()} ORDER BY title, id",
        where.values,
    )


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Retrieve a job with its company nested in place of the handle.

    Raises:
        NotFoundError: If the job does not exist
    """
    rows = run_query(db, f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1", [job_id])
    if not rows:
        raise NotFoundError(f"No job: {job_id}")

    job = rows[0]
    company = run_query(
        db,
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        [job.pop("companyHandle")],
    )
    job["company"] = company[0]
    return job


def update(db: Session, job_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Partially update a job's title, salary or equity.

    Raises:
        ValidationError: If data is empty
        NotFoundError: If the job does not exist
    """
    set_clause = sql_for_partial_update(data, JS_TO_SQL)
    rows = run_query(
        db,
        f"""UPDATE jobs
            SET {set_clause.clause}
            WHERE id = {next_placeholder(set_clause)}
            RETURNING {JOB_COLUMNS}""",
        [*set_clause.values, job_id],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return rows[0]


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If the job does not exist
    """
    rows = run_query(db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
