"""
CRUD operations for companies.

Statements are hand-written SQL; variable parts (filters, partial updates)
come from app.helpers.sql.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.crud.base import run_query
from app.helpers.sql import COMPANY_FILTERS, next_placeholder, sql_for_partial_update
from app.schemas.company import CompanyCreateRequest

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def create(db: Session, company_data: CompanyCreateRequest) -> Dict[str, Any]:
    """
    Create a company.

    Raises:
        ValidationError: If the handle or name is already taken
    """
    duplicate = run_query(
        db,
        "SELECT handle FROM companies WHERE handle = $1 OR name = $2",
        [company_data.handle, company_data.name],
    )
    if duplicate:
        raise ValidationError(f"Duplicate company: {company_data.handle}")

    rows = run_query(
        db,
        f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}""",
        [
            company_data.handle,
            company_data.name,
            company_data.description,
            company_data.num_employees,
            company_data.logo_url,
        ],
    )
    db.commit()

    logger.info(f"Created company {company_data.handle}")
    return rows[0]


def find_all(db: Session, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    List companies ordered by name, optionally filtered.

    Args:
        db: Database session
        filters: Any of nameLike, minEmployees, maxEmployees

    Raises:
        ValidationError: If minEmployees is greater than maxEmployees
    """
    filters = filters or {}
    min_employees = filters.get("minEmployees")
    max_employees = filters.get("maxEmployees")
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise ValidationError("minEmployees cannot be greater than maxEmployees")

    where = COMPANY_FILTERS.build(filters)
    return run_query(
        db,
        f"SELECT {COMPANY_COLUMNS} FROM companies{where.where()} ORDER BY name",
        where.values,
    )


def get(db: Session, handle: str) -> Dict[str, Any]:
    """
    Retrieve a company along with its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    rows = run_query(
        db,
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        [handle],
    )
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    company = rows[0]
    company["jobs"] = run_query(
        db,
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle],
    )
    return company


def update(db: Session, handle: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Partially update a company.

    Args:
        db: Database session
        handle: Company to update
        data: Any of name, description, numEmployees, logoUrl

    Raises:
        ValidationError: If data is empty
        ValidationError: If name is taken by another company
        NotFoundError: If no company has this handle
    """
    set_clause = sql_for_partial_update(data, JS_TO_SQL)
    try:
        rows = run_query(
            db,
            f"""UPDATE companies
                SET {set_clause.clause}
                WHERE handle = {next_placeholder(set_clause)}
                RETURNING {COMPANY_COLUMNS}""",
            [*set_clause.values, handle],
        )
    except IntegrityError:
        db.rollback()
        raise ValidationError(f"Duplicate company name: {data.get('name')}")
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Updated company {handle}: {', '.join(data)}")
    return rows[0]


def remove(db: Session, handle: str) -> None:
    """
    Delete a company and, by cascade, its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    rows = run_query(
        db,
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        [handle],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Deleted company {handle}")
