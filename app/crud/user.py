"""
CRUD operations for users.

Passwords are stored as bcrypt hashes and never returned.
"""

import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, UnauthorizedError, ValidationError
from app.core.security import get_password_hash, verify_password
from app.crud.base import run_query
from app.helpers.sql import next_placeholder, sql_for_partial_update
from app.schemas.user import UserNewRequest, UserRegisterRequest

logger = logging.getLogger(__name__)

USER_COLUMNS = (
    'username, first_name AS "firstName", last_name AS "lastName", '
    'email, is_admin AS "isAdmin"'
)

JS_TO_SQL = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


def authenticate(db: Session, username: str, password: str) -> Dict[str, Any]:
    """
    Check a username/password pair.

    Returns:
        The user (without password)

    Raises:
        UnauthorizedError: If the user is unknown or the password is wrong
    """
    rows = run_query(
        db,
        f"SELECT {USER_COLUMNS}, password FROM users WHERE username = $1",
        [username],
    )
    if rows:
        user = rows[0]
        hashed = user.pop("password")
        if verify_password(password, hashed):
            return user

    logger.info(f"Failed login for {username}")
    raise UnauthorizedError("Invalid username/password")


def register(db: Session, user_data: UserRegisterRequest) -> Dict[str, Any]:
    """
    Create a user. Admin status is only honoured for UserNewRequest.

    Raises:
        ValidationError: If the username is taken
    """
    duplicate = run_query(
        db,
        "SELECT username FROM users WHERE username = $1",
        [user_data.username],
    )
    if duplicate:
        raise ValidationError(f"Duplicate username: {user_data.username}")

    is_admin = user_data.is_admin if isinstance(user_data, UserNewRequest) else False
    rows = run_query(
        db,
        f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING {USER_COLUMNS}""",
        [
            user_data.username,
            get_password_hash(user_data.password),
            user_data.first_name,
            user_data.last_name,
            user_data.email,
            is_admin,
        ],
    )
    db.commit()

    logger.info(f"Registered user {user_data.username} (admin={is_admin})")
    return rows[0]


def find_all(db: Session) -> List[Dict[str, Any]]:
    """List all users ordered by username."""
    return run_query(db, f"SELECT {USER_COLUMNS} FROM users ORDER BY username")


def get(db: Session, username: str) -> Dict[str, Any]:
    """
    Retrieve a user with the ids of the jobs they applied to.

    Raises:
        NotFoundError: If the user does not exist
    """
    rows = run_query(db, f"SELECT {USER_COLUMNS} FROM users WHERE username = $1", [username])
    if not rows:
        raise NotFoundError(f"No user: {username}")

    user = rows[0]
    applications = run_query(
        db,
        "SELECT job_id FROM applications WHERE username = $1 ORDER BY job_id",
        [username],
    )
    user["jobs"] = [a["job_id"] for a in applications]
    return user


def update(db: Session, username: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Partially update a user. A new password is hashed before storage.

    Args:
        db: Database session
        username: User to update
        data: Any of firstName, lastName, password, email

    Raises:
        ValidationError: If data is empty
        NotFoundError: If the user does not exist
    """
    data = dict(data)
    if data.get("password") is not None:
        data["password"] = get_password_hash(data["password"])

    set_clause = sql_for_partial_update(data, JS_TO_SQL)
    rows = run_query(
        db,
        f"""UPDATE users
            SET {set_clause.clause}
            WHERE username = {next_placeholder(set_clause)}
            RETURNING {USER_COLUMNS}""",
        [*set_clause.values, username],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"Updated user {username}: {', '.join(data)}")
    return rows[0]


def remove(db: Session, username: str) -> None:
    """
    Delete a user and their applications.

    Raises:
        NotFoundError: If the user does not exist
    """
    rows = run_query(
        db,
        "DELETE FROM users WHERE username = $1 RETURNING username",
        [username],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No user: {username}")

    db.commit()
    logger.info(f"Deleted user {username}")


def apply_to_job(db: Session, username: str, job_id: int) -> None:
    """
    Record that a user applied to a job.

    Raises:
        NotFoundError: If the user or the job does not exist
        ValidationError: If the user already applied to this job
    """
    if not run_query(db, "SELECT id FROM jobs WHERE id = $1", [job_id]):
        raise NotFoundError(f"No job: {job_id}")
    if not run_query(db, "SELECT username FROM users WHERE username = $1", [username]):
        raise NotFoundError(f"No username: {username}")

    existing = run_query(
        db,
        "SELECT job_id FROM applications WHERE username = $1 AND job_id = $2",
        [username, job_id],
    )
    if existing:
        raise ValidationError(f"{username} already applied to job {job_id}")

    run_query(
        db,
        "INSERT INTO applications (job_id, username) VALUES ($1, $2)",
        [job_id, username],
    )
    db.commit()
    logger.info(f"{username} applied to job {job_id}")
