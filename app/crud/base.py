"""
Execution of hand-built SQL against the injected session.

Statements are written with PostgreSQL positional placeholders ($1..$n), the
form produced by app.helpers.sql. They are bound through SQLAlchemy text()
so the same statement runs on any driver.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")


def to_named_binds(sql: str, values: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite $n placeholders as :p<n> binds.

    Raises:
        ValueError: If the placeholder count and the number of values differ
    """
    numbers = {int(n) for n in _PLACEHOLDER.findall(sql)}
    if numbers != set(range(1, len(values) + 1)):
        raise ValueError(
            f"Statement uses placeholders {sorted(numbers)} but {len(values)} values were given"
        )
    params = {f"p{i}": value for i, value in enumerate(values, start=1)}
    return _PLACEHOLDER.sub(r":p\1", sql), params


def run_query(db: Session, sql: str, values: Optional[Sequence[Any]] = None) -> List[Dict[str, Any]]:
    """
    Execute a statement and return its rows as dicts.

    Args:
        db: Database session
        sql: Statement with $1..$n placeholders
        values: Values for the placeholders, in order

    Returns:
        Result rows (empty for statements without RETURNING)
    """
    statement, params = to_named_binds(sql, values or [])

    if db.get_bind().dialect.name == "sqlite":
        # SQLite has no ILIKE; its LIKE is already case-insensitive for ASCII
        statement = statement.replace(" ILIKE ", " LIKE ")

    logger.debug(f"SQL: {statement} | params: {params}")
    result = db.execute(text(statement), params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
