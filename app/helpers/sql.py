"""
Dynamic SQL fragment builders.

Two stateless builders produce parameterized fragments for the data-access
layer:
- sql_for_partial_update: a SET clause for an arbitrary subset of fields
- FilterPredicateBuilder: a WHERE clause from optional search criteria

Both emit PostgreSQL-style positional placeholders ($1..$n). Executing the
fragment is the caller's job.
"""

import enum
from dataclasses import dataclass
from typing import Any, List, Mapping, NamedTuple, Optional, Tuple

from app.core.exceptions import ValidationError


class QueryFragment(NamedTuple):
    """A clause with $1..$n placeholders and the values bound to them."""
    clause: str
    values: List[Any]

    def where(self) -> str:
        """Render as an optional WHERE clause (empty when unconstrained)."""
        return f" WHERE {self.clause}" if self.clause else ""


def next_placeholder(fragment: QueryFragment) -> str:
    """Placeholder that continues the numbering after `fragment`."""
    return f"${len(fragment.values) + 1}"


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None
) -> QueryFragment:
    """
    Build the SET clause of a partial UPDATE.

    Args:
        data_to_update: Field name to new value. A None value sets the
            column to NULL; fields that should stay unchanged are absent.
        js_to_sql: Field name to column name for fields whose column is
            named differently. Unlisted fields use their own name.

    Returns:
        QueryFragment such as ('"first_name"=$1, "age"=$2', ['Aliya', 32])

    Raises:
        ValidationError: If data_to_update is empty
    """
    if not data_to_update:
        raise ValidationError("No data")

    js_to_sql = js_to_sql or {}
    cols = []
    values = []
    for idx, (field_name, value) in enumerate(data_to_update.items(), start=1):
        column = js_to_sql.get(field_name, field_name)
        cols.append(f'"{column}"=${idx}')
        values.append(value)

    return QueryFragment(", ".join(cols), values)


class FilterKind(str, enum.Enum):
    """
    How a filter criterion compares against its column.

    - SUBSTRING: case-insensitive, unanchored match
    - NUMERIC_MIN: column >= value
    - NUMERIC_MAX: column <= value
    - FLAG: when true, column > 0 (binds no value)
    """
    SUBSTRING = "substring"
    NUMERIC_MIN = "numeric_min"
    NUMERIC_MAX = "numeric_max"
    FLAG = "flag"


@dataclass(frozen=True)
class FilterField:
    """A recognized filter key, the column it targets and its comparison."""
    key: str
    column: str
    kind: FilterKind


class FilterPredicateBuilder:
    """
    Builds a WHERE clause for one searchable entity.

    Fields are walked in declaration order, not input order, so a given
    criteria shape always yields the same SQL text. Criteria keys are
    assumed to be validated by the caller.
    """

    def __init__(self, fields: Tuple[FilterField, ...]):
        self.fields = fields

    def build(self, criteria: Optional[Mapping[str, Any]] = None) -> QueryFragment:
        """
        Compose the present criteria into one conjunction.

        Args:
            criteria: Any subset of the recognized keys. Keys that are
                absent or None add no predicate.

        Returns:
            QueryFragment whose clause is empty when nothing constrains
            the query
        """
        criteria = criteria or {}
        predicates: List[str] = []
        values: List[Any] = []

        for field in self.fields:
            value = criteria.get(field.key)
            if value is None:
                continue

            if field.kind is FilterKind.FLAG:
                if value:
                    predicates.append(f"{field.column} > 0")
                continue

            # Numbered on emission so flags never leave gaps
            placeholder = f"${len(values) + 1}"
            if field.kind is FilterKind.SUBSTRING:
                predicates.append(f"{field.column} ILIKE {placeholder}")
                values.append(f"%{value}%")
            elif field.kind is FilterKind.NUMERIC_MIN:
                predicates.append(f"{field.column} >= {placeholder}")
                values.append(value)
            elif field.kind is FilterKind.NUMERIC_MAX:
                predicates.append(f"{field.column} <= {placeholder}")
                values.append(value)

        return QueryFragment(" AND ".join(predicates), values)


JOB_FILTERS = FilterPredicateBuilder((
    FilterField("title", "title", FilterKind.SUBSTRING),
    FilterField("minSalary", "salary", FilterKind.NUMERIC_MIN),
    FilterField("hasEquity", "equity", FilterKind.FLAG),
))

COMPANY_FILTERS = FilterPredicateBuilder((
    FilterField("nameLike", "name", FilterKind.SUBSTRING),
    FilterField("minEmployees", "num_employees", FilterKind.NUMERIC_MIN),
    FilterField("maxEmployees", "num_employees", FilterKind.NUMERIC_MAX),
))

