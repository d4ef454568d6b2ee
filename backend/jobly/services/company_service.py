"""Data access for companies.

Every function takes the request's database session as ``db`` and works
in the API's camelCase field names; column translation happens here.
"""

import logging
from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.database import run_query
from jobly.errors import BadRequestError, ConflictError, NotFoundError
from jobly.services.job_service import format_equity
from jobly.utils.sql import escape_like, sql_for_partial_update

logger = logging.getLogger(__name__)

JS_TO_SQL = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_COLUMNS = """handle,
       name,
       description,
       num_employees AS "numEmployees",
       logo_url AS "logoUrl\""""

BASE_QUERY = f"SELECT {COMPANY_COLUMNS} FROM companies"


def build_filter_query(
    base_query: str, filters: Mapping[str, Any] | None = None
) -> tuple[str, list[Any]]:
    """Append the WHERE and ORDER BY clauses for a company search.

    Recognised filters are ``minEmployees``, ``maxEmployees`` and ``name``
    (case-insensitive substring). Predicates are added in that order,
    whatever the order of ``filters``, and a filter with a falsy value adds
    none. Results are always ordered by name.

    Raises BadRequestError if ``minEmployees`` exceeds ``maxEmployees``.
    """
    filters = filters or {}
    min_employees = filters.get("minEmployees")
    max_employees = filters.get("maxEmployees")
    name = filters.get("name")

    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("Max employees must be greater than min employees")

    values: list[Any] = []
    conditions: list[str] = []

    def bind(value: Any) -> str:
        values.append(value)
        return f"${len(values)}"

    if min_employees:
        conditions.append(f"num_employees >= {bind(min_employees)}")
    if max_employees:
        conditions.append(f"num_employees <= {bind(max_employees)}")
    if name:
        pattern = f"%{escape_like(name.casefold())}%"
        conditions.append(f"casefold(name) LIKE {bind(pattern)} ESCAPE '\\'")

    query = base_query
    if conditions:
        query += " WHERE " + " AND ".join(conditions)
    query += " ORDER BY name"
    return query, values


def create(db: Session, data: Mapping[str, Any]) -> dict:
    handle = data["handle"]
    duplicate = run_query(db, "SELECT handle FROM companies WHERE handle = $1", [handle])
    if duplicate:
        raise ConflictError(f"Duplicate company: {handle}")

    try:
        rows = run_query(
            db,
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}""",
            [
                handle,
                data["name"],
                data["description"],
                data.get("numEmployees"),
                data.get("logoUrl"),
            ],
        )
        db.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent insert, or the name is taken.
        db.rollback()
        raise ConflictError(f"Duplicate company handle or name: {handle}, {data['name']}") from exc

    logger.info("Created company %s", handle)
    return rows[0]


def find_all(db: Session, filters: Mapping[str, Any] | None = None) -> list[dict]:
    query, values = build_filter_query(BASE_QUERY, filters)
    return run_query(db, query, values)


def get(db: Session, handle: str) -> dict:
    """Return the company with its jobs (``[{id, title, salary, equity}]``)."""
    rows = run_query(db, f"{BASE_QUERY} WHERE handle = $1", [handle])
    if not rows:
        raise NotFoundError(f"No company: {handle}")
    company = rows[0]

    jobs = run_query(
        db,
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle],
    )
    company["jobs"] = [{**job, "equity": format_equity(job["equity"])} for job in jobs]
    return company


def update(db: Session, handle: str, data: Mapping[str, Any]) -> dict:
    """Partial update: only the fields present in ``data`` change."""
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    handle_idx = f"${len(values) + 1}"

    query = f"""UPDATE companies
                SET {set_cols}
                WHERE handle = {handle_idx}
                RETURNING {COMPANY_COLUMNS}"""
    try:
        rows = run_query(db, query, [*values, handle])
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise BadRequestError(f"Invalid update for company: {handle}") from exc

    if not rows:
        raise NotFoundError(f"No company: {handle}")
    return rows[0]


def remove(db: Session, handle: str) -> None:
    rows = run_query(
        db,
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        [handle],
    )
    db.commit()
    if not rows:
        raise NotFoundError(f"No company: {handle}")
    logger.info("Deleted company %s", handle)
