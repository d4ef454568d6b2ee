"""Data access for jobs.

Jobs are addressed by their generated integer ``id``; ``title`` is an
ordinary, editable attribute.
"""

import logging
from decimal import Decimal
from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.database import run_query
from jobly.errors import BadRequestError, ConflictError, NotFoundError
from jobly.utils.sql import escape_like, sql_for_partial_update

logger = logging.getLogger(__name__)

JS_TO_SQL = {"companyHandle": "company_handle"}

JOB_COLUMNS = """id,
       title,
       salary,
       equity,
       company_handle AS "companyHandle\""""

BASE_QUERY = f"SELECT {JOB_COLUMNS} FROM jobs"


def format_equity(value: Any) -> str | None:
    """Render a stored equity value as a decimal string ("0", "0.08")."""
    if value is None:
        return None
    return str(Decimal(str(value)))


def _equity_param(value: Any) -> str | None:
    # sqlite3 cannot bind Decimal; NUMERIC affinity converts the text back.
    return None if value is None else str(value)


def _to_job(row: dict) -> dict:
    return {**row, "equity": format_equity(row["equity"])}


def build_filter_query(
    base_query: str, filters: Mapping[str, Any] | None = None
) -> tuple[str, list[Any]]:
    """Append the WHERE and ORDER BY clauses for a job search.

    Recognised filters, applied in this order: ``minSalary``, ``hasEquity``
    (true keeps only jobs with equity above zero; false or missing does not
    restrict) and ``title`` (case-insensitive substring). Results are
    ordered by title.

    Raises BadRequestError if ``minSalary`` is negative.
    """
    filters = filters or {}
    min_salary = filters.get("minSalary")
    has_equity = filters.get("hasEquity")
    title = filters.get("title")

    if min_salary is not None and min_salary < 0:
        raise BadRequestError("Minimum salary cannot be negative")

    values: list[Any] = []
    conditions: list[str] = []

    def bind(value: Any) -> str:
        values.append(value)
        return f"${len(values)}"

    if min_salary:
        conditions.append(f"salary >= {bind(min_salary)}")
    if has_equity:
        conditions.append(f"equity > {bind(0)}")
    if title:
        pattern = f"%{escape_like(title.casefold())}%"
        conditions.append(f"casefold(title) LIKE {bind(pattern)} ESCAPE '\\'")

    query = base_query
    if conditions:
        query += " WHERE " + " AND ".join(conditions)
    query += " ORDER BY title, id"
    return query, values


def create(db: Session, data: Mapping[str, Any]) -> dict:
    title = data["title"]
    company_handle = data["companyHandle"]

    duplicate = run_query(
        db,
        "SELECT id FROM jobs WHERE title = $1 AND company_handle = $2",
        [title, company_handle],
    )
    if duplicate:
        raise ConflictError(f"Duplicate job: {title}")

    company = run_query(db, "SELECT handle FROM companies WHERE handle = $1", [company_handle])
    if not company:
        raise NotFoundError(f"No company: {company_handle}")

    try:
        rows = run_query(
            db,
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}""",
            [title, data.get("salary"), _equity_param(data.get("equity")), company_handle],
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(f"Duplicate job: {title}") from exc

    job = _to_job(rows[0])
    logger.info("Created job %s (%s) for %s", job["id"], title, company_handle)
    return job


def find_all(db: Session, filters: Mapping[str, Any] | None = None) -> list[dict]:
    query, values = build_filter_query(BASE_QUERY, filters)
    return [_to_job(row) for row in run_query(db, query, values)]


def get(db: Session, job_id: int) -> dict:
    rows = run_query(db, f"{BASE_QUERY} WHERE id = $1", [job_id])
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    return _to_job(rows[0])


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> dict:
    """Partial update: only the fields present in ``data`` change."""
    if "equity" in data:
        data = {**data, "equity": _equity_param(data["equity"])}
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    id_idx = f"${len(values) + 1}"

    query = f"""UPDATE jobs
                SET {set_cols}
                WHERE id = {id_idx}
                RETURNING {JOB_COLUMNS}"""
    try:
        rows = run_query(db, query, [*values, job_id])
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise BadRequestError(f"Invalid update for job: {job_id}") from exc

    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    return _to_job(rows[0])


def remove(db: Session, job_id: int) -> None:
    rows = run_query(db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
    db.commit()
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("Deleted job %s", job_id)
