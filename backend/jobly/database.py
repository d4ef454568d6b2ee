import logging
import re
from typing import Any, Sequence

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from jobly.config import settings

logger = logging.getLogger(__name__)

# Quoted literals and identifiers are matched first so a "$n" inside them
# is left alone; only a bare "$n" captures group 1.
_POSITIONAL_PARAM = re.compile(r"""'(?:[^']|'')*'|"(?:[^"]|"")*"|\$(\d+)""")


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # SQLite's LOWER() only folds ASCII; searches fold both sides in Python.
    dbapi_conn.create_function("casefold", 1, _casefold, deterministic=True)


def _bind_placeholder(match: re.Match) -> str:
    position = match.group(1)
    return f":p{position}" if position else match.group(0)


def get_engine(database_url: str | None = None) -> Engine:
    url = database_url or settings.database_url
    if url.startswith("sqlite"):
        engine = create_engine(url, connect_args={"check_same_thread": False})
        event.listen(engine, "connect", _set_sqlite_pragmas)
    else:
        engine = create_engine(url, pool_pre_ping=True)
    return engine


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def run_query(db: Session, sql: str, values: Sequence[Any] = ()) -> list[dict[str, Any]]:
    """Execute ``sql`` written with positional ``$1 .. $n`` placeholders.

    Placeholders are rewritten to SQLAlchemy named binds (``:p1 .. :pn``) and
    ``values`` are bound in order, so callers compose SQL text and bind lists
    independently and never interpolate a value into the statement.

    Returns the result rows as plain dicts keyed by the projected column
    names (or aliases). Statements that return no rows yield ``[]``.

    A ``$n`` inside a quoted string literal or quoted identifier is not a
    placeholder and is passed through unchanged.
    """
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    result = db.execute(text(_POSITIONAL_PARAM.sub(_bind_placeholder, sql)), params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings()]


SCHEMA_SQL = """\
-- ============================================================
-- COMPANIES
-- ============================================================
CREATE TABLE IF NOT EXISTS companies (
    handle        VARCHAR(25) PRIMARY KEY,
    name          TEXT NOT NULL UNIQUE,
    description   TEXT NOT NULL,
    num_employees INTEGER CHECK (num_employees >= 0),
    logo_url      TEXT
);

-- ============================================================
-- JOBS
-- ============================================================
CREATE TABLE IF NOT EXISTS jobs (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    title          TEXT NOT NULL,
    salary         INTEGER CHECK (salary >= 0),
    equity         NUMERIC CHECK (equity >= 0 AND equity <= 1.0),
    company_handle VARCHAR(25) NOT NULL
                   REFERENCES companies(handle) ON DELETE CASCADE,
    UNIQUE (title, company_handle)
);

CREATE INDEX IF NOT EXISTS idx_jobs_title ON jobs(title);
CREATE INDEX IF NOT EXISTS idx_jobs_company ON jobs(company_handle);

-- ============================================================
-- USERS
-- ============================================================
CREATE TABLE IF NOT EXISTS users (
    username   VARCHAR(25) PRIMARY KEY,
    password   TEXT NOT NULL,
    first_name TEXT NOT NULL,
    last_name  TEXT NOT NULL,
    email      TEXT NOT NULL UNIQUE CHECK (instr(email, '@') > 1),
    is_admin   BOOLEAN NOT NULL DEFAULT FALSE
);
"""


def init_db(bind: Engine | None = None):
    target = bind or engine
    statements = [s.strip() for s in SCHEMA_SQL.split(";")]
    with target.begin() as conn:
        for statement in statements:
            if statement:
                conn.execute(text(statement))
    logger.info("Database schema ready.")
