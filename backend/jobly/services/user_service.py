import logging
from typing import Any, Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.database import run_query
from jobly.errors import BadRequestError, ConflictError, NotFoundError, UnauthorizedError
from jobly.utils.security import hash_password, verify_password
from jobly.utils.sql import sql_for_partial_update

logger = logging.getLogger(__name__)

JS_TO_SQL = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}

USER_COLUMNS = """username,
       first_name AS "firstName",
       last_name AS "lastName",
       email,
       is_admin AS "isAdmin\""""


def _to_user(row: dict) -> dict:
    user = {**row, "isAdmin": bool(row["isAdmin"])}
    user.pop("password", None)
    return user


def authenticate(db: Session, username: str, password: str) -> dict:
    """Return the user if ``password`` matches, else raise UnauthorizedError."""
    rows = run_query(
        db,
        f"SELECT {USER_COLUMNS}, password FROM users WHERE username = $1",
        [username],
    )
    if rows and verify_password(rows[0]["password"], password):
        return _to_user(rows[0])
    logger.info("Failed login for %s", username)
    raise UnauthorizedError("Invalid username/password")


def register(db: Session, data: Mapping[str, Any]) -> dict:
    username = data["username"]
    duplicate = run_query(db, "SELECT username FROM users WHERE username = $1", [username])
    if duplicate:
        raise ConflictError(f"Duplicate username: {username}")

    try:
        rows = run_query(
            db,
            f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
                VALUES ($1, $2, $3, $4, $5, $6)
                RETURNING {USER_COLUMNS}""",
            [
                username,
                hash_password(data["password"]),
                data["firstName"],
                data["lastName"],
                data["email"],
                bool(data.get("isAdmin", False)),
            ],
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError(f"Duplicate username or email: {username}") from exc

    logger.info("Registered user %s", username)
    return _to_user(rows[0])


def find_all(db: Session) -> list[dict]:
    rows = run_query(db, f"SELECT {USER_COLUMNS} FROM users ORDER BY username")
    return [_to_user(row) for row in rows]


def get(db: Session, username: str) -> dict:
    rows = run_query(db, f"SELECT {USER_COLUMNS} FROM users WHERE username = $1", [username])
    if not rows:
        raise NotFoundError(f"No user: {username}")
    return _to_user(rows[0])


def update(db: Session, username: str, data: Mapping[str, Any]) -> dict:
    """Partial update; a supplied password is hashed before it is stored."""
    if data.get("password"):
        data = {**data, "password": hash_password(data["password"])}
    set_cols, values = sql_for_partial_update(data, JS_TO_SQL)
    username_idx = f"${len(values) + 1}"

    query = f"""UPDATE users
                SET {set_cols}
                WHERE username = {username_idx}
                RETURNING {USER_COLUMNS}"""
    try:
        rows = run_query(db, query, [*values, username])
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise BadRequestError(f"Invalid update for user: {username}") from exc

    if not rows:
        raise NotFoundError(f"No user: {username}")
    return _to_user(rows[0])


def remove(db: Session, username: str) -> None:
    rows = run_query(
        db,
        "DELETE FROM users WHERE username = $1 RETURNING username",
        [username],
    )
    db.commit()
    if not rows:
        raise NotFoundError(f"No user: {username}")
    logger.info("Deleted user %s", username)
