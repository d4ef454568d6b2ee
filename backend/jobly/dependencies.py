import re

from fastapi import Depends, Header

from jobly.errors import ForbiddenError, UnauthorizedError
from jobly.utils.security import decode_token

_BEARER_PREFIX = re.compile(r"^[Bb]earer ")


async def get_current_user(authorization: str | None = Header(None)) -> dict | None:
    """Token payload (``{username, isAdmin}``) of the caller, if any.

    A missing or invalid token is not an error here; the guards below decide.
    """
    if not authorization:
        return None
    token = _BEARER_PREFIX.sub("", authorization).strip()
    return decode_token(token)


async def require_logged_in(user: dict | None = Depends(get_current_user)) -> dict:
    if not user:
        raise UnauthorizedError("Unauthorized - please log in")
    return user


async def require_admin(user: dict | None = Depends(get_current_user)) -> dict:
    if not user or not user["isAdmin"]:
        raise UnauthorizedError("Unauthorized - must be logged in to an admin account")
    return user


async def require_admin_or_correct_user(
    username: str, user: dict | None = Depends(get_current_user)
) -> dict:
    if not user:
        raise UnauthorizedError("Unauthorized - please log in")
    if not (user["isAdmin"] or user["username"] == username):
        raise ForbiddenError(f"Forbidden - changes can only be made by {username} or an admin")
    return user
