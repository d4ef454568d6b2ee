from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.dependencies import require_admin, require_admin_or_correct_user
from jobly.schemas.user import (
    UserCreate,
    UserCreatedResponse,
    UserDeleted,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from jobly.services import user_service
from jobly.utils.security import create_token

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserCreatedResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_user(req: UserCreate, db: Session = Depends(get_db)):
    """Admin-only signup; unlike /auth/register this may create admins."""
    user = user_service.register(db, req.model_dump(by_alias=True))
    return {"user": user, "token": create_token(user)}


@router.get("", response_model=UserListResponse, dependencies=[Depends(require_admin)])
async def list_users(db: Session = Depends(get_db)):
    return {"users": user_service.find_all(db)}


@router.get(
    "/{username}",
    response_model=UserResponse,
    dependencies=[Depends(require_admin_or_correct_user)],
)
async def get_user(username: str, db: Session = Depends(get_db)):
    return {"user": user_service.get(db, username)}


@router.patch(
    "/{username}",
    response_model=UserResponse,
    dependencies=[Depends(require_admin_or_correct_user)],
)
async def update_user(username: str, req: UserUpdate, db: Session = Depends(get_db)):
    update_data = req.model_dump(exclude_unset=True, by_alias=True)
    return {"user": user_service.update(db, username, update_data)}


@router.delete(
    "/{username}",
    response_model=UserDeleted,
    dependencies=[Depends(require_admin_or_correct_user)],
)
async def delete_user(username: str, db: Session = Depends(get_db)):
    user_service.remove(db, username)
    return {"deleted": username}
