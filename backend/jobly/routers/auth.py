from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.dependencies import require_logged_in
from jobly.schemas.user import LoginRequest, TokenResponse, UserRegister, UserResponse
from jobly.services import user_service
from jobly.utils.security import create_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=TokenResponse)
async def login(req: LoginRequest, db: Session = Depends(get_db)):
    user = user_service.authenticate(db, req.username, req.password)
    return {"token": create_token(user)}


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(req: UserRegister, db: Session = Depends(get_db)):
    # Self-registration never grants admin.
    user = user_service.register(db, {**req.model_dump(by_alias=True), "isAdmin": False})
    return {"token": create_token(user)}


@router.get("/me", response_model=UserResponse)
async def me(current: dict = Depends(require_logged_in), db: Session = Depends(get_db)):
    return {"user": user_service.get(db, current["username"])}
