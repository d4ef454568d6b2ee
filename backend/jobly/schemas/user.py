from pydantic import Field

from jobly.schemas.base import CamelModel, StrictCamelModel


class LoginRequest(StrictCamelModel):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1)


class UserRegister(StrictCamelModel):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=72)
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    email: str = Field(min_length=6, max_length=60, pattern=r"^[^@\s]+@[^@\s]+$")


class UserCreate(UserRegister):
    is_admin: bool = False


class UserUpdate(StrictCamelModel):
    password: str | None = Field(None, min_length=5, max_length=72)
    first_name: str | None = Field(None, min_length=1, max_length=30)
    last_name: str | None = Field(None, min_length=1, max_length=30)
    email: str | None = Field(None, min_length=6, max_length=60, pattern=r"^[^@\s]+@[^@\s]+$")


class User(CamelModel):
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserResponse(CamelModel):
    user: User


class UserCreatedResponse(CamelModel):
    user: User
    token: str


class UserListResponse(CamelModel):
    users: list[User]


class UserDeleted(CamelModel):
    deleted: str


class TokenResponse(CamelModel):
    token: str
