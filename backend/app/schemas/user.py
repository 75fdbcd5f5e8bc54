from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field

from app.models.user import Role, Status

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _check_password(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


Password = Annotated[str, Field(min_length=6), AfterValidator(_check_password)]


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: Password
    profile_image: str | None = Field(None, max_length=500)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class ProfileUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    password: Password | None = None
    profile_image: str | None = Field(None, max_length=500)


class UserAdminUpdate(ProfileUpdate):
    email: EmailStr | None = None
    status_id: Status | None = None
    role_id: Role | None = None


class UserRead(BaseModel):
    """Account as returned to clients; the password hash never leaves the store."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    status_id: int
    role_id: int
    profile_image: str
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    message: str
    user: UserRead


class MessageResponse(BaseModel):
    message: str
